import pytest
from PIL import Image

from title_texture.background import checker_tile, tile_background, tiled_width

RED = (255, 0, 0, 255)


def test_single_tile_clipped_to_height():
    tile = Image.new("RGBA", (16, 16), RED)
    canvas = tile_background(tile, 10, 10)
    assert canvas.size == (16, 10)
    assert set(canvas.getdata()) == {RED}


def test_width_rounds_up_to_whole_tiles():
    tile = Image.new("RGBA", (16, 16), RED)
    canvas = tile_background(tile, 33, 32)
    assert canvas.size == (48, 32)
    assert set(canvas.getdata()) == {RED}


def test_zero_width_still_gets_one_tile():
    tile = checker_tile()
    canvas = tile_background(tile, 0, 32)
    assert canvas.size == (16, 32)


@pytest.mark.parametrize("width", [1, 15, 16, 17, 100])
def test_tiled_width_is_covering_multiple(width):
    result = tiled_width(16, width)
    assert result % 16 == 0
    assert result >= width
    assert result - width < 16


def test_tiles_repeat_pattern():
    tile = checker_tile(size=4, cells=2)
    canvas = tile_background(tile, 8, 8)
    for x in range(8):
        for y in range(8):
            assert canvas.getpixel((x, y)) == tile.getpixel((x % 4, y % 4))


def test_checker_tile_has_two_colours():
    tile = checker_tile()
    assert tile.size == (16, 16)
    assert tile.getpixel((0, 0)) != tile.getpixel((8, 0))
    assert tile.getpixel((0, 0)) == tile.getpixel((8, 8))


def test_rejects_empty_tile():
    with pytest.raises(ValueError):
        tile_background(Image.new("RGBA", (0, 16)), 10, 10)
