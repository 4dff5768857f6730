import pytest
from PIL import Image

from title_texture.exceptions import AtlasBoundsError
from title_texture.font import BitmapFont, GlyphMetric, parse_descriptor
from title_texture.layout import BASELINE_COLOR, measure_text, render_text_layer

from conftest import BLUE, WHITE

CLEAR = (0, 0, 0, 0)


def single_glyph_font(**overrides):
    fields = dict(id=65, x=0, y=0, width=8, height=8, y_offset=0, x_advance=10)
    fields.update(overrides)
    return BitmapFont(glyphs={fields["id"]: GlyphMetric(**fields)})


def test_single_glyph_canvas(atlas):
    layer = render_text_layer(single_glyph_font(), atlas, "A", use_kerning=False)
    assert layer.image.size == (8, 18)
    assert layer.base_line == 5
    assert layer.max_height == 8
    for x in range(8):
        assert layer.image.getpixel((x, 5)) == BASELINE_COLOR
    # glyph bottom sits on base_line - y_offset; the cell is trimmed to 6 columns
    assert layer.image.getpixel((0, 0)) == WHITE
    assert layer.image.getpixel((5, 4)) == WHITE
    assert layer.image.getpixel((6, 0)) == CLEAR
    assert layer.image.getpixel((0, 6)) == CLEAR


def test_width_is_sum_of_trimmed_advances(font):
    assert measure_text(font, "AB") == (16, 8)
    assert measure_text(font, "ABBA") == (32, 8)


def test_absent_glyphs_contribute_nothing(font, atlas):
    assert measure_text(font, "?!") == (0, 0)
    layer = render_text_layer(font, atlas, "?A!", use_kerning=True)
    assert layer.width == 8


def test_zero_advance_glyph_gives_zero_width(atlas):
    font = single_glyph_font(x_advance=0)
    layer = render_text_layer(font, atlas, "A", use_kerning=False)
    assert layer.width == 0
    assert layer.height == 18


def test_empty_text(font, atlas):
    layer = render_text_layer(font, atlas, "", use_kerning=True)
    assert layer.image.size == (0, 10)


def test_cursor_advance_without_kerning(font, atlas):
    layer = render_text_layer(font, atlas, "AB", use_kerning=False)
    assert layer.width == 16
    assert layer.image.getpixel((5, 0)) == WHITE
    assert layer.image.getpixel((6, 0)) == CLEAR
    assert layer.image.getpixel((7, 0)) == BLUE
    assert layer.image.getpixel((12, 0)) == BLUE
    assert layer.image.getpixel((13, 0)) == CLEAR


def test_cursor_advance_with_kerning(font, atlas):
    layer = render_text_layer(font, atlas, "AB", use_kerning=True)
    assert layer.image.getpixel((6, 0)) == BLUE
    assert layer.image.getpixel((11, 0)) == BLUE
    assert layer.image.getpixel((12, 0)) == CLEAR


def test_negative_kerning_saturates_at_zero(atlas):
    font = parse_descriptor(
        b"char id=66 x=8 y=0 width=8 height=8 yoffset=0 xadvance=10\n"
        b"char id=32 x=0 y=0 width=0 height=0 yoffset=0 xadvance=3\n"
        b"kerning first=32 second=66 amount=-100\n"
    )
    layer = render_text_layer(font, atlas, " B", use_kerning=True)
    assert layer.image.getpixel((0, 0)) == BLUE


def test_kerning_off_matches_empty_kerning_table(font, atlas):
    plain = BitmapFont(glyphs=font.glyphs)
    off = render_text_layer(font, atlas, "ABAB", use_kerning=False)
    empty = render_text_layer(plain, atlas, "ABAB", use_kerning=True)
    assert off.image.tobytes() == empty.image.tobytes()


def test_accepts_code_point_sequence(font, atlas):
    by_str = render_text_layer(font, atlas, "AB", use_kerning=True)
    by_ids = render_text_layer(font, atlas, [65, 66], use_kerning=True)
    assert by_str.image.tobytes() == by_ids.image.tobytes()


def test_glyph_outside_atlas(atlas):
    font = single_glyph_font(x=12)
    with pytest.raises(AtlasBoundsError):
        render_text_layer(font, atlas, "A", use_kerning=False)


def test_atlas_is_not_mutated(font, atlas):
    before = atlas.tobytes()
    render_text_layer(font, atlas, "AB", use_kerning=True)
    assert atlas.tobytes() == before


def test_palette_atlas_is_converted(font):
    atlas = Image.new("P", (16, 8), 1)
    atlas.putpalette([0, 0, 0, 255, 255, 255] + [0] * 762)
    layer = render_text_layer(font, atlas, "A", use_kerning=False)
    assert layer.image.getpixel((0, 0)) == WHITE
