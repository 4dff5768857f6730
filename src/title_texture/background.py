from __future__ import annotations

import math

from PIL import Image, ImageDraw

from .canvas import new_canvas, overlay

MIN_BACKGROUND_HEIGHT = 32

CHECKER_LIGHT = (214, 214, 214, 255)
CHECKER_DARK = (96, 96, 96, 255)


def tiled_width(tile_width: int, width: int) -> int:
    """Smallest positive multiple of ``tile_width`` covering ``width``."""
    if tile_width <= 0:
        raise ValueError(f"background tile must have a positive width, got {tile_width}")
    return max(1, math.ceil(width / tile_width)) * tile_width


def tile_background(tile: Image.Image, width: int, height: int) -> Image.Image:
    """Repeat ``tile`` over a canvas at least ``width`` wide and exactly ``height`` tall.

    The width is rounded up to whole tiles and never cropped back; tiles in
    the last row are clipped to ``height``.
    """
    tile = tile.convert("RGBA")
    tile_w, tile_h = tile.size
    if tile_h <= 0:
        raise ValueError(f"background tile must have a positive height, got {tile_h}")
    canvas = new_canvas((tiled_width(tile_w, width), height))
    for top in range(0, height, tile_h):
        for left in range(0, canvas.width, tile_w):
            overlay(canvas, tile, left, top)
    return canvas


def checker_tile(size: int = 16, cells: int = 2) -> Image.Image:
    tile = Image.new("RGBA", (size, size), CHECKER_LIGHT)
    draw = ImageDraw.Draw(tile)
    cell = max(1, size // cells)
    for row in range(cells):
        for col in range(cells):
            if (row + col) % 2:
                draw.rectangle(
                    (col * cell, row * cell, (col + 1) * cell - 1, (row + 1) * cell - 1),
                    fill=CHECKER_DARK,
                )
    return tile
