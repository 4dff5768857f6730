"""Highlight mask derived from the text layer.

Every column of the text layer that carries glyph ink becomes a full-height
translucent green stripe. The mask is then scaled to the title row height
and two fixed bands of rows are tinted.
"""

from __future__ import annotations

import math
from typing import Tuple

from PIL import Image

from .canvas import new_canvas
from .layout import BASELINE_COLOR

HIGHLIGHT_COLOR = (0, 255, 0, 128)
MAX_TITLE_HEIGHT = 32

# (first row, last row inclusive, rgb); rows count from the top of the strip
RECOLOR_BANDS: Tuple[Tuple[int, int, Tuple[int, int, int]], ...] = (
    (27, 32, (0, 255, 255)),
    (21, 25, (128, 0, 128)),
)


def is_ink(pixel: Tuple[int, int, int, int]) -> bool:
    return pixel[3] != 0 and tuple(pixel) != BASELINE_COLOR


def build_highlight_mask(canvas: Image.Image) -> Image.Image:
    canvas = canvas.convert("RGBA")
    width, height = canvas.size
    mask = new_canvas((width, height))
    if width == 0 or height == 0:
        return mask
    src = canvas.load()
    dst = mask.load()
    for x in range(width):
        if not any(is_ink(src[x, y]) for y in range(height)):
            continue
        for y in range(height):
            dst[x, y] = HIGHLIGHT_COLOR
    return mask


def check_scale(scale: float) -> None:
    if not math.isfinite(scale) or scale <= 0:
        raise ValueError(f"scale factor must be a positive number, got {scale!r}")


def target_height(canvas_height: int, scale: float) -> int:
    """Scaled row height, halves rounded away from zero, clamped to 32."""
    check_scale(scale)
    new_height = int(math.floor(canvas_height * scale + 0.5))
    return min(new_height, MAX_TITLE_HEIGHT)


def rescale_mask(mask: Image.Image, final_height: int) -> Image.Image:
    width = mask.width
    if width == 0 or final_height <= 0 or mask.height == 0:
        return new_canvas((width, max(final_height, 0)))
    return mask.resize((width, final_height), Image.Resampling.NEAREST)


def recolor_bands(mask: Image.Image) -> Image.Image:
    recolored = mask.convert("RGBA") if mask.mode != "RGBA" else mask.copy()
    width, height = recolored.size
    if width == 0 or height == 0:
        return recolored
    pixels = recolored.load()
    for first, last, (r, g, b) in RECOLOR_BANDS:
        for y in range(first, min(last, height - 1) + 1):
            for x in range(width):
                alpha = pixels[x, y][3]
                pixels[x, y] = (r, g, b, alpha)
    return recolored
