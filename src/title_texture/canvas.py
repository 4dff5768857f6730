"""Small raster helpers shared by the compositing stages."""

from __future__ import annotations

from typing import Tuple

from PIL import Image

TRANSPARENT = (0, 0, 0, 0)


def new_canvas(size: Tuple[int, int]) -> Image.Image:
    return Image.new("RGBA", size, TRANSPARENT)


def overlay(base: Image.Image, top: Image.Image, x: int, y: int) -> None:
    """Source-over composite ``top`` onto ``base`` at (x, y), clipped to ``base``.

    Offsets may be negative or reach past the edges of ``base``; only the
    overlapping region is written.
    """
    left = max(x, 0)
    upper = max(y, 0)
    right = min(x + top.width, base.width)
    lower = min(y + top.height, base.height)
    if right <= left or lower <= upper:
        return
    source = (left - x, upper - y, right - x, lower - y)
    base.alpha_composite(top, dest=(left, upper), source=source)
