from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

from PIL import Image

from .canvas import new_canvas, overlay
from .exceptions import AtlasBoundsError
from .font import BitmapFont, GlyphMetric

logger = logging.getLogger(__name__)

BASELINE_COLOR = (255, 0, 0, 255)

# Advance reductions tightening the pitch of the bundled pixel font.
WIDTH_ADVANCE_TRIM = 2
CURSOR_ADVANCE_TRIM = 3

CANVAS_PADDING = 10
BASELINE_PADDING = 5


@dataclass(frozen=True)
class TextLayer:
    image: Image.Image
    base_line: int
    max_height: int

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


def code_points(text: str | Iterable[int]) -> list[int]:
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    return list(text)


def measure_text(font: BitmapFont, text: str | Iterable[int]) -> Tuple[int, int]:
    """Return (total_width, max_height) of ``text``; unknown code points count as nothing."""
    total_width = 0
    max_height = 0
    for cid in code_points(text):
        glyph = font.glyph(cid)
        if glyph is None:
            continue
        total_width += max(0, glyph.x_advance - WIDTH_ADVANCE_TRIM)
        max_height = max(max_height, glyph.bottom)
    return total_width, max_height


def crop_glyph(atlas: Image.Image, glyph: GlyphMetric) -> Image.Image:
    left, upper, right, lower = glyph.box
    if right > atlas.width or lower > atlas.height:
        raise AtlasBoundsError(
            f"glyph {glyph.id} rectangle {glyph.box} lies outside the "
            f"{atlas.width}x{atlas.height} atlas"
        )
    # one pixel of padding is shaved off each side of the cell
    width = max(1, glyph.width - 2)
    box = (glyph.x + 1, glyph.y, glyph.x + 1 + width, glyph.y + glyph.height)
    return atlas.crop(box).convert("RGBA")


def paint_baseline(canvas: Image.Image, base_line: int) -> None:
    if canvas.width == 0 or not 0 <= base_line < canvas.height:
        return
    pixels = canvas.load()
    for x in range(canvas.width):
        pixels[x, base_line] = BASELINE_COLOR


def render_text_layer(
    font: BitmapFont,
    atlas: Image.Image,
    text: str | Iterable[int],
    use_kerning: bool,
) -> TextLayer:
    cids = code_points(text)
    total_width, max_height = measure_text(font, cids)
    canvas = new_canvas((total_width, max_height + CANVAS_PADDING))
    base_line = font.max_y_offset + BASELINE_PADDING
    paint_baseline(canvas, base_line)

    cursor_x = 0
    last_id: int | None = None
    for cid in cids:
        if use_kerning and last_id is not None and (last_id, cid) in font.kernings:
            cursor_x = max(0, cursor_x + font.kernings[(last_id, cid)])

        glyph = font.glyph(cid)
        if glyph is not None:
            sprite = crop_glyph(atlas, glyph)
            overlay(canvas, sprite, cursor_x, base_line - glyph.height - glyph.y_offset)
            cursor_x += max(0, glyph.x_advance - CURSOR_ADVANCE_TRIM)
        last_id = cid

    logger.debug(
        "text layer %dx%d, base line %d", canvas.width, canvas.height, base_line
    )
    return TextLayer(image=canvas, base_line=base_line, max_height=max_height)
