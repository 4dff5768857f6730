from __future__ import annotations

import logging

from PIL import Image

from .background import MIN_BACKGROUND_HEIGHT, tile_background
from .canvas import overlay
from .font import BitmapFont
from .layout import TextLayer, render_text_layer
from .mask import (
    build_highlight_mask,
    check_scale,
    recolor_bands,
    rescale_mask,
    target_height,
)

logger = logging.getLogger(__name__)

LAYER_OFFSET = (-1, 0)
DEFAULT_SCALE = 1.5


def compose_title(background: Image.Image, layer: TextLayer, mask: Image.Image) -> Image.Image:
    """Flatten the recolored mask and the text layer onto the tiled background.

    Both layers go in one pixel to the left. The text layer keeps its
    unscaled height, so anything below the mask's height is clipped away.
    """
    final_height = mask.height
    canvas = tile_background(background, layer.width, max(final_height, MIN_BACKGROUND_HEIGHT))
    overlay(canvas, mask, *LAYER_OFFSET)
    overlay(canvas, layer.image, *LAYER_OFFSET)
    if canvas.height > final_height:
        canvas = canvas.crop((0, 0, canvas.width, final_height))
    return canvas


def render_title(
    font: BitmapFont,
    atlas: Image.Image,
    background: Image.Image,
    text: str,
    use_kerning: bool,
    scale: float = DEFAULT_SCALE,
) -> Image.Image:
    check_scale(scale)
    layer = render_text_layer(font, atlas, text, use_kerning)
    final_height = target_height(layer.height, scale)
    mask = build_highlight_mask(layer.image)
    mask = recolor_bands(rescale_mask(mask, final_height))
    title = compose_title(background, layer, mask)
    logger.debug(
        "rendered %r: layer %dx%d, title %dx%d",
        text, layer.width, layer.height, title.width, title.height,
    )
    return title
