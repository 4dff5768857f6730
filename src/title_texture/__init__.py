"""Render Minecraft title textures from an AngelCode bitmap font."""

from .background import checker_tile, tile_background
from .compose import compose_title, render_title
from .exceptions import (
    AtlasBoundsError,
    DescriptorEncodingError,
    DescriptorError,
    DescriptorFieldMissing,
    DescriptorFieldParseError,
    TitleTextureError,
)
from .font import BitmapFont, GlyphMetric, parse_descriptor, serialize_descriptor
from .layout import TextLayer, measure_text, render_text_layer
from .mask import build_highlight_mask, recolor_bands, rescale_mask, target_height

__all__ = [
    "AtlasBoundsError",
    "BitmapFont",
    "DescriptorEncodingError",
    "DescriptorError",
    "DescriptorFieldMissing",
    "DescriptorFieldParseError",
    "GlyphMetric",
    "TextLayer",
    "TitleTextureError",
    "build_highlight_mask",
    "checker_tile",
    "compose_title",
    "measure_text",
    "parse_descriptor",
    "recolor_bands",
    "render_text_layer",
    "render_title",
    "rescale_mask",
    "serialize_descriptor",
    "target_height",
    "tile_background",
]
