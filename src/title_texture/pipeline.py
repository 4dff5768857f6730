from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from .background import checker_tile
from .compose import DEFAULT_SCALE, render_title
from .exceptions import TitleTextureError
from .font import BitmapFont, parse_descriptor

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("title_texture_map")
OUTPUT_NAME = "title_texture_map.png"


@dataclass(frozen=True)
class Assets:
    font: BitmapFont
    atlas: Image.Image
    background: Image.Image


def load_image(data: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    return image.convert("RGBA")


def _read_asset(path: Path, kind: str) -> bytes:
    if not path.exists():
        raise FileNotFoundError(f"missing {kind} at {path}")
    return path.read_bytes()


def load_assets(
    font_path: Path,
    atlas_path: Path,
    background_path: Path | None = None,
) -> Assets:
    font = parse_descriptor(_read_asset(Path(font_path), "font descriptor"))
    atlas = load_image(_read_asset(Path(atlas_path), "font atlas"))
    if background_path is None:
        background = checker_tile()
    else:
        background = load_image(_read_asset(Path(background_path), "background image"))
    logger.debug(
        "loaded %d glyphs, atlas %dx%d, background %dx%d",
        len(font.glyphs), atlas.width, atlas.height, background.width, background.height,
    )
    return Assets(font=font, atlas=atlas, background=background)


def encode_png(image: Image.Image) -> bytes:
    if image.width == 0 or image.height == 0:
        raise TitleTextureError(f"cannot encode an empty {image.width}x{image.height} image")
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def write_png(image: Image.Image, output_dir: Path = DEFAULT_OUTPUT_DIR) -> Path:
    # encode first so a failed render never leaves a partial file behind
    data = encode_png(image)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / OUTPUT_NAME
    output_path.write_bytes(data)
    return output_path


def render_to_file(
    assets: Assets,
    text: str,
    use_kerning: bool,
    scale: float = DEFAULT_SCALE,
    output_dir: Path = DEFAULT_OUTPUT_DIR,
) -> tuple[Path, Image.Image]:
    title = render_title(
        assets.font, assets.atlas, assets.background, text, use_kerning, scale
    )
    return write_png(title, output_dir), title
