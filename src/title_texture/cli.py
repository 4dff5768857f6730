"""Command line entry point for the title texture generator."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from .compose import DEFAULT_SCALE
from .exceptions import TitleTextureError
from .pipeline import DEFAULT_OUTPUT_DIR, load_assets, render_to_file

PROMPT = "Please enter the text to render: "


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments, taking asset defaults from the environment."""
    parser = argparse.ArgumentParser(
        description="Render Minecraft title textures from a bitmap font."
    )
    parser.add_argument(
        "--text",
        help="Text to render. Prompted for interactively when omitted.",
    )
    parser.add_argument(
        "--kerning",
        action="store_true",
        help="Apply the kerning pairs from the font descriptor.",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=DEFAULT_SCALE,
        help="Row height scale factor applied to the highlight mask.",
    )
    parser.add_argument(
        "--font",
        default=os.environ.get("TITLE_TEXTURE_FONT"),
        required=os.environ.get("TITLE_TEXTURE_FONT") is None,
        help="Path to the AngelCode .fnt text descriptor.",
    )
    parser.add_argument(
        "--atlas",
        default=os.environ.get("TITLE_TEXTURE_ATLAS"),
        required=os.environ.get("TITLE_TEXTURE_ATLAS") is None,
        help="Path to the font atlas image.",
    )
    parser.add_argument(
        "--background",
        default=os.environ.get("TITLE_TEXTURE_BACKGROUND"),
        help="Path to the background tile. A checker tile is generated when omitted.",
    )
    parser.add_argument(
        "--output-dir",
        default=os.environ.get("TITLE_TEXTURE_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR)),
        help="Directory to write title_texture_map.png into.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log pipeline details to stderr.",
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    """Render one title texture from CLI arguments."""
    load_dotenv()
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    text = args.text if args.text is not None else input(PROMPT)

    try:
        assets = load_assets(
            Path(args.font),
            Path(args.atlas),
            Path(args.background) if args.background else None,
        )
        output_path, title = render_to_file(
            assets,
            text,
            use_kerning=args.kerning,
            scale=args.scale,
            output_dir=Path(args.output_dir),
        )
    except (TitleTextureError, ValueError, OSError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    summary = {
        "output": str(output_path),
        "width": title.width,
        "height": title.height,
        "text": text,
        "kerning": args.kerning,
    }
    print(json.dumps(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
