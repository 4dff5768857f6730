from __future__ import annotations

import pytest
from PIL import Image

from title_texture.font import parse_descriptor

WHITE = (255, 255, 255, 255)
BLUE = (0, 0, 255, 255)

DESCRIPTOR = b"""info face="Minecraft Debugger" size=8 bold=0 italic=0
common lineHeight=10 base=8 scaleW=16 scaleH=8 pages=1 packed=0
page id=0 file="font.png"
chars count=2
char id=65 x=0 y=0 width=8 height=8 xoffset=0 yoffset=0 xadvance=10 page=0 chnl=15
char id=66 x=8 y=0 width=8 height=8 xoffset=0 yoffset=0 xadvance=10 page=0 chnl=15
kernings count=1
kerning first=65 second=66 amount=-1
"""


def make_atlas() -> Image.Image:
    atlas = Image.new("RGBA", (16, 8), (0, 0, 0, 0))
    atlas.paste(Image.new("RGBA", (8, 8), WHITE), (0, 0))
    atlas.paste(Image.new("RGBA", (8, 8), BLUE), (8, 0))
    return atlas


@pytest.fixture
def font():
    return parse_descriptor(DESCRIPTOR)


@pytest.fixture
def atlas():
    return make_atlas()


@pytest.fixture
def tile():
    return Image.new("RGBA", (16, 16), (0, 0, 0, 255))
