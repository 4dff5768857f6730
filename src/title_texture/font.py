from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from .exceptions import (
    DescriptorEncodingError,
    DescriptorFieldMissing,
    DescriptorFieldParseError,
)

logger = logging.getLogger(__name__)

CHAR_PREFIX = "char id="
KERNING_PREFIX = "kerning first="

CHAR_KEYS = ("id", "x", "y", "width", "height", "yoffset", "xadvance")
KERNING_KEYS = ("first", "second", "amount")
SIGNED_KEYS = frozenset({"yoffset", "amount"})

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class GlyphMetric:
    id: int
    x: int
    y: int
    width: int
    height: int
    y_offset: int
    x_advance: int

    @property
    def bottom(self) -> int:
        return self.height + self.y_offset

    @property
    def box(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.x + self.width, self.y + self.height)


GlyphTable = Dict[int, GlyphMetric]
KerningTable = Dict[Tuple[int, int], int]


@dataclass(frozen=True)
class BitmapFont:
    glyphs: GlyphTable = field(default_factory=dict)
    kernings: KerningTable = field(default_factory=dict)

    @property
    def max_y_offset(self) -> int:
        if not self.glyphs:
            return 0
        return max(glyph.y_offset for glyph in self.glyphs.values())

    def glyph(self, code_point: int) -> GlyphMetric | None:
        return self.glyphs.get(code_point)

    def kerning(self, first: int, second: int) -> int:
        return self.kernings.get((first, second), 0)


def split_fields(line: str) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    for token in line.split():
        if "=" not in token:
            continue
        key, value = token.split("=", 1)
        fields[key] = value
    return fields


def _field_int(fields: Dict[str, str], key: str, line: str, line_number: int) -> int:
    if key not in fields:
        raise DescriptorFieldMissing(key, line, line_number)
    value = fields[key]
    if not _INT_RE.fullmatch(value):
        raise DescriptorFieldParseError(key, value, line, line_number)
    number = int(value)
    if number < 0 and key not in SIGNED_KEYS:
        raise DescriptorFieldParseError(key, value, line, line_number)
    return number


def iter_records(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, line) for every char and kerning record."""
    for line_number, line in enumerate(text.splitlines(), start=1):
        if line.startswith(CHAR_PREFIX) or line.startswith(KERNING_PREFIX):
            yield line_number, line


def parse_char(line: str, line_number: int = 0) -> GlyphMetric:
    fields = split_fields(line)
    values = {key: _field_int(fields, key, line, line_number) for key in CHAR_KEYS}
    return GlyphMetric(
        id=values["id"],
        x=values["x"],
        y=values["y"],
        width=values["width"],
        height=values["height"],
        y_offset=values["yoffset"],
        x_advance=values["xadvance"],
    )


def parse_kerning(line: str, line_number: int = 0) -> Tuple[Tuple[int, int], int]:
    fields = split_fields(line)
    first, second, amount = (
        _field_int(fields, key, line, line_number) for key in KERNING_KEYS
    )
    return (first, second), amount


def parse_descriptor(data: bytes) -> BitmapFont:
    """Parse an AngelCode text descriptor into glyph and kerning tables.

    Only ``char id=`` and ``kerning first=`` records are read; every other
    line (info, common, page, chars count, ...) is ignored. Later records
    with an id or pair already seen replace the earlier entry.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DescriptorEncodingError(f"font descriptor is not valid UTF-8: {exc}") from exc

    glyphs: GlyphTable = {}
    kernings: KerningTable = {}
    for line_number, line in iter_records(text):
        if line.startswith(CHAR_PREFIX):
            glyph = parse_char(line, line_number)
            glyphs[glyph.id] = glyph
        else:
            pair, amount = parse_kerning(line, line_number)
            kernings[pair] = amount

    logger.debug("parsed %d glyphs and %d kerning pairs", len(glyphs), len(kernings))
    return BitmapFont(glyphs=glyphs, kernings=kernings)


def serialize_descriptor(font: BitmapFont) -> bytes:
    lines = []
    for glyph_id in sorted(font.glyphs):
        glyph = font.glyphs[glyph_id]
        lines.append(
            f"char id={glyph.id} x={glyph.x} y={glyph.y} width={glyph.width} "
            f"height={glyph.height} yoffset={glyph.y_offset} xadvance={glyph.x_advance}"
        )
    for (first, second) in sorted(font.kernings):
        amount = font.kernings[(first, second)]
        lines.append(f"kerning first={first} second={second} amount={amount}")
    return "".join(f"{line}\n" for line in lines).encode("utf-8")
