"""Exceptions raised while building a title texture."""

from __future__ import annotations


class TitleTextureError(Exception):
    pass


class DescriptorError(TitleTextureError, ValueError):
    """The font descriptor could not be read."""


class DescriptorEncodingError(DescriptorError):
    pass


class DescriptorFieldMissing(DescriptorError):
    def __init__(self, key: str, line: str, line_number: int) -> None:
        self.key = key
        self.line = line
        self.line_number = line_number
        super().__init__(f"missing key {key!r} on line {line_number}: {line!r}")


class DescriptorFieldParseError(DescriptorError):
    def __init__(self, key: str, value: str, line: str, line_number: int) -> None:
        self.key = key
        self.value = value
        self.line = line
        self.line_number = line_number
        super().__init__(
            f"invalid value {value!r} for key {key!r} on line {line_number}: {line!r}"
        )


class AtlasBoundsError(TitleTextureError, ValueError):
    pass
