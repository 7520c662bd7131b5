"""Exceptions raised while decoding BSOR replays.

Every failure the decoder can report derives from :class:`DecodeError`,
which is itself a ``ValueError`` so callers that already treat malformed
input as a value error keep working.
"""

from __future__ import annotations


class DecodeError(ValueError):
    """Base class for every BSOR decode failure."""


class MagicMismatchError(DecodeError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"incorrect magic number 0x{actual:08X} (expected 0x{expected:08X})"
        )
        self.expected = expected
        self.actual = actual


class UnsupportedVersionError(DecodeError):
    def __init__(self, version: int) -> None:
        super().__init__(f"unrecognized version number {version}")
        self.version = version


class MalformedSectionError(DecodeError):
    """A section tag byte did not match the section expected at this position."""

    def __init__(self, section: str, expected: int, actual: int) -> None:
        super().__init__(
            f"header for {section} section should have byte 0x{expected:02X}, "
            f"got 0x{actual:02X}"
        )
        self.section = section
        self.expected = expected
        self.actual = actual


class TruncatedInputError(DecodeError):
    def __init__(self, offset: int, needed: int, available: int) -> None:
        super().__init__(
            f"unexpected end of data at offset {offset}: "
            f"need {needed} bytes, {available} left"
        )
        self.offset = offset
        self.needed = needed
        self.available = available


class NumericParseError(DecodeError):
    def __init__(self, field: str, text: str) -> None:
        super().__init__(f"{field} is not a valid integer: {text!r}")
        self.field = field
        self.text = text
