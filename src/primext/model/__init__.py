"""Closed enumerations shared by the text and mapping layers."""

from __future__ import annotations

from enum import Enum, IntFlag


class GuidFormat(str, Enum):
    """Textual GUID layouts accepted by the strict parser."""

    D = "D"   # 32 digits in hyphen-separated groups
    N = "N"   # 32 digits
    B = "B"   # D wrapped in braces
    P = "P"   # D wrapped in parentheses
    X = "X"   # C-style initializer of hex literals

    @classmethod
    def normalize(cls, specifier: "str | GuidFormat | None") -> "GuidFormat":
        """Resolve a specifier (either case) to a member, falling back to ``D``."""
        if isinstance(specifier, GuidFormat):
            return specifier
        if isinstance(specifier, str) and len(specifier) == 1:
            try:
                return cls(specifier.upper())
            except ValueError:
                pass
        return cls.D


class NumberStyles(IntFlag):
    """Which textual variations a numeric parse accepts."""

    NONE = 0
    ALLOW_LEADING_WHITE = 0x0001
    ALLOW_TRAILING_WHITE = 0x0002
    ALLOW_LEADING_SIGN = 0x0004
    ALLOW_TRAILING_SIGN = 0x0008
    ALLOW_PARENTHESES = 0x0010
    ALLOW_DECIMAL_POINT = 0x0020
    ALLOW_THOUSANDS = 0x0040
    ALLOW_EXPONENT = 0x0080
    ALLOW_HEX_SPECIFIER = 0x0200

    INTEGER = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_LEADING_SIGN
    HEX_NUMBER = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_HEX_SPECIFIER
    NUMBER = INTEGER | ALLOW_TRAILING_SIGN | ALLOW_DECIMAL_POINT | ALLOW_THOUSANDS
    FLOAT = INTEGER | ALLOW_DECIMAL_POINT | ALLOW_EXPONENT
    ANY = NUMBER | ALLOW_PARENTHESES | ALLOW_EXPONENT
