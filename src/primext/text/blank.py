"""Blank detection and trimming beyond ``str.strip()``.

``str.strip()`` only removes Unicode whitespace. Strings coming from forms,
terminals or binary sources often carry NUL and other C0 control
characters that are just as invisible, so trimming here also removes:

  U+0000 .. U+0020   C0 controls and space
  U+007F             DEL
  U+0085             next line
  U+2028, U+2029     line and paragraph separators
"""

from __future__ import annotations

BLANK_CHARACTERS: frozenset[str] = frozenset(
    [chr(cp) for cp in range(0x00, 0x21)] + ["\x7f", "\x85", "\u2028", "\u2029"]
)

# str.strip() / str.translate() take a string / table, not a set
_BLANK_CHARS = "".join(sorted(BLANK_CHARACTERS))
_DELETE_BLANK = str.maketrans("", "", _BLANK_CHARS)


def is_blank(value: str | None) -> bool:
    """True if *value* is ``None``, empty, whitespace, or only blank characters."""
    if value is None or value == "" or value.isspace():
        return True
    return value.strip(_BLANK_CHARS) == ""


def trim_blank(value: str | None) -> str:
    """Strip leading and trailing blank characters.

    Returns ``""`` for ``None`` or whitespace-only input. If nothing can be
    trimmed the value comes back unchanged.
    """
    if value is None or value == "" or value.isspace():
        return ""
    return value.strip(_BLANK_CHARS)


def trim_all(value: str | None) -> str:
    """Remove blank characters from anywhere in *value*."""
    if value is None or value == "" or value.isspace():
        return ""
    return trim_blank(value).translate(_DELETE_BLANK)


def safe_trim(value: str | None) -> str:
    """``value.strip()`` that returns ``""`` instead of failing on ``None``."""
    if value is None:
        return ""
    return value.strip()
