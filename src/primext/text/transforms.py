"""Structural string transforms and length checks.

All operations index Python ``str`` code points. Characters outside the
BMP therefore count as one and are never split, but combining sequences
(e.g. ``"e\\u0301"``) are treated as separate characters.
"""

from __future__ import annotations

import codecs
import unicodedata

from primext.core.config import DEFAULTS
from primext.errors import InvalidArgumentError
from primext.text.blank import is_blank, trim_blank


def reverse(value: str | None) -> str:
    """Reverse the character order; ``""`` for blank input."""
    if is_blank(value):
        return ""
    return value[::-1]


def truncate(value: str | None, length: int, suffix: str | None = None) -> str | None:
    """Cut *value* to *length* characters and append *suffix*.

    Input that is ``None``, empty or no longer than *length* is returned as is.

    Raises:
        InvalidArgumentError: *length* is negative.
    """
    if length < 0:
        raise InvalidArgumentError("length must be greater than or equal to 0.", param="length")
    if not value or len(value) <= length:
        return value
    if suffix is None:
        suffix = DEFAULTS.truncate_suffix
    return f"{value[:length]}{suffix}"


def _check_bounds(value: str | None, min_value: int, max_value: int, names: tuple[str, str]) -> None:
    lo_name, hi_name = names
    if min_value < 0:
        raise InvalidArgumentError(f"{lo_name} must be greater than or equal to 0.", param=lo_name)
    if max_value < min_value:
        raise InvalidArgumentError(f"{hi_name} must be greater than or equal to {lo_name}.", param=hi_name)
    if value is None:
        raise InvalidArgumentError("value can not be None.", param="value")


def is_valid_length(value: str | None, min_length: int, max_length: int, trim: bool = False) -> bool:
    """True if ``min_length <= len(value) <= max_length``.

    Raises:
        InvalidArgumentError: negative *min_length*, *max_length* below
            *min_length*, or *value* is ``None``. Checked before trimming.
    """
    _check_bounds(value, min_length, max_length, ("min_length", "max_length"))
    if trim:
        value = trim_blank(value.strip())
    return min_length <= len(value) <= max_length


def is_valid_byte_count(
    value: str | None,
    min_count: int,
    max_count: int,
    trim: bool = False,
    encoding: str | None = None,
) -> bool:
    """True if the encoded size of *value* lies within ``[min_count, max_count]``.

    Uses ``DEFAULTS.byte_encoding`` unless *encoding* is given. Lone
    surrogates are counted as if encoded and characters the encoding
    cannot represent count as one replacement byte. A byte-order mark the
    codec would emit (``utf-16``, ``utf-32``, ``utf-8-sig``) is not counted.

    Raises:
        InvalidArgumentError: bad bounds, ``None`` *value*, or an *encoding*
            that is unknown or not a text encoding.
    """
    _check_bounds(value, min_count, max_count, ("min_count", "max_count"))
    if trim:
        value = trim_blank(value.strip())
    codec = _text_codec(encoding or DEFAULTS.byte_encoding)
    errors = "surrogatepass" if codec.name.startswith("utf") else "replace"
    count = len(value.encode(codec.name, errors=errors)) - len("".encode(codec.name))
    return min_count <= count <= max_count


def _text_codec(encoding: str) -> codecs.CodecInfo:
    try:
        codec = codecs.lookup(encoding)
    except LookupError:
        raise InvalidArgumentError(f"unknown encoding: {encoding!r}", param="encoding") from None
    # bytes-to-bytes and str-to-str codecs such as base64 or rot13
    if not getattr(codec, "_is_text_encoding", True):
        raise InvalidArgumentError(f"not a text encoding: {encoding!r}", param="encoding")
    return codec


def first_char_to_upper(value: str | None) -> str:
    if not value:
        return ""
    if len(value) == 1:
        return value.upper()
    return value[0].upper() + value[1:]


def replace_special_characters(value: str | None, replacement: str | None = None) -> str:
    """Replace every character that is not a letter or digit.

    Letters are the Unicode ``L*`` categories and digits are ``Nd`` only, so
    superscripts, vulgar fractions and Roman numerals count as special.
    With the default ``"\\0"`` replacement such characters are deleted
    instead of substituted.
    """
    if not value:
        return ""
    if replacement is None:
        replacement = DEFAULTS.special_char_sentinel
    if replacement == DEFAULTS.special_char_sentinel:
        return "".join(ch for ch in value if _is_letter_or_digit(ch))
    return "".join(ch if _is_letter_or_digit(ch) else replacement for ch in value)


def _is_letter_or_digit(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category[0] == "L" or category == "Nd"
