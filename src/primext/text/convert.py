"""String to value coercion.

Two flavors per integer width:

  to_int32("42")        strict, raises InvalidFormatError on failure
  to_int32("abc", 7)    defaulted, returns 7 on any failure (never raises)

Strict conversions treat blank input as a format failure.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum, Flag
from typing import Any, Callable, TypeVar

from dateutil import parser as date_parser

from primext.core.config import DEFAULTS
from primext.errors import InvalidArgumentError, InvalidFormatError
from primext.model import GuidFormat, NumberStyles
from primext.text.blank import is_blank
from primext.text.guid import try_parse_guid
from primext.text.numbers import (
    ParseResult,
    try_parse_byte,
    try_parse_decimal,
    try_parse_float,
    try_parse_int16,
    try_parse_int32,
    try_parse_int64,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# Distinguishes "no default supplied" from an explicit ``None`` default.
_MISSING: Any = object()


def _convert(
    value: str | None,
    parse: Callable[[str | None, NumberStyles | int | None], ParseResult],
    target: str,
    default: Any,
    style: NumberStyles | int | None,
) -> Any:
    result = parse(value, style) if not is_blank(value) else ParseResult(False)
    if result.success:
        return result.value
    if default is _MISSING:
        raise InvalidFormatError(target, value)
    logger.debug(f"{target} conversion of {value!r} failed; using default {default!r}")
    return default


def to_byte(value: str | None, default: Any = _MISSING, style: NumberStyles | int | None = None) -> int:
    """Convert to an unsigned 8-bit integer."""
    return _convert(value, try_parse_byte, "Byte", default, style)


def to_int16(value: str | None, default: Any = _MISSING, style: NumberStyles | int | None = None) -> int:
    """Convert to a signed 16-bit integer."""
    return _convert(value, try_parse_int16, "Int16", default, style)


def to_int32(value: str | None, default: Any = _MISSING, style: NumberStyles | int | None = None) -> int:
    """Convert to a signed 32-bit integer."""
    return _convert(value, try_parse_int32, "Int32", default, style)


def to_int64(value: str | None, default: Any = _MISSING, style: NumberStyles | int | None = None) -> int:
    """Convert to a signed 64-bit integer."""
    return _convert(value, try_parse_int64, "Int64", default, style)


def to_decimal(value: str | None, default: Any = _MISSING, style: NumberStyles | int | None = None) -> Decimal:
    return _convert(value, try_parse_decimal, "Decimal", default, style)


def to_float(value: str | None, default: Any = _MISSING, style: NumberStyles | int | None = None) -> float:
    return _convert(value, try_parse_float, "Double", default, style)


def to_datetime(value: str | None) -> datetime:
    """Parse a date and/or time in any common textual layout.

    Missing components are filled from midnight of the current day, so
    ``"14:30"`` becomes today at 14:30.
    """
    if is_blank(value):
        raise InvalidFormatError("DateTime", value)
    default = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
    try:
        return date_parser.parse(value.strip(), default=default)
    except (ValueError, OverflowError) as exc:
        raise InvalidFormatError("DateTime", value) from exc


def is_datetime(value: str | None) -> bool:
    if is_blank(value):
        return False
    try:
        date_parser.parse(value.strip())
    except (ValueError, OverflowError):
        return False
    return True


def to_guid(value: str | None, format: str | GuidFormat | None = None) -> uuid.UUID:
    """Parse *value* exactly as *format*; unknown specifiers fall back to ``D``."""
    fmt = GuidFormat.normalize(format if format is not None else DEFAULTS.guid_format)
    result = try_parse_guid(value, fmt)
    if not result.success:
        raise InvalidFormatError("Guid", value, detail=f"expected format {fmt.value}")
    return result.value


def _enum_member(enum_type: type[E], token: str, ignore_case: bool) -> E | None:
    member = enum_type.__members__.get(token)
    if member is not None:
        return member
    if ignore_case:
        folded = token.casefold()
        for name, candidate in enum_type.__members__.items():
            if name.casefold() == folded:
                return candidate
    number = try_parse_int64(token, NumberStyles.INTEGER)
    if number.success:
        try:
            return enum_type(number.value)
        except ValueError:
            return None
    return None


def to_enum(value: str | None, enum_type: type[E], ignore_case: bool | None = None) -> E:
    """Convert a member name (or integer value) to a member of *enum_type*.

    ``enum.Flag`` types also accept comma-separated names, combined with ``|``.
    """
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise InvalidArgumentError("Type provided must be an Enum.", param="enum_type")
    if is_blank(value):
        raise InvalidFormatError(enum_type.__name__, value)
    if ignore_case is None:
        ignore_case = DEFAULTS.enum_ignore_case

    tokens = [t.strip() for t in value.split(",")] if issubclass(enum_type, Flag) else [value.strip()]
    combined = None
    for token in tokens:
        member = _enum_member(enum_type, token, ignore_case)
        if member is None:
            raise InvalidFormatError(enum_type.__name__, value)
        combined = member if combined is None else combined | member
    return combined
