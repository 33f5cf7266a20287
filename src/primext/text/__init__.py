"""String extension functions."""

from primext.text.blank import BLANK_CHARACTERS, is_blank, safe_trim, trim_all, trim_blank
from primext.text.convert import (
    is_datetime,
    to_byte,
    to_datetime,
    to_decimal,
    to_enum,
    to_float,
    to_guid,
    to_int16,
    to_int32,
    to_int64,
)
from primext.text.culture import is_valid_culture
from primext.text.guid import format_guid, is_guid, try_parse_guid
from primext.text.numbers import (
    ParseResult,
    is_byte,
    is_decimal,
    is_float,
    is_int16,
    is_int32,
    is_int64,
    is_short,
    try_parse_byte,
    try_parse_decimal,
    try_parse_float,
    try_parse_int16,
    try_parse_int32,
    try_parse_int64,
    try_parse_integer,
)
from primext.text.patterns import is_email, is_hans, is_mobile, is_url
from primext.text.transforms import (
    first_char_to_upper,
    is_valid_byte_count,
    is_valid_length,
    replace_special_characters,
    reverse,
    truncate,
)

__all__ = [
    # Blank handling
    "BLANK_CHARACTERS",
    "is_blank",
    "safe_trim",
    "trim_all",
    "trim_blank",
    # Format predicates
    "is_email",
    "is_hans",
    "is_mobile",
    "is_url",
    "is_guid",
    "is_valid_culture",
    "is_datetime",
    "is_byte",
    "is_short",
    "is_int16",
    "is_int32",
    "is_int64",
    "is_decimal",
    "is_float",
    # Try-parse primitives
    "ParseResult",
    "try_parse_byte",
    "try_parse_int16",
    "try_parse_int32",
    "try_parse_int64",
    "try_parse_integer",
    "try_parse_decimal",
    "try_parse_float",
    "try_parse_guid",
    # Conversions
    "to_byte",
    "to_int16",
    "to_int32",
    "to_int64",
    "to_decimal",
    "to_float",
    "to_datetime",
    "to_guid",
    "to_enum",
    "format_guid",
    # Transforms
    "reverse",
    "truncate",
    "is_valid_length",
    "is_valid_byte_count",
    "first_char_to_upper",
    "replace_special_characters",
]
