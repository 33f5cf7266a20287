"""Library-wide defaults."""

from __future__ import annotations

from dataclasses import dataclass

from primext.model import GuidFormat, NumberStyles


@dataclass(frozen=True)
class ExtensionDefaults:
    """Immutable defaults consulted when a caller omits an optional argument.

    There is no loader: the record is built once at import time and every
    operation reads :data:`DEFAULTS`.
    """

    truncate_suffix: str = " ..."
    byte_encoding: str = "utf-8"      # encoding used by is_valid_byte_count
    guid_format: GuidFormat = GuidFormat.D
    integer_style: NumberStyles = NumberStyles.INTEGER
    real_style: NumberStyles = NumberStyles.FLOAT   # no thousands separators
    enum_ignore_case: bool = True
    special_char_sentinel: str = "\0"


DEFAULTS = ExtensionDefaults()
