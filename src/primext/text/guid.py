"""Strict GUID parsing and formatting.

``uuid.UUID`` accepts braces, ``urn:uuid:`` prefixes and hyphens anywhere,
so it cannot tell formats apart. Parsing here is exact against one layout:

  D  a1b2c3d4-0000-1111-2222-333344445555
  N  a1b2c3d4000011112222333344445555
  B  {a1b2c3d4-0000-1111-2222-333344445555}
  P  (a1b2c3d4-0000-1111-2222-333344445555)
  X  {0xa1b2c3d4,0x0000,0x1111,{0x22,0x22,0x33,0x33,0x44,0x44,0x55,0x55}}

Unknown specifiers are treated as ``D``.
"""

from __future__ import annotations

import re
import uuid

from primext.core.config import DEFAULTS
from primext.model import GuidFormat
from primext.text.blank import is_blank
from primext.text.numbers import ParseResult

_H = "[0-9A-Fa-f]"
_D_BODY = f"{_H}{{8}}-{_H}{{4}}-{_H}{{4}}-{_H}{{4}}-{_H}{{12}}"

_PATTERNS: dict[GuidFormat, re.Pattern[str]] = {
    GuidFormat.D: re.compile(f"^{_D_BODY}$"),
    GuidFormat.N: re.compile(f"^{_H}{{32}}$"),
    GuidFormat.B: re.compile(f"^\\{{{_D_BODY}\\}}$"),
    GuidFormat.P: re.compile(f"^\\({_D_BODY}\\)$"),
}

_X_PATTERN = re.compile(
    r"^\{0[xX](?P<a>[0-9A-Fa-f]{1,8}),0[xX](?P<b>[0-9A-Fa-f]{1,4}),0[xX](?P<c>[0-9A-Fa-f]{1,4}),"
    r"\{(?P<tail>(?:0[xX][0-9A-Fa-f]{1,2},){7}0[xX][0-9A-Fa-f]{1,2})\}\}$"
)

_FAILED: ParseResult[uuid.UUID] = ParseResult(False)


def _parse_x(text: str) -> uuid.UUID | None:
    # X tolerates white space between its tokens
    m = _X_PATTERN.match("".join(text.split()))
    if m is None:
        return None
    tail = [int(tok[2:], 16) for tok in m.group("tail").split(",")]
    digits = (
        f"{int(m.group('a'), 16):08x}"
        f"{int(m.group('b'), 16):04x}"
        f"{int(m.group('c'), 16):04x}"
        + "".join(f"{octet:02x}" for octet in tail)
    )
    return uuid.UUID(hex=digits)


def try_parse_guid(
    text: str | None,
    format: str | GuidFormat | None = None,
) -> ParseResult[uuid.UUID]:
    """Parse *text* exactly as *format* (default ``D``)."""
    if is_blank(text):
        return _FAILED
    fmt = GuidFormat.normalize(format if format is not None else DEFAULTS.guid_format)
    candidate = text.strip()

    if fmt is GuidFormat.X:
        parsed = _parse_x(candidate)
        return ParseResult(True, parsed) if parsed is not None else _FAILED

    if _PATTERNS[fmt].match(candidate) is None:
        return _FAILED
    digits = "".join(ch for ch in candidate if ch not in "{}()-")
    return ParseResult(True, uuid.UUID(hex=digits))


def is_guid(text: str | None, format: str | GuidFormat | None = None) -> bool:
    """True if *text* parses exactly as *format*; never infers the format."""
    return try_parse_guid(text, format).success


def format_guid(value: uuid.UUID, format: str | GuidFormat | None = None) -> str:
    """Render *value* in *format* using lower-case hex digits."""
    fmt = GuidFormat.normalize(format if format is not None else DEFAULTS.guid_format)
    if fmt is GuidFormat.N:
        return value.hex
    if fmt is GuidFormat.B:
        return "{" + str(value) + "}"
    if fmt is GuidFormat.P:
        return "(" + str(value) + ")"
    if fmt is GuidFormat.X:
        h = value.hex
        tail = ",".join(f"0x{h[i:i + 2]}" for i in range(16, 32, 2))
        return f"{{0x{h[0:8]},0x{h[8:12]},0x{h[12:16]},{{{tail}}}}}"
    return str(value)
