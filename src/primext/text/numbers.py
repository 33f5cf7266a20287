"""Non-throwing numeric parsing driven by a ``NumberStyles`` mask.

Every ``try_parse_*`` returns a :class:`ParseResult` instead of raising, so
the ``is_*`` predicates and the defaulted conversions never branch on
exceptions. Parsing is culture-invariant:

  decimal point    "."
  group separator  ","
  signs            "+" / "-"
  white            space, \\t \\n \\v \\f \\r

Hex input (``ALLOW_HEX_SPECIFIER``) is digits only, no ``0x`` prefix, and
is read as a two's-complement bit pattern of the target width.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import Generic, TypeVar

from primext.core.config import DEFAULTS
from primext.model import NumberStyles

T = TypeVar("T")

BYTE_RANGE = (0, 0xFF)
INT16_RANGE = (-(2**15), 2**15 - 1)
INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)
DECIMAL_MAX = Decimal("79228162514264337593543950335")

_WHITE = "[ \\t\\n\\v\\f\\r]*"
_FLOAT_SYMBOLS = {
    "nan": float("nan"),
    "infinity": float("inf"),
    "+infinity": float("inf"),
    "-infinity": float("-inf"),
}


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Outcome of a try-parse: ``success`` plus the value when it succeeded."""

    success: bool
    value: T | None = None

    def __bool__(self) -> bool:
        return self.success


_FAILED: ParseResult = ParseResult(False)


@lru_cache(maxsize=None)
def _number_pattern(style: NumberStyles) -> re.Pattern[str]:
    lead = _WHITE if style & NumberStyles.ALLOW_LEADING_WHITE else ""
    trail = _WHITE if style & NumberStyles.ALLOW_TRAILING_WHITE else ""

    if style & NumberStyles.ALLOW_HEX_SPECIFIER:
        return re.compile(f"^{lead}(?P<hex>[0-9A-Fa-f]+){trail}$")

    parts = [lead]
    if style & NumberStyles.ALLOW_PARENTHESES:
        parts.append(r"(?P<lparen>\()?")
    if style & NumberStyles.ALLOW_LEADING_SIGN:
        parts.append(r"(?P<lsign>[+-])?")
    if style & NumberStyles.ALLOW_THOUSANDS:
        parts.append(r"(?P<int>[0-9][0-9,]*)?")
    else:
        parts.append(r"(?P<int>[0-9]*)")
    if style & NumberStyles.ALLOW_DECIMAL_POINT:
        parts.append(r"(?:\.(?P<frac>[0-9]*))?")
    if style & NumberStyles.ALLOW_EXPONENT:
        parts.append(r"(?:[eE](?P<exp>[+-]?[0-9]+))?")
    if style & NumberStyles.ALLOW_TRAILING_SIGN:
        parts.append(r"(?P<tsign>[+-])?")
    if style & NumberStyles.ALLOW_PARENTHESES:
        parts.append(r"(?P<rparen>\))?")
    parts.append(trail)
    return re.compile("^" + "".join(parts) + "$")


def _resolve_style(style: NumberStyles | int | None, default: NumberStyles) -> NumberStyles:
    if style is None:
        return default
    return NumberStyles(style)


def _scan(text: str, style: NumberStyles) -> Decimal | int | None:
    """Match *text* against *style*.

    Returns the unsigned hex value as ``int`` for hex styles, a signed
    ``Decimal`` otherwise, or ``None`` when the text does not match.
    """
    m = _number_pattern(style).match(text)
    if m is None:
        return None
    groups = m.groupdict()
    if groups.get("hex") is not None:
        return int(groups["hex"], 16)

    int_part = (groups.get("int") or "").replace(",", "")
    frac_part = groups.get("frac") or ""
    if not int_part and not frac_part:
        return None

    lsign, tsign = groups.get("lsign"), groups.get("tsign")
    lparen, rparen = groups.get("lparen"), groups.get("rparen")
    if lsign and tsign:
        return None
    if bool(lparen) != bool(rparen):
        return None
    if lparen and (lsign or tsign):
        return None

    negative = (lsign or tsign) == "-" or bool(lparen)
    literal = ("-" if negative else "") + (int_part or "0")
    if frac_part:
        literal += "." + frac_part
    if groups.get("exp"):
        literal += "E" + groups["exp"]
    try:
        return Decimal(literal)
    except (ArithmeticError, ValueError):
        return None


def _try_parse_integer(
    text: str | None,
    style: NumberStyles | int | None,
    bounds: tuple[int, int],
    bits: int,
) -> ParseResult[int]:
    if not text:
        return _FAILED
    resolved = _resolve_style(style, DEFAULTS.integer_style)
    scanned = _scan(text, resolved)
    if scanned is None:
        return _FAILED

    lo, hi = bounds
    if isinstance(scanned, int):
        if scanned >= 2**bits:
            return _FAILED
        if lo < 0 and scanned >= 2 ** (bits - 1):
            scanned -= 2**bits
        return ParseResult(True, scanned)

    if scanned < lo or scanned > hi:
        return _FAILED
    if scanned != scanned.to_integral_value():
        return _FAILED
    return ParseResult(True, int(scanned))


def try_parse_byte(text: str | None, style: NumberStyles | int | None = None) -> ParseResult[int]:
    return _try_parse_integer(text, style, BYTE_RANGE, 8)


def try_parse_int16(text: str | None, style: NumberStyles | int | None = None) -> ParseResult[int]:
    return _try_parse_integer(text, style, INT16_RANGE, 16)


def try_parse_int32(text: str | None, style: NumberStyles | int | None = None) -> ParseResult[int]:
    return _try_parse_integer(text, style, INT32_RANGE, 32)


def try_parse_int64(text: str | None, style: NumberStyles | int | None = None) -> ParseResult[int]:
    return _try_parse_integer(text, style, INT64_RANGE, 64)


def try_parse_integer(text: str | None, style: NumberStyles | int | None = None) -> ParseResult[int]:
    """Parse an integer of unbounded width (hex input read as unsigned)."""
    if not text:
        return _FAILED
    scanned = _scan(text, _resolve_style(style, DEFAULTS.integer_style))
    if scanned is None:
        return _FAILED
    if isinstance(scanned, int):
        return ParseResult(True, scanned)
    # Exponents large enough to exhaust memory as an int are rejected.
    if scanned.adjusted() > 4300:
        return _FAILED
    if scanned != scanned.to_integral_value():
        return _FAILED
    return ParseResult(True, int(scanned))


def try_parse_decimal(text: str | None, style: NumberStyles | int | None = None) -> ParseResult[Decimal]:
    if not text:
        return _FAILED
    resolved = _resolve_style(style, DEFAULTS.real_style)
    if resolved & NumberStyles.ALLOW_HEX_SPECIFIER:
        return _FAILED
    scanned = _scan(text, resolved)
    if scanned is None or scanned.copy_abs() > DECIMAL_MAX:
        return _FAILED
    return ParseResult(True, scanned)


def try_parse_float(text: str | None, style: NumberStyles | int | None = None) -> ParseResult[float]:
    """Parse a double. Overflow yields an infinity; ``NaN``/``Infinity`` are accepted."""
    if not text:
        return _FAILED
    resolved = _resolve_style(style, DEFAULTS.real_style)
    if resolved & NumberStyles.ALLOW_HEX_SPECIFIER:
        return _FAILED

    symbol = text
    if resolved & NumberStyles.ALLOW_LEADING_WHITE:
        symbol = symbol.lstrip(" \t\n\v\f\r")
    if resolved & NumberStyles.ALLOW_TRAILING_WHITE:
        symbol = symbol.rstrip(" \t\n\v\f\r")
    special = _FLOAT_SYMBOLS.get(symbol.lower())
    if special is not None:
        if symbol[0] in "+-" and not resolved & NumberStyles.ALLOW_LEADING_SIGN:
            return _FAILED
        return ParseResult(True, special)

    scanned = _scan(text, resolved)
    if scanned is None:
        return _FAILED
    return ParseResult(True, float(scanned))


# ── predicates ─────────────────────────────────────────────────────────


def is_byte(text: str | None, style: NumberStyles | int | None = None) -> bool:
    return try_parse_byte(text, style).success


def is_int16(text: str | None, style: NumberStyles | int | None = None) -> bool:
    return try_parse_int16(text, style).success


is_short = is_int16


def is_int32(text: str | None, style: NumberStyles | int | None = None) -> bool:
    return try_parse_int32(text, style).success


def is_int64(text: str | None, style: NumberStyles | int | None = None) -> bool:
    return try_parse_int64(text, style).success


def is_decimal(text: str | None, style: NumberStyles | int | None = None) -> bool:
    return try_parse_decimal(text, style).success


def is_float(text: str | None, style: NumberStyles | int | None = None) -> bool:
    return try_parse_float(text, style).success
