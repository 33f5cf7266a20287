"""Tests for NumberStyles-driven try-parse primitives and numeric predicates."""

from __future__ import annotations

import math
from decimal import Decimal

import pytest

from primext.model import NumberStyles
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


class TestParseResult:
    def test_truthiness_follows_success(self) -> None:
        assert ParseResult(True, 0)
        assert not ParseResult(False)

    def test_failed_result_has_no_value(self) -> None:
        assert try_parse_int32("x").value is None


# ── integer widths ───────────────────────────────────────────────────

class TestIntegerRanges:
    @pytest.mark.parametrize("text,expected", [("0", True), ("255", True), ("256", False), ("-1", False), ("-0", True)])
    def test_byte(self, text: str, expected: bool) -> None:
        assert is_byte(text) is expected

    @pytest.mark.parametrize("text,expected", [("32767", True), ("32768", False), ("-32768", True), ("-32769", False)])
    def test_int16(self, text: str, expected: bool) -> None:
        assert is_int16(text) is expected

    def test_is_short_is_int16(self) -> None:
        assert is_short is is_int16

    @pytest.mark.parametrize(
        "text,expected",
        [("2147483647", True), ("2147483648", False), ("-2147483648", True), ("-2147483649", False)],
    )
    def test_int32(self, text: str, expected: bool) -> None:
        assert is_int32(text) is expected

    @pytest.mark.parametrize(
        "text,expected",
        [("9223372036854775807", True), ("9223372036854775808", False), ("-9223372036854775808", True)],
    )
    def test_int64(self, text: str, expected: bool) -> None:
        assert is_int64(text) is expected

    def test_values_are_ints(self) -> None:
        assert try_parse_int64("-42") == ParseResult(True, -42)
        assert try_parse_int16("  7 ").value == 7


class TestIntegerStyles:
    @pytest.mark.parametrize("text", ["", " ", "abc", "1.5", "1,000", "1e3", "+-1", "4 2", "0x10", None])
    def test_default_style_rejects(self, text: str | None) -> None:
        assert is_int32(text) is False

    @pytest.mark.parametrize("text", ["42", " 42", "42 ", "+42", "-42", "007"])
    def test_default_style_accepts(self, text: str) -> None:
        assert is_int32(text) is True

    def test_no_whitespace_without_flag(self) -> None:
        assert is_int32(" 42", NumberStyles.NONE) is False
        assert is_int32("42", NumberStyles.NONE) is True

    def test_thousands_with_flag(self) -> None:
        style = NumberStyles.INTEGER | NumberStyles.ALLOW_THOUSANDS
        assert try_parse_int32("1,234,567", style).value == 1234567

    def test_decimal_point_requires_integral_value(self) -> None:
        style = NumberStyles.INTEGER | NumberStyles.ALLOW_DECIMAL_POINT
        assert try_parse_int32("12.000", style).value == 12
        assert is_int32("12.5", style) is False

    def test_exponent_with_flag(self) -> None:
        style = NumberStyles.INTEGER | NumberStyles.ALLOW_EXPONENT
        assert try_parse_int32("12e2", style).value == 1200
        assert is_int32("1e10", style) is False

    def test_trailing_sign(self) -> None:
        style = NumberStyles.INTEGER | NumberStyles.ALLOW_TRAILING_SIGN
        assert try_parse_int32("42-", style).value == -42
        assert is_int32("-42-", style) is False

    def test_parentheses_mean_negative(self) -> None:
        style = NumberStyles.INTEGER | NumberStyles.ALLOW_PARENTHESES
        assert try_parse_int32("(42)", style).value == -42
        assert is_int32("(42", style) is False
        assert is_int32("(-42)", style) is False

    def test_hex_is_twos_complement(self) -> None:
        assert try_parse_int32("FFFFFFFF", NumberStyles.HEX_NUMBER).value == -1
        assert try_parse_int32("7fffffff", NumberStyles.HEX_NUMBER).value == 2147483647
        assert try_parse_byte("ff", NumberStyles.HEX_NUMBER).value == 255
        assert is_byte("100", NumberStyles.HEX_NUMBER) is False
        assert is_int32("-1", NumberStyles.HEX_NUMBER) is False

    def test_plain_int_style_value(self) -> None:
        assert try_parse_int32("42", int(NumberStyles.INTEGER)).value == 42

    def test_unbounded_integer(self) -> None:
        assert try_parse_integer("123456789012345678901234567890").value == 123456789012345678901234567890


# ── decimal and float ────────────────────────────────────────────────

class TestDecimal:
    def test_default_style(self) -> None:
        assert try_parse_decimal("-12.50").value == Decimal("-12.50")
        assert try_parse_decimal("1e3").value == Decimal("1000")

    def test_default_style_has_no_thousands(self) -> None:
        assert is_decimal("1,000.5") is False
        assert is_decimal("1,000.5", NumberStyles.NUMBER) is True

    def test_range(self) -> None:
        assert is_decimal("79228162514264337593543950335") is True
        assert is_decimal("79228162514264337593543950336") is False

    def test_hex_style_not_supported(self) -> None:
        assert is_decimal("ff", NumberStyles.HEX_NUMBER) is False


class TestFloat:
    @pytest.mark.parametrize("text,expected", [("1.5", 1.5), (" -2.25e1 ", -22.5), (".5", 0.5), ("3.", 3.0)])
    def test_values(self, text: str, expected: float) -> None:
        assert try_parse_float(text).value == expected

    @pytest.mark.parametrize("text", ["", ".", "-", "1.2.3", "e5", "1,5", "abc"])
    def test_rejects(self, text: str) -> None:
        assert is_float(text) is False

    def test_symbols(self) -> None:
        assert math.isnan(try_parse_float("NaN").value)
        assert try_parse_float("Infinity").value == math.inf
        assert try_parse_float("-infinity").value == -math.inf

    def test_overflow_is_infinity(self) -> None:
        assert try_parse_float("1e400").value == math.inf
