"""Tests for blank detection and the extended trimming set."""

from __future__ import annotations

import pytest

from primext.text.blank import BLANK_CHARACTERS, is_blank, safe_trim, trim_all, trim_blank


# ── is_blank ─────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "value",
    [None, "", " ", "\t\r\n", "\x00", "\x00\x01", "\x7f\x85", "\u2028\u2029", "\x1f \x00"],
    ids=lambda v: repr(v),
)
def test_blank_values(value: str | None) -> None:
    assert is_blank(value) is True


@pytest.mark.parametrize("value", ["a", " a ", "\x00a\x00", "\u200b", "\u4e2d"], ids=lambda v: repr(v))
def test_non_blank_values(value: str) -> None:
    assert is_blank(value) is False


def test_every_blank_character_alone_is_blank() -> None:
    for ch in BLANK_CHARACTERS:
        assert is_blank(ch), repr(ch)
    assert is_blank("".join(sorted(BLANK_CHARACTERS)))


def test_blank_set_is_immutable() -> None:
    assert isinstance(BLANK_CHARACTERS, frozenset)
    assert len(BLANK_CHARACTERS) == 37


# ── trim_blank ───────────────────────────────────────────────────────

class TestTrimBlank:
    def test_none_is_empty(self) -> None:
        assert trim_blank(None) == ""

    def test_whitespace_only_is_empty(self) -> None:
        assert trim_blank("   \t") == ""

    def test_strips_control_characters_at_ends(self) -> None:
        assert trim_blank("\x00\x01 hello \x7f\x1f") == "hello"

    def test_keeps_inner_blank_characters(self) -> None:
        assert trim_blank("\x00a\x00b\x00") == "a\x00b"

    def test_unchanged_when_nothing_trims(self) -> None:
        assert trim_blank("abc") == "abc"

    @pytest.mark.parametrize("value", ["x", "\x00x\x01", "\u2028a b\u2029", " a "])
    def test_idempotent(self, value: str) -> None:
        once = trim_blank(value)
        assert trim_blank(once) == once


# ── trim_all ─────────────────────────────────────────────────────────

class TestTrimAll:
    def test_removes_blank_characters_everywhere(self) -> None:
        assert trim_all("\x00a b\tc\x7f") == "abc"

    def test_none_is_empty(self) -> None:
        assert trim_all(None) == ""

    @pytest.mark.parametrize("value", ["", "a\x00b", " x\u2028y z ", "\x85 q\x1b", "plain"])
    def test_result_has_no_blank_characters(self, value: str) -> None:
        assert not set(trim_all(value)) & BLANK_CHARACTERS


# ── safe_trim ────────────────────────────────────────────────────────

class TestSafeTrim:
    def test_none_is_empty(self) -> None:
        assert safe_trim(None) == ""

    def test_standard_strip(self) -> None:
        assert safe_trim("  a b  ") == "a b"

    def test_control_characters_are_kept(self) -> None:
        assert safe_trim("\x00a\x00") == "\x00a\x00"
