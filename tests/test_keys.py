"""Tests for pi.prompt.keys -- raw input parsing and matching."""

from __future__ import annotations

import pytest

from pi.prompt.keys import Key, matches_key, normalize_key_id, parse_key, split_keys


class TestKeyHelpers:
    def test_modifier_combinators(self) -> None:
        assert Key.ctrl("h") == "ctrl+h"
        assert Key.shift(Key.left) == "shift+left"
        assert Key.alt("b") == "alt+b"


class TestParseKey:
    """parse_key maps raw sequences to key identifiers."""

    @pytest.mark.parametrize(
        "data, expected",
        [
            ("\x1b[D", "left"),
            ("\x1b[C", "right"),
            ("\x1bOD", "left"),
            ("\x1b[3~", "delete"),
            ("\x1b[H", "home"),
            ("\x1b[4~", "end"),
            ("\x1b[5~", "pageUp"),
            ("\x1bOP", "f1"),
            ("\x1b[15~", "f5"),
            ("\x1b[Z", "shift+tab"),
        ],
    )
    def test_legacy_sequences(self, data: str, expected: str) -> None:
        assert parse_key(data) == expected

    @pytest.mark.parametrize(
        "data, expected",
        [
            ("\x1b[1;2D", "shift+left"),
            ("\x1b[1;5C", "ctrl+right"),
            ("\x1b[1;3A", "alt+up"),
            ("\x1b[1;6D", "ctrl+shift+left"),
            ("\x1b[3;5~", "ctrl+delete"),
            ("\x1b[5;2~", "shift+pageUp"),
        ],
    )
    def test_modified_sequences(self, data: str, expected: str) -> None:
        assert parse_key(data) == expected

    @pytest.mark.parametrize(
        "data, expected",
        [
            ("\r", "enter"),
            ("\n", "enter"),
            ("\t", "tab"),
            ("\x7f", "backspace"),
            ("\x08", "ctrl+h"),
            ("\x1b", "escape"),
            ("\x01", "ctrl+a"),
            ("\x03", "ctrl+c"),
            ("\x00", "ctrl+space"),
            (" ", "space"),
        ],
    )
    def test_single_bytes(self, data: str, expected: str) -> None:
        assert parse_key(data) == expected

    @pytest.mark.parametrize(
        "data, expected",
        [
            ("\x1bb", "alt+b"),
            ("\x1bB", "shift+alt+b"),
            ("\x1b\x7f", "alt+backspace"),
            ("\x1b\r", "alt+enter"),
            ("\x1b\x01", "ctrl+alt+a"),
            ("\x1b\x1b", "alt+escape"),
        ],
    )
    def test_alt_prefixed(self, data: str, expected: str) -> None:
        assert parse_key(data) == expected

    def test_printable_characters(self) -> None:
        assert parse_key("a") == "a"
        assert parse_key("A") == "A"
        assert parse_key("é") == "é"
        assert parse_key(":") == ":"

    def test_unknown_input(self) -> None:
        assert parse_key("") is None
        assert parse_key("abc") is None
        assert parse_key("\x1b[99;5~") is None
        assert parse_key("\x85") is None


class TestNormalizeKeyId:
    def test_modifier_order(self) -> None:
        assert normalize_key_id("alt+ctrl+x") == "ctrl+alt+x"
        assert normalize_key_id("shift+ctrl+left") == "ctrl+shift+left"

    def test_aliases(self) -> None:
        assert normalize_key_id("esc") == "escape"
        assert normalize_key_id("Return") == "enter"
        assert normalize_key_id("pageup") == "pageUp"

    def test_plus_key(self) -> None:
        assert normalize_key_id("ctrl++") == "ctrl++"


class TestMatchesKey:
    def test_exact_match(self) -> None:
        assert matches_key("\x1b[D", "left")
        assert not matches_key("\x1b[D", "right")

    def test_normalised_match(self) -> None:
        assert matches_key("\r", "return")
        assert matches_key("\x1b", "esc")
        assert matches_key("\x1b[1;6D", "shift+ctrl+left")

    def test_ctrl_h_is_not_backspace(self) -> None:
        assert matches_key("\x08", "ctrl+h")
        assert not matches_key("\x08", "backspace")

    def test_unparseable_never_matches(self) -> None:
        assert not matches_key("", "enter")
        assert not matches_key("xyz", "x")


class TestSplitKeys:
    def test_plain_text(self) -> None:
        assert split_keys("abc") == (["a", "b", "c"], "")

    def test_mixed_sequences(self) -> None:
        data = "q\x1b[Du\x1b[3~\x1bOC\r"
        assert split_keys(data) == (["q", "\x1b[D", "u", "\x1b[3~", "\x1bOC", "\r"], "")

    def test_modified_csi(self) -> None:
        assert split_keys("\x1b[1;5Cx") == (["\x1b[1;5C", "x"], "")

    def test_alt_key_and_lone_escape(self) -> None:
        assert split_keys("\x1bb") == (["\x1bb"], "")
        assert split_keys("\x1b") == (["\x1b"], "")
        assert split_keys("a\x1b") == (["a", "\x1b"], "")

    def test_unterminated_csi_is_remainder(self) -> None:
        assert split_keys("a\x1b[1;") == (["a"], "\x1b[1;")
        assert split_keys("\x1b[") == ([], "\x1b[")

    def test_unterminated_ss3_is_remainder(self) -> None:
        assert split_keys("x\x1bO") == (["x"], "\x1bO")

    def test_remainder_completes_with_next_read(self) -> None:
        keys, rest = split_keys("ab\x1b[")
        assert keys == ["a", "b"]
        assert split_keys(rest + "Dx") == (["\x1b[D", "x"], "")

    def test_empty(self) -> None:
        assert split_keys("") == ([], "")
