"""Tests for pi.prompt.utils -- display width measurement."""

from __future__ import annotations

from pi.prompt.utils import char_width, visible_width


class TestVisibleWidth:
    def test_empty(self) -> None:
        assert visible_width("") == 0

    def test_ascii(self) -> None:
        assert visible_width("hello") == 5
        assert visible_width("find:") == 5

    def test_wide_characters(self) -> None:
        assert visible_width("日本") == 4
        assert visible_width("a日b") == 4

    def test_accented_latin(self) -> None:
        assert visible_width("héllo") == 5

    def test_repeated_lookup_is_stable(self) -> None:
        assert visible_width("日本語") == visible_width("日本語") == 6


class TestCharWidth:
    def test_control_character_counts_as_one(self) -> None:
        assert char_width("\x07") == 1

    def test_combining_mark_counts_as_one(self) -> None:
        assert char_width("\u0301") == 1
        assert visible_width("e\u0301") == 2
