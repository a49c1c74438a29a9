"""Tests for line wrapping."""

import pytest

from boxtext.geometry import Rectangle
from boxtext.layout.wrap import wrap_text
from boxtext.types import TextWrapping


def monospace(text: str) -> Rectangle:
    return Rectangle(0, -8, 10 * len(text), 10)


def test_no_wrap_is_passthrough():
    text = "a very long line\nwith a break\r\nand more"
    assert wrap_text(text, TextWrapping.NO_WRAP, 10, monospace) == [text]


def test_no_wrap_never_measures():
    def fail(text):
        raise AssertionError("measured in NoWrap mode")

    assert wrap_text("anything at all", TextWrapping.NO_WRAP, 1, fail) == ["anything at all"]


@pytest.mark.parametrize("text,expected", [
    ("one\ntwo", ["one", "two"]),
    ("one\r\ntwo", ["one", "two"]),
    ("one\rtwo", ["one", "two"]),
    ("one\n\ntwo", ["one", "", "two"]),
    ("one\r\n\r\ntwo\n", ["one", "", "two", ""]),
])
def test_explicit_breaks_are_preserved(text, expected):
    assert wrap_text(text, TextWrapping.WRAP_WITH_OVERFLOW, 1000, monospace) == expected


def test_short_text_is_unchanged():
    text = "short line\nanother short one"
    assert wrap_text(text, TextWrapping.WRAP_WITH_OVERFLOW, 1000, monospace) == text.splitlines()


def test_empty_text_yields_one_empty_line():
    assert wrap_text("", TextWrapping.WRAP_WITH_OVERFLOW, 100, monospace) == [""]


def test_overflow_never_merges_too_many_words():
    # One word is 40px, two words with a space are 90px
    lines = wrap_text("aaaa bbbb cccc", TextWrapping.WRAP_WITH_OVERFLOW, 60, monospace)
    assert lines == ["aaaa", "bbbb", "cccc"]


def test_overflow_never_splits_a_word():
    lines = wrap_text("tiny enormousword tiny", TextWrapping.WRAP_WITH_OVERFLOW, 50, monospace)
    assert lines == ["tiny", "enormousword", "tiny"]


def test_width_equal_to_box_breaks():
    # "ab cd" is exactly 50px wide
    assert wrap_text("ab cd", TextWrapping.WRAP_WITH_OVERFLOW, 50, monospace) == ["ab", "cd"]
    assert wrap_text("ab cd", TextWrapping.WRAP_WITH_OVERFLOW, 51, monospace) == ["ab cd"]


def test_greedy_fill():
    lines = wrap_text("aa bb cc dd ee", TextWrapping.WRAP_WITH_OVERFLOW, 90, monospace)
    assert lines == ["aa bb cc", "dd ee"]


def test_consecutive_spaces_are_kept():
    assert wrap_text("a  b", TextWrapping.WRAP_WITH_OVERFLOW, 1000, monospace) == ["a  b"]


def test_hello_world_scenario():
    widths = {"hello world": 190, "hello world foo": 230}

    def measure(text):
        return Rectangle(0, -8, widths.get(text, 10 * len(text)), 10)

    lines = wrap_text("hello world foo", TextWrapping.WRAP_WITH_OVERFLOW, 200, measure)
    assert lines == ["hello world", "foo"]
