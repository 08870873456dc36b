import pytest

from eostui.ansi import (
    cut,
    hardwrap,
    pad_visible_width,
    strip_ansi,
    truncate,
    visible_width,
)

STYLED = "\x1b[1;38;5;230mhello world\x1b[0m"


def test_strip_ansi_removes_sequences():
    assert strip_ansi(STYLED) == "hello world"


def test_strip_ansi_removes_osc():
    assert strip_ansi("\x1b]0;title\x07abc") == "abc"


def test_visible_width_ignores_escapes():
    assert visible_width(STYLED) == len("hello world")


def test_visible_width_wide_characters():
    assert visible_width("日本") == 4


def test_visible_width_uses_widest_line():
    assert visible_width("ab\nabcd\na") == 4


def test_cut_plain():
    assert cut("abcdef", 1, 4) == "abcdef"[1:4]


def test_cut_keeps_escapes():
    result = cut(STYLED, 0, 5)
    assert strip_ansi(result) == "hello"
    assert result.startswith("\x1b[1;38;5;230m")
    assert result.endswith("\x1b[0m")


def test_cut_drops_straddling_wide_character():
    assert visible_width(cut("日本", 1, 4)) <= 3


def test_truncate_short_text_unchanged():
    assert truncate("abc", 5, "…") == "abc"


@pytest.mark.parametrize("width", [1, 3, 5, 8])
def test_truncate_fits_width_and_ends_with_tail(width):
    result = truncate("hello world", width, "…")
    assert visible_width(result) <= width
    assert result.endswith("…")
    assert "hello world".startswith(result[:-1])


def test_truncate_without_tail():
    assert truncate("hello world", 5, "") == "hello"


@pytest.mark.parametrize("width", [1, 2, 3, 7])
def test_hardwrap_lines_fit(width):
    text = "the quick brown fox"
    wrapped = hardwrap(text, width)
    assert all(visible_width(line) <= width for line in wrapped.split("\n"))
    assert wrapped.replace("\n", "") == text


def test_hardwrap_preserves_existing_newlines():
    wrapped = hardwrap("ab\ncd", 10)
    assert wrapped == "ab\ncd"


def test_hardwrap_keeps_escapes():
    wrapped = hardwrap(STYLED, 4)
    assert strip_ansi(wrapped).replace("\n", "") == "hello world"
    assert "\x1b[0m" in wrapped


def test_hardwrap_nonpositive_width_returns_text():
    assert hardwrap("abc", 0) == "abc"


def test_pad_visible_width_pads():
    assert pad_visible_width("ab", 5) == "ab" + " " * 3


def test_pad_visible_width_cuts():
    result = pad_visible_width(STYLED, 5)
    assert strip_ansi(result) == "hello"


def test_pad_visible_width_zero():
    assert pad_visible_width("abc", 0) == ""


@pytest.mark.parametrize("width", [1, 4, 11, 20])
def test_pad_visible_width_exact(width):
    assert visible_width(pad_visible_width(STYLED, width)) == width