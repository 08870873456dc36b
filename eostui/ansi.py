"""Measuring, cutting and wrapping text that may carry ANSI escape sequences."""

from __future__ import annotations

import re
from collections.abc import Iterator

from wcwidth import wcwidth

_ANSI_RE = re.compile(
    r"\x1b(?:\[[0-?]*[ -/]*[@-~]|\][^\x07\x1b]*(?:\x07|\x1b\\)|[@-Z\\-_])"
)


def _tokens(text: str) -> Iterator[tuple[str, bool]]:
    """Split text into (piece, is_escape) tokens."""
    position = 0
    for match in _ANSI_RE.finditer(text):
        if match.start() > position:
            yield text[position:match.start()], False
        yield match.group(), True
        position = match.end()
    if position < len(text):
        yield text[position:], False


def _char_width(ch: str) -> int:
    return max(wcwidth(ch), 0)


def strip_ansi(text: str) -> str:
    """Text with every escape sequence removed."""
    return _ANSI_RE.sub("", text)


def visible_width(text: str) -> int:
    """Terminal cells taken by the widest line of the text."""
    return max(
        sum(_char_width(ch) for ch in line)
        for line in strip_ansi(text).split("\n")
    )


def cut(text: str, start: int, end: int) -> str:
    """The part of a line between visible columns ``start`` and ``end``.

    Escape sequences are kept so that styling stays intact; a wide character
    that does not fit entirely inside the range is dropped.
    """
    out: list[str] = []
    column = 0
    for piece, is_escape in _tokens(text):
        if is_escape:
            out.append(piece)
            continue
        for ch in piece:
            width = _char_width(ch)
            if width == 0:
                if start < column <= end:
                    out.append(ch)
                continue
            if column >= start and column + width <= end:
                out.append(ch)
            column += width
    return "".join(out)


def truncate(text: str, width: int, tail: str = "") -> str:
    """Shorten a line to ``width`` cells, ending with ``tail`` when shortened."""
    if visible_width(text) <= width:
        return text
    limit = max(0, width - visible_width(tail))
    return cut(text, 0, limit) + tail


def hardwrap(text: str, width: int) -> str:
    """Break lines that are wider than ``width`` cells, keeping spaces."""
    if width < 1:
        return text
    out: list[str] = []
    column = 0
    for piece, is_escape in _tokens(text):
        if is_escape:
            out.append(piece)
            continue
        for ch in piece:
            if ch == "\n":
                out.append(ch)
                column = 0
                continue
            char_width = _char_width(ch)
            if column > 0 and column + char_width > width:
                out.append("\n")
                column = 0
            out.append(ch)
            column += char_width
    return "".join(out)


def pad_visible_width(text: str, width: int) -> str:
    """Pad with spaces, or cut, so the line is exactly ``width`` cells wide."""
    if width <= 0:
        return ""
    current = visible_width(text)
    if current >= width:
        return cut(text, 0, width)
    return text + " " * (width - current)