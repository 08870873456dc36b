"""Layout arithmetic and block rendering shared by the interface views."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping
from typing import NamedTuple

from eostui.ansi import cut, pad_visible_width, visible_width
from eostui.styles import Styles

MIN_CONTENT_WIDTH = 20
MIN_PANEL_WIDTH = 18
MIN_SECTION_HEIGHT = 4
MIN_COMMAND_HEIGHT = 6
MAX_COMMAND_HEIGHT = 11


class LayoutHeights(NamedTuple):
    """How the rows between the header and the footer are shared out."""

    middle: int
    available: int
    body: int
    command: int
    body_total: int


def content_width(width: int) -> int:
    """Usable width inside the application's horizontal padding."""
    return max(MIN_CONTENT_WIDTH, width - 2)


def panel_width(width: int) -> int:
    """Width of a bordered panel that fits in the content area."""
    return max(MIN_PANEL_WIDTH, content_width(width) - 2)


def render_overlay(body: str, popup: str, height: int, width: int) -> str:
    """Draw ``popup`` centred over ``body`` inside a ``width`` x ``height`` area."""
    body_lines = body.split("\n")
    popup_lines = popup.split("\n")

    if len(body_lines) < height:
        body_lines.extend(" " * width for _ in range(height - len(body_lines)))

    popup_height = len(popup_lines)
    popup_width = min(max(visible_width(line) for line in popup_lines), width)
    top_pad = max(0, (height - popup_height) // 2)
    left_pad = max(0, (width - popup_width) // 2)

    for offset, popup_line in enumerate(popup_lines):
        row = top_pad + offset
        if row >= len(body_lines):
            break
        body_line = pad_visible_width(body_lines[row], width)
        left = cut(body_line, 0, left_pad)
        right = cut(body_line, left_pad + popup_width, width)
        body_lines[row] = left + pad_visible_width(popup_line, popup_width) + right

    return "\n".join(body_lines[:height])


def normalize_rendered_block(block: str, height: int, width: int) -> str:
    """Cut or pad a block so it is exactly ``height`` lines of ``width`` cells."""
    if height <= 0:
        return ""
    lines = [pad_visible_width(line, width) for line in block.split("\n")[:height]]
    lines.extend(" " * width for _ in range(height - len(lines)))
    return "\n".join(lines)


def split_main_and_command_heights(total: int, command_log_active: bool) -> tuple[int, int]:
    """Share ``total`` rows between the main body and the command panel.

    The command panel is dropped when either part would be too small.
    """
    if not command_log_active:
        return total, 0
    command = min(MAX_COMMAND_HEIGHT, max(MIN_COMMAND_HEIGHT, total // 3))
    if total - command < MIN_SECTION_HEIGHT:
        command = total - MIN_SECTION_HEIGHT
    if command < MIN_SECTION_HEIGHT or total - command < MIN_SECTION_HEIGHT:
        return total, 0
    return total - command, command


def _quote(text: str) -> str:
    escapes = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}
    out: list[str] = []
    for ch in text:
        if ch in escapes:
            out.append(escapes[ch])
        elif not ch.isprintable():
            code = ord(ch)
            if code < 0x100:
                out.append(f"\\x{code:02x}")
            elif code < 0x10000:
                out.append(f"\\u{code:04x}")
            else:
                out.append(f"\\U{code:08x}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def filter_value_label(current: str, active: bool, input_value: str) -> str:
    """The quoted value of a filter; the value being typed carries a star."""
    if active:
        return _quote(input_value) + "*"
    if not current:
        return '""'
    return _quote(current)


def render_section_title(styles: Styles, title: str, width: int) -> str:
    """A section title followed by a rule that fills the remaining width."""
    title_text = styles.section.render(title)
    if width <= 0:
        return title_text
    remaining = width - visible_width(title_text) - 1
    if remaining <= 0:
        return title_text
    return title_text + " " + styles.section_rule.render("─" * remaining)


def render_filter_summary(
    styles: Styles,
    filters: Mapping[int, str],
    label_for: Callable[[int], str],
) -> str:
    """A line listing the active filters by column, or an empty string."""
    columns = sorted(column for column, value in filters.items() if value)
    if not columns:
        return ""
    parts = [
        styles.label.render(label_for(column) + "=") + styles.value.render(filters[column])
        for column in columns
    ]
    separator = styles.status.render("  •  ")
    return styles.label.render("active filters: ") + separator.join(parts)


def render_command_panel_lines(
    styles: Styles,
    lines: Iterable[str],
    height: int,
    width: int,
    loading: bool,
    error: object,
    file_path: str,
) -> str:
    """The bordered panel of recent commands for a content area ``width`` wide.

    The newest commands are kept when there are more than fit.
    """
    outer = max(MIN_PANEL_WIDTH, width - 2)
    inner_width = max(1, outer - 4)
    inner_height = max(1, height - 2)

    title = styles.label.render("Recent commands")
    if file_path:
        title += styles.status.render("  " + file_path)
    rows = [pad_visible_width(title, inner_width)]
    slots = max(0, inner_height - 1)

    history = list(lines)
    if loading:
        entries = [styles.status.render("Loading command history...")]
    elif error is not None:
        entries = [styles.error.render(str(error))]
    elif not history:
        entries = [styles.status.render("No commands recorded yet.")]
    else:
        entries = [styles.value.render(line) for line in history]

    entries = entries[len(entries) - slots:] if len(entries) > slots else entries
    if slots == 0:
        entries = []
    rows.extend(pad_visible_width(entry, inner_width) for entry in entries)
    rows.extend(" " * inner_width for _ in range(inner_height - len(rows)))

    panel = dataclasses.replace(styles.panel_dim, width=outer)
    return panel.render("\n".join(rows))


def layout_heights(
    height: int,
    header_height: int,
    footer_height: int,
    command_log_active: bool,
) -> LayoutHeights:
    """Row budget of the screen between the header and the footer."""
    middle = max(0, height - header_height - footer_height)
    available = max(MIN_SECTION_HEIGHT, middle - 2)
    body, command = split_main_and_command_heights(available, command_log_active)
    body_total = middle - command if command > 0 else middle
    return LayoutHeights(
        middle=middle,
        available=available,
        body=body,
        command=command,
        body_total=body_total,
    )