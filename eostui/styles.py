"""Terminal text styles used throughout the interface."""

from __future__ import annotations

from dataclasses import dataclass

from eostui.ansi import hardwrap, visible_width

_BORDERS: dict[str, tuple[str, str, str, str, str, str]] = {
    # top-left, top, top-right, side, bottom-left, bottom-right
    "normal": ("┌", "─", "┐", "│", "└", "┘"),
    "rounded": ("╭", "─", "╮", "│", "╰", "╯"),
}

_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Style:
    """Colours, padding, border and width applied to a block of text.

    Colours are 256-colour palette indices given as strings. ``width`` counts
    the content and the padding but not the border; content is wrapped to fit.
    """

    bold: bool = False
    foreground: str | None = None
    background: str | None = None
    padding: tuple[int, int] = (0, 0)
    border: str | None = None
    border_foreground: str | None = None
    width: int | None = None

    def _sgr(self) -> str:
        codes: list[str] = []
        if self.bold:
            codes.append("1")
        if self.foreground is not None:
            codes.append(f"38;5;{self.foreground}")
        if self.background is not None:
            codes.append(f"48;5;{self.background}")
        return f"\x1b[{';'.join(codes)}m" if codes else ""

    def render(self, text: str) -> str:
        """The text laid out and coloured according to the style."""
        if self.border is not None and self.border not in _BORDERS:
            raise ValueError(f"unknown border: {self.border}")
        vertical, horizontal = self.padding
        lines = text.split("\n")
        if self.width is not None:
            inner = max(1, self.width - 2 * horizontal)
            lines = hardwrap("\n".join(lines), inner).split("\n")
        else:
            inner = max(visible_width(line) for line in lines)
        if len(lines) > 1 or self.width is not None:
            lines = [line + " " * max(0, inner - visible_width(line)) for line in lines]
        block_width = inner
        blank = " " * block_width
        lines = [blank] * vertical + lines + [blank] * vertical
        side = " " * horizontal
        sgr = self._sgr()
        rendered = [
            f"{sgr}{side}{line}{side}{_RESET}" if sgr else f"{side}{line}{side}"
            for line in lines
        ]
        if self.border is None:
            return "\n".join(rendered)

        top_left, top, top_right, edge, bottom_left, bottom_right = _BORDERS[self.border]
        span = block_width + 2 * horizontal
        border_sgr = f"\x1b[38;5;{self.border_foreground}m" if self.border_foreground else ""

        def paint(piece: str) -> str:
            return f"{border_sgr}{piece}{_RESET}" if border_sgr else piece

        framed = [paint(top_left + top * span + top_right)]
        framed.extend(paint(edge) + line + paint(edge) for line in rendered)
        framed.append(paint(bottom_left + top * span + bottom_right))
        return "\n".join(framed)


@dataclass(frozen=True)
class Styles:
    """The named styles of the interface."""

    app: Style
    header: Style
    tab: Style
    tab_active: Style
    panel: Style
    panel_dim: Style
    selected: Style
    label: Style
    value: Style
    error: Style
    status: Style
    popup_title: Style
    section: Style
    section_rule: Style
    splash: Style
    splash_dim: Style
    splash_box: Style


def new_styles() -> Styles:
    """The default colour scheme."""
    return Styles(
        app=Style(padding=(0, 1)),
        header=Style(bold=True, foreground="230", background="24", padding=(0, 1)),
        tab=Style(foreground="248", background="236", padding=(0, 1)),
        tab_active=Style(bold=True, foreground="230", background="31", padding=(0, 1)),
        panel=Style(border="normal", border_foreground="68", padding=(0, 1)),
        panel_dim=Style(border="normal", border_foreground="240", padding=(0, 1)),
        selected=Style(bold=True, foreground="230", background="31"),
        label=Style(foreground="110"),
        value=Style(foreground="252"),
        error=Style(bold=True, foreground="203"),
        status=Style(foreground="243"),
        popup_title=Style(bold=True, foreground="230", background="60", padding=(0, 1)),
        section=Style(bold=True, foreground="153"),
        section_rule=Style(foreground="239"),
        splash=Style(bold=True, foreground="123"),
        splash_dim=Style(foreground="80"),
        splash_box=Style(border="rounded", border_foreground="80", padding=(1, 3)),
    )