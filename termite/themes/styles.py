"""Terminal styles for every UI component, built from a theme."""

from __future__ import annotations

import re
from dataclasses import dataclass

from termite.themes.theme import Theme

NORMAL_BORDER = "normal"
ROUNDED_BORDER = "rounded"

# horizontal top, horizontal bottom, left, right, corners TL, TR, BL, BR
_BORDER_CHARS = {
    NORMAL_BORDER: ("─", "─", "│", "│", "┌", "┐", "└", "┘"),
    ROUNDED_BORDER: ("─", "─", "│", "│", "╭", "╮", "╰", "╯"),
}

_HEX = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")

Box = tuple[int, int, int, int]
_NO_BOX: Box = (0, 0, 0, 0)
_ALL_SIDES = (True, True, True, True)


def color(hex_value: str) -> str | None:
    """Return the colour for ``hex_value``, or ``None`` (no colour) when it is empty."""
    return hex_value or None


def _color_sgr(value: str | None, base: int) -> str | None:
    if not value:
        return None
    match = _HEX.fullmatch(value)
    if match:
        r, g, b = (int(part, 16) for part in match.groups())
        return f"{base};2;{r};{g};{b}"
    if value.isdigit() and int(value) < 256:
        return f"{base};5;{int(value)}"
    return None


def _wrap(sgr: str, text: str) -> str:
    return f"\x1b[{sgr}m{text}\x1b[0m" if sgr else text


@dataclass(frozen=True)
class Style:
    """Colours, emphasis and box settings for one UI element.

    ``padding`` and ``margin`` are (top, right, bottom, left);
    ``border_sides`` says which of (top, right, bottom, left) are drawn.
    """

    foreground: str | None = None
    background: str | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    padding: Box = _NO_BOX
    margin: Box = _NO_BOX
    border: str | None = None
    border_sides: tuple[bool, bool, bool, bool] = _ALL_SIDES
    border_foreground: str | None = None

    @property
    def sgr(self) -> str:
        """The ANSI select-graphic-rendition parameters of this style."""
        parts = []
        if self.bold:
            parts.append("1")
        if self.italic:
            parts.append("3")
        if self.underline:
            parts.append("4")
        parts.extend(
            p
            for p in (_color_sgr(self.foreground, 38), _color_sgr(self.background, 48))
            if p
        )
        return ";".join(parts)

    def render(self, text: str) -> str:
        """Lay out ``text`` with padding, colours, border and margin."""
        lines = text.split("\n")
        width = max(len(line) for line in lines)
        top, right, bottom, left = self.padding
        inner = width + left + right
        blank = " " * inner
        body = (
            [blank] * top
            + [" " * left + line.ljust(width) + " " * right for line in lines]
            + [blank] * bottom
        )
        sgr = self.sgr
        body = [_wrap(sgr, line) for line in body]

        outer = inner
        if self.border is not None:
            h_top, h_bottom, v_left, v_right, tl, tr, bl, br = _BORDER_CHARS[self.border]
            b_top, b_right, b_bottom, b_left = self.border_sides
            edge_sgr = _color_sgr(self.border_foreground, 38) or ""
            left_edge = _wrap(edge_sgr, v_left) if b_left else ""
            right_edge = _wrap(edge_sgr, v_right) if b_right else ""
            body = [left_edge + line + right_edge for line in body]
            if b_top:
                body.insert(
                    0,
                    _wrap(
                        edge_sgr,
                        (tl if b_left else "") + h_top * inner + (tr if b_right else ""),
                    ),
                )
            if b_bottom:
                body.append(
                    _wrap(
                        edge_sgr,
                        (bl if b_left else "") + h_bottom * inner + (br if b_right else ""),
                    )
                )
            outer = inner + int(b_left) + int(b_right)

        m_top, m_right, m_bottom, m_left = self.margin
        full = " " * (m_left + outer + m_right)
        body = (
            [full] * m_top
            + [" " * m_left + line + " " * m_right for line in body]
            + [full] * m_bottom
        )
        return "\n".join(body)


@dataclass(frozen=True)
class Styles:
    """The styles of every UI component; rebuilt whenever the theme changes."""

    # Thread list
    thread_unread: Style
    thread_read: Style
    thread_selected: Style
    thread_preview: Style
    thread_date: Style
    unread_dot: Style
    # Message viewer
    message_header: Style
    message_body: Style
    message_quote: Style
    message_link: Style
    message_divider: Style
    # Inbox sidebar
    inbox_label: Style
    inbox_label_active: Style
    inbox_badge: Style
    # Command bar
    command_bar_input: Style
    command_bar_match: Style
    command_bar_hint: Style
    # Status bar
    status_bar: Style
    status_bar_key: Style
    status_bar_value: Style
    # Borders
    border: Style
    border_focused: Style
    # Milestone toast
    milestone_toast: Style
    # Metrics bar
    metrics_bar: Style
    metrics_label: Style
    metrics_value: Style
    metrics_positive: Style
    # Semantic feedback
    success: Style
    warning: Style
    danger: Style
    info: Style
    # General purpose
    title: Style
    subtitle: Style
    muted: Style


def _horizontal(n: int) -> Box:
    return (0, n, 0, n)


def build_styles(theme: Theme) -> Styles:
    """Construct the full set of component styles from ``theme``."""
    t = theme
    return Styles(
        thread_unread=Style(foreground=color(t.unread_subject), bold=True, padding=_horizontal(1)),
        thread_read=Style(foreground=color(t.read_subject), padding=_horizontal(1)),
        thread_selected=Style(
            foreground=color(t.selection_text),
            background=color(t.selection),
            bold=True,
            padding=_horizontal(1),
        ),
        thread_preview=Style(foreground=color(t.read_preview), italic=True),
        thread_date=Style(foreground=color(t.text_muted)),
        unread_dot=Style(foreground=color(t.unread_indicator), bold=True),
        message_header=Style(
            foreground=color(t.text),
            bold=True,
            padding=(0, 0, 1, 0),
            border=NORMAL_BORDER,
            border_sides=(False, False, True, False),
            border_foreground=color(t.border),
        ),
        message_body=Style(foreground=color(t.text), padding=_horizontal(2)),
        message_quote=Style(
            foreground=color(t.text_muted),
            italic=True,
            border=NORMAL_BORDER,
            border_sides=(False, False, False, True),
            border_foreground=color(t.border),
            padding=(0, 0, 0, 1),
        ),
        message_link=Style(foreground=color(t.primary), underline=True),
        message_divider=Style(foreground=color(t.border)),
        inbox_label=Style(foreground=color(t.text_muted), padding=_horizontal(2)),
        inbox_label_active=Style(foreground=color(t.primary), bold=True, padding=_horizontal(2)),
        inbox_badge=Style(
            foreground=color(t.background),
            background=color(t.primary),
            bold=True,
            padding=_horizontal(1),
        ),
        command_bar_input=Style(
            foreground=color(t.text),
            background=color(t.command_bar_bg),
            padding=_horizontal(1),
            border=NORMAL_BORDER,
            border_sides=(False, False, False, True),
            border_foreground=color(t.command_border),
        ),
        command_bar_match=Style(foreground=color(t.accent), bold=True),
        command_bar_hint=Style(foreground=color(t.text_dim), italic=True),
        status_bar=Style(
            foreground=color(t.status_bar_text),
            background=color(t.status_bar_bg),
            padding=_horizontal(1),
        ),
        status_bar_key=Style(
            foreground=color(t.primary),
            background=color(t.status_bar_bg),
            bold=True,
            padding=(0, 1, 0, 0),
        ),
        status_bar_value=Style(
            foreground=color(t.status_bar_text), background=color(t.status_bar_bg)
        ),
        border=Style(border=ROUNDED_BORDER, border_foreground=color(t.border)),
        border_focused=Style(border=ROUNDED_BORDER, border_foreground=color(t.border_focus)),
        milestone_toast=Style(
            foreground=color(t.background),
            background=color(t.success),
            bold=True,
            padding=_horizontal(2),
            margin=(1, 1, 1, 1),
        ),
        metrics_bar=Style(
            foreground=color(t.text_muted),
            background=color(t.surface_alt),
            padding=_horizontal(1),
        ),
        metrics_label=Style(foreground=color(t.text_muted), padding=(0, 1, 0, 0)),
        metrics_value=Style(foreground=color(t.text), bold=True),
        metrics_positive=Style(foreground=color(t.success), bold=True),
        success=Style(foreground=color(t.success)),
        warning=Style(foreground=color(t.warning)),
        danger=Style(foreground=color(t.danger)),
        info=Style(foreground=color(t.info)),
        title=Style(foreground=color(t.text), bold=True, padding=(0, 0, 1, 0)),
        subtitle=Style(foreground=color(t.text_muted), italic=True),
        muted=Style(foreground=color(t.text_dim)),
    )