"""
Frame rendering.

Turns a Frame into Rich Text: the tab bar, the bordered window holding the
active tab's lines, the prompt and the help line. Every function takes the
Theme explicitly.

    ╭──────────╮╭──────────╮╭──────────╮
    │ CSSE1001 ││ MATH1051 ││ OVERALL  │
    │          └┴──────────┴┴──────────┤
    │                                  │
    │  Quiz                (10.0): 8   │
    │  ...                             │
    └──────────────────────────────────┘
"""

from rich.text import Text

from ..config import MIN_TAB_WIDTH, MIN_WIN_WIDTH, NUM_TABS_SWITCH
from ..models import Frame
from .keymap import FULL_HELP, SHORT_HELP
from .theme import Theme

PADDING = 2


def tab_width(count: int) -> int:
    """Inner width of every tab: tabs share MIN_WIN_WIDTH until there are too many."""
    if count <= NUM_TABS_SWITCH:
        return MIN_WIN_WIDTH // count
    return MIN_TAB_WIDTH


def _tab_bottom(is_first: bool, is_last: bool, is_active: bool) -> tuple:
    left, middle, right = ("┘", " ", "└") if is_active else ("┴", "─", "┴")
    if is_first and is_last:
        left, middle, right = "│", "─", "│"
    elif is_first:
        left = "│" if is_active else "├"
    elif is_last:
        right = "│" if is_active else "┤"
    return left, middle, right


def render_tabs(frame: Frame, theme: Theme) -> Text:
    width = tab_width(len(frame.labels))
    top, middle, bottom = Text(), Text(), Text()
    last = len(frame.labels) - 1
    for i, label in enumerate(frame.labels):
        is_active = i == frame.active_tab
        top.append("╭" + "─" * width + "╮", style=theme.border)
        middle.append("│", style=theme.border)
        middle.append(f" {label}".ljust(width)[:width],
                      style=theme.active_tab if is_active else theme.tab)
        middle.append("│", style=theme.border)
        left, fill, right = _tab_bottom(i == 0, i == last, is_active)
        bottom.append(left + fill * width + right, style=theme.border)
    return Text("\n").join([top, middle, bottom])


def render_window(frame: Frame, theme: Theme) -> Text:
    """Bordered body of the active tab, as wide as the tab bar."""
    inner = (tab_width(len(frame.labels)) + 2) * len(frame.labels) - 2
    rows = [Text()]
    for line in frame.lines:
        row = Text(line.text)
        if line.highlighted:
            row.stylize(theme.focused)
        if line.cursor is not None:
            if line.cursor >= len(row):
                row.append(" ")
            row.stylize("reverse", line.cursor, line.cursor + 1)
        rows.append(row)
    rows.append(Text())

    text = Text()
    for row in rows:
        row.truncate(inner - 2 * PADDING, pad=True)
        text.append("│", style=theme.border)
        text.append(" " * PADDING)
        text.append_text(row)
        text.append(" " * PADDING)
        text.append("│\n", style=theme.border)
    text.append("└" + "─" * inner + "┘", style=theme.border)
    return text


def render_prompt(frame: Frame, theme: Theme) -> Text:
    prompt = frame.prompt
    if not prompt.text:
        if prompt.open:
            text = Text("> ")
            text.append(" ", style="reverse")
            text.append(prompt.placeholder, style=theme.placeholder)
            return text
        return Text(prompt.placeholder, style=theme.placeholder)

    text = Text("> " if prompt.open else "")
    style = theme.error if prompt.text.startswith("Invalid") else ""
    body = Text(prompt.text, style=style)
    if prompt.cursor is not None:
        if prompt.cursor >= len(body):
            body.append(" ")
        body.stylize("reverse", prompt.cursor, prompt.cursor + 1)
    text.append_text(body)
    return text


def _help_pair(keys: str, description: str, theme: Theme) -> Text:
    text = Text(keys, style=theme.help_key)
    text.append(f" {description}", style=theme.help_text)
    return text


def render_help(frame: Frame, theme: Theme) -> Text:
    """Short help on one line, or the full key reference in columns."""
    separator = Text(" • ", style=theme.help_text)
    if not frame.show_help:
        return separator.join(_help_pair(k, d, theme) for k, d in SHORT_HELP)

    columns = []
    for group in FULL_HELP:
        width = max(len(k) + 1 + len(d) for k, d in group)
        columns.append([(k, d, width) for k, d in group])
    rows = []
    for r in range(max(len(group) for group in columns)):
        row = Text()
        for group in columns:
            if r < len(group):
                keys, description, width = group[r]
                cell = _help_pair(keys, description, theme)
                cell.pad_right(width - len(cell))
            else:
                cell = Text(" " * group[0][2])
            row.append_text(cell)
            row.append("    ")
        row.rstrip()
        rows.append(row)
    return Text("\n").join(rows)
