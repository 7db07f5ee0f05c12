"""
Colors used by the renderer.

A Theme is an immutable value handed to every render function.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """
    Rich style strings for each part of the screen.

    Attributes:
        focused: Focused field, highlighted summary line and cursor
        border: Tab and window borders
        active_tab: Label of the active tab
        tab: Labels of the other tabs
        title: Semester line above the tabs
        placeholder: Prompt placeholder
        error: Prompt text reporting invalid codes
        help_key: Key names in the help line
        help_text: Descriptions in the help line
    """
    focused: str = "#ff5faf"
    border: str = "#7d56f4"
    active_tab: str = "bold"
    tab: str = ""
    title: str = "bold"
    placeholder: str = "grey50"
    error: str = "red"
    help_key: str = "grey62"
    help_text: str = "grey42"


DEFAULT_THEME = Theme()
