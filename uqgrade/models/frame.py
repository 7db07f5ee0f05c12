"""
Render-ready snapshot of the tracker.

A Frame is everything a renderer needs to draw one screen: the tab bar,
the active tab's lines, the add-course prompt and whether the full help is
shown. It holds plain text only; colors and borders are the renderer's job.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LineKind(Enum):
    """What a display line shows, so the renderer can style it."""
    INPUT = "input"          # Assessment item or mirrored course grade
    SEPARATOR = "separator"
    TOTAL = "total"
    GRADE = "grade"
    OVERALL = "overall"
    BLANK = "blank"
    REMAINING = "remaining"  # Points still needed for a higher grade


@dataclass(frozen=True)
class DisplayLine:
    """
    One line of the active tab.

    Attributes:
        text: Full line text (prompt and value for inputs)
        kind: LineKind of the line
        highlighted: True for the focused line
        cursor: Column of the text cursor, None when no cursor is drawn
    """
    text: str
    kind: LineKind
    highlighted: bool = False
    cursor: Optional[int] = None


@dataclass(frozen=True)
class PromptLine:
    """The add-course prompt as it should appear below the active tab."""
    text: str
    placeholder: str
    open: bool
    cursor: Optional[int] = None


@dataclass(frozen=True)
class Frame:
    """
    Attributes:
        title: Semester label shown above the tabs
        labels: Tab labels, the last one always "OVERALL"
        active_tab: Index into labels
        lines: Display lines of the active tab
        prompt: The add-course prompt
        show_help: Full key reference requested instead of the short one
    """
    title: str
    labels: tuple
    active_tab: int
    lines: tuple
    prompt: PromptLine
    show_help: bool = False
