"""
User interface module.

The interactive tracker (a Textual application), its key bindings, theme
and renderer, plus plain terminal messages used outside the tracker.
"""

from .app import GradeApp
from .keymap import map_key
from .terminal import TerminalDisplay
from .theme import DEFAULT_THEME, Theme

__all__ = ["GradeApp", "map_key", "TerminalDisplay", "DEFAULT_THEME", "Theme"]
