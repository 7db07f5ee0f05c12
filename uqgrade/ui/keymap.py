"""
Key bindings.

Translates terminal key names (as Textual reports them) into the logical
actions the TabController understands. The mapping depends on whether the
add-course prompt is open: while it is, printable keys such as "q" and "["
are text, not commands.
"""

from typing import Optional

from ..models import Action, ActionKind

BROWSING_KEYS = {
    "up": ActionKind.UP,
    "down": ActionKind.DOWN,
    "enter": ActionKind.DOWN,
    "left": ActionKind.LEFT,
    "right": ActionKind.RIGHT,
    "tab": ActionKind.NEXT_TAB,
    "right_square_bracket": ActionKind.NEXT_TAB,
    "shift+tab": ActionKind.PREV_TAB,
    "left_square_bracket": ActionKind.PREV_TAB,
    "ctrl+d": ActionKind.DELETE_TAB,
    "ctrl+n": ActionKind.OPEN_PROMPT,
    "question_mark": ActionKind.HELP,
    "ctrl+c": ActionKind.QUIT,
    "q": ActionKind.QUIT,
    "backspace": ActionKind.BACKSPACE,
    "escape": ActionKind.PROMPT_CANCEL,
}

PROMPT_KEYS = {
    "enter": ActionKind.PROMPT_CONFIRM,
    "escape": ActionKind.PROMPT_CANCEL,
    "up": ActionKind.PROMPT_CANCEL,
    "ctrl+n": ActionKind.PROMPT_CANCEL,
    "down": ActionKind.DOWN,
    "left": ActionKind.LEFT,
    "right": ActionKind.RIGHT,
    "tab": ActionKind.NEXT_TAB,
    "shift+tab": ActionKind.PREV_TAB,
    "question_mark": ActionKind.HELP,
    "ctrl+c": ActionKind.QUIT,
    "backspace": ActionKind.BACKSPACE,
}

# Shown under the prompt: (keys, description) pairs, one group per column.
SHORT_HELP = [("?", "help"), ("q", "quit")]
FULL_HELP = [
    [("↑", "up"), ("↓/enter", "down"), ("←", "left"), ("→", "right")],
    [("tab/]", "next tab"), ("shift+tab/[", "prev tab"), ("ctrl+d", "delete tab"), ("ctrl+n", "new tab")],
    [("?", "help"), ("q", "quit")],
]


def map_key(key: str, character: Optional[str], prompt_open: bool) -> Optional[Action]:
    """
    Resolve one key press.

    Args:
        key: Textual key name (e.g., "ctrl+n", "left_square_bracket", "a")
        character: Printable character of the key, if any
        prompt_open: Whether the add-course prompt has focus

    Returns:
        The Action to dispatch, or None for keys with no meaning
    """
    table = PROMPT_KEYS if prompt_open else BROWSING_KEYS
    kind = table.get(key)
    if kind is not None:
        return Action(kind)
    if character and character.isprintable():
        return Action.character(character)
    return None
