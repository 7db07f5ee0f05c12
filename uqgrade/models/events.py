"""
Events and commands exchanged with the tab controller.

Input reaches the controller as events: either a logical key action or the
completion of a course lookup. The controller answers with at most one
command, the only side effects it asks the event loop to perform.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ActionKind(Enum):
    """
    Closed set of logical keyboard actions.

    Key bindings are resolved to these by ui.keymap; nothing past that
    point knows which physical key was pressed.
    """
    QUIT = "quit"
    HELP = "help"
    NEXT_TAB = "next_tab"
    PREV_TAB = "prev_tab"
    DELETE_TAB = "delete_tab"
    OPEN_PROMPT = "open_prompt"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PROMPT_CONFIRM = "prompt_confirm"
    PROMPT_CANCEL = "prompt_cancel"
    CHARACTER = "character"
    BACKSPACE = "backspace"


# Actions that change the text (or cursor) of an input field.
EDIT_KINDS = frozenset({
    ActionKind.CHARACTER,
    ActionKind.BACKSPACE,
    ActionKind.LEFT,
    ActionKind.RIGHT,
})


@dataclass(frozen=True)
class Action:
    """A logical key action; `char` is set only for CHARACTER."""
    kind: ActionKind
    char: Optional[str] = None

    @classmethod
    def character(cls, char: str) -> "Action":
        return cls(ActionKind.CHARACTER, char)


@dataclass(frozen=True)
class LookupCompleted:
    """
    Result of a background course lookup.

    Attributes:
        request_id: Id of the LookupRequest this answers
        resolved: Courses found, in the order their codes were given
        invalid: Codes that could not be resolved
    """
    request_id: int
    resolved: tuple
    invalid: tuple


# =============================================================================
# COMMANDS
# =============================================================================

@dataclass(frozen=True)
class Quit:
    """Terminate the program with exit code 0."""


@dataclass(frozen=True)
class LookupRequest:
    """Resolve `codes` off the event loop and answer with LookupCompleted."""
    request_id: int
    codes: tuple


@dataclass(frozen=True)
class CancelLookup:
    """Abandon the listed lookups; their completions will be ignored."""
    request_ids: tuple
