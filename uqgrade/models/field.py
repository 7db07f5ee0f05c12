"""
Editable text fields.

An InputField is one line of user-editable text guarded by a validator.
Every edit is applied to a copy of the value first; the copy only replaces
the value if the validator accepts it, so a field never holds text its
validator would reject (programmatic set_value() aside).
"""

import math
import re
from typing import Callable, Optional

from .events import Action, ActionKind

# Finite decimal number: optional sign, digits with optional fraction (or a
# bare fraction), optional exponent. No spaces, underscores, inf or nan.
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: str) -> Optional[float]:
    """Parse a finite decimal number, or return None."""
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def is_mark(text: str) -> bool:
    """
    Validator for assessment fields.

    Accepts the empty string, a number ("18.5") or a percentage ("92%").
    """
    if text == "":
        return True
    if text.endswith("%"):
        text = text[:-1]
    return parse_number(text) is not None


def is_course_codes(text: str) -> bool:
    """Validator for the add-course prompt: a pasted URL is not a code list."""
    return "?" not in text


def accept_all(text: str) -> bool:
    return True


class InputField:
    """
    A single editable text slot.

    Attributes:
        prompt: Label rendered in front of the value
        value: Current text, always accepted by `validator` (or empty)
        cursor: Insertion point, 0 <= cursor <= len(value)
        focused: Whether this field has keyboard focus (drives highlighting)
        editable: Non-editable fields ignore every edit action
        show_cursor: Whether the renderer draws the cursor
        char_limit: Maximum length of value, 0 for unlimited
        placeholder: Text shown dimmed while value is empty
    """

    def __init__(self, prompt: str = "", validator: Callable[[str], bool] = accept_all,
                 editable: bool = True, char_limit: int = 0, placeholder: str = ""):
        self.prompt = prompt
        self.validator = validator
        self.editable = editable
        self.char_limit = char_limit
        self.placeholder = placeholder
        self.value = ""
        self.cursor = 0
        self.focused = False
        self.show_cursor = editable

    def __repr__(self):
        return f"InputField(prompt={self.prompt!r}, value={self.value!r}, focused={self.focused})"

    def edit(self, action: Action) -> bool:
        """
        Apply a CHARACTER, BACKSPACE, LEFT or RIGHT action.

        Returns:
            True if the action was applied, False if it was discarded
            (non-editable field, rejected text, or nothing to do)
        """
        if not self.editable:
            return False

        if action.kind == ActionKind.LEFT:
            if self.cursor == 0:
                return False
            self.cursor -= 1
            return True
        if action.kind == ActionKind.RIGHT:
            if self.cursor == len(self.value):
                return False
            self.cursor += 1
            return True

        if action.kind == ActionKind.CHARACTER:
            if not action.char:
                return False
            candidate = self.value[:self.cursor] + action.char + self.value[self.cursor:]
            cursor = self.cursor + len(action.char)
        elif action.kind == ActionKind.BACKSPACE:
            if self.cursor == 0:
                return False
            candidate = self.value[:self.cursor - 1] + self.value[self.cursor:]
            cursor = self.cursor - 1
        else:
            return False

        if self.char_limit and len(candidate) > self.char_limit:
            return False
        if not self.validator(candidate):
            return False

        self.value = candidate
        self.cursor = cursor
        return True

    def set_value(self, text: str):
        """Replace the value without validation and move the cursor to the end."""
        self.value = text
        self.cursor = len(text)

    def focus(self):
        self.focused = True

    def blur(self):
        self.focused = False
