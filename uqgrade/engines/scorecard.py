"""
Scorecards: the content of one tab.

A CourseScorecard holds one editable field per assessment item and shows
the running total, the current grade and what is still needed for every
higher grade. The OverallScorecard mirrors the grade of every course in a
read-only field and shows their mean.

FOCUS POSITIONS:
----------------
Focus moves through the fields and then through the summary lines, which
can be highlighted but not edited:

    CourseScorecard   0 .. n-1 fields, n "Total", n+1 "Current Grade"
    OverallScorecard  0 .. n-1 fields, n "Overall Grade"
"""

from typing import Optional

from ..config import ASSESSMENT_CHAR_LIMIT, MIN_GRADE, SEPARATOR_WIDTH
from ..models import Action, DisplayLine, InputField, LineKind, is_mark
from .grade import compute_total, levels_above, overall_grade, remaining_for


def _line(field: InputField, highlighted: bool) -> DisplayLine:
    cursor = None
    if field.focused and field.show_cursor:
        cursor = len(field.prompt) + field.cursor
    return DisplayLine(field.prompt + field.value, LineKind.INPUT, highlighted, cursor)


class CourseScorecard:
    """
    Marks entered for one course.

    The total and grade are recomputed from the field values on every
    recompute() call; lines() calls it, so a frame is never drawn from
    stale numbers.

    Usage:
        card = CourseScorecard(course)
        card.on_input(Action.character("8"))
        total, grade = card.recompute()
    """

    is_overall = False

    def __init__(self, course):
        self.course = course
        self.inputs = [
            InputField(
                prompt=f"{item.name:<20}({item.weight:.1f}): ",
                validator=is_mark,
                char_limit=ASSESSMENT_CHAR_LIMIT,
            )
            for item in course.items
        ]
        self.focus_index = 0
        self.total = 0.0
        self.grade = MIN_GRADE
        if self.inputs:
            self.inputs[0].focus()

    @property
    def name(self) -> str:
        return self.course.name

    @property
    def values(self) -> list:
        return [field.value for field in self.inputs]

    @property
    def positions(self) -> int:
        """Number of focus positions: every field plus Total and Current Grade."""
        return len(self.inputs) + 2

    def focused_input(self) -> Optional[InputField]:
        if self.focus_index < len(self.inputs):
            return self.inputs[self.focus_index]
        return None

    def on_input(self, action: Action) -> bool:
        """Forward an edit action to the focused field; summary lines ignore it."""
        field = self.focused_input()
        if field is None:
            return False
        return field.edit(action)

    def recompute(self) -> tuple:
        self.total, self.grade = compute_total(self.course.items, self.values)
        return self.total, self.grade

    def cycle_focus(self, direction: int):
        """Move focus by +1 or -1, wrapping around every position."""
        self.focus_index = (self.focus_index + direction) % self.positions
        for i, field in enumerate(self.inputs):
            if i == self.focus_index:
                field.focus()
            else:
                field.blur()

    def lines(self) -> list:
        self.recompute()
        n = len(self.inputs)
        lines = [_line(field, field.focused) for field in self.inputs]
        lines.append(DisplayLine("-" * SEPARATOR_WIDTH, LineKind.SEPARATOR))
        lines.append(DisplayLine(
            f"{'Total':<19}(100.0): {self.total:.1f}", LineKind.TOTAL, self.focus_index == n))
        lines.append(DisplayLine(
            f"{'Current Grade':<23}(7): {self.grade}", LineKind.GRADE, self.focus_index == n + 1))
        for level in levels_above(self.grade):
            if level == self.grade + 1:
                lines.append(DisplayLine("", LineKind.BLANK))
            lines.append(DisplayLine(
                f"To get a {level} you need {remaining_for(level, self.total):.2f} more percent",
                LineKind.REMAINING,
            ))
        return lines


class OverallScorecard:
    """
    Read-only summary of every course tab.

    Field i always mirrors the CourseScorecard of tab i. The TabController
    is the only caller of insert() and remove(), and calls them together
    with its own list updates so the two never drift apart.
    """

    is_overall = True

    def __init__(self, names=()):
        self.inputs = [self._mirror(name) for name in names]
        self.focus_index = 0
        self.grade: Optional[float] = None
        self._apply_focus()

    @staticmethod
    def _mirror(name: str) -> InputField:
        return InputField(prompt=f"{name:<19}(7.00): ", editable=False)

    @property
    def positions(self) -> int:
        """Number of focus positions: every field plus Overall Grade."""
        return len(self.inputs) + 1

    def _apply_focus(self):
        for i, field in enumerate(self.inputs):
            if i == self.focus_index:
                field.focus()
            else:
                field.blur()

    def insert(self, index: int, name: str):
        self.inputs.insert(index, self._mirror(name))
        if index < self.focus_index:
            self.focus_index += 1
        self._apply_focus()

    def remove(self, index: int):
        del self.inputs[index]
        if index < self.focus_index:
            self.focus_index -= 1
        self.focus_index = min(self.focus_index, len(self.inputs))
        self._apply_focus()

    def on_input(self, action: Action) -> bool:
        """Mirrored fields are not editable; every edit is discarded."""
        if self.focus_index < len(self.inputs):
            return self.inputs[self.focus_index].edit(action)
        return False

    def recompute(self, course_cards) -> Optional[float]:
        """
        Refresh every mirrored field from `course_cards` and average them.

        Returns:
            Mean grade, or None when there are no course tabs
        """
        grades = []
        for field, card in zip(self.inputs, course_cards):
            card.recompute()
            grades.append(card.grade)
            field.set_value(f"{card.grade:.2f}")
            field.editable = False
            field.show_cursor = False
        self.grade = overall_grade(grades)
        return self.grade

    def cycle_focus(self, direction: int):
        self.focus_index = (self.focus_index + direction) % self.positions
        self._apply_focus()

    def lines(self, course_cards) -> list:
        self.recompute(course_cards)
        lines = [_line(field, field.focused) for field in self.inputs]
        lines.append(DisplayLine("-" * SEPARATOR_WIDTH, LineKind.SEPARATOR))
        grade = "N/A" if self.grade is None else f"{self.grade:.2f}"
        lines.append(DisplayLine(
            f"{'Overall Grade':<19}(7.00): {grade}",
            LineKind.OVERALL,
            self.focus_index == len(self.inputs),
        ))
        return lines
