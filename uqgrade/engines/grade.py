"""
Grade computation.

Pure functions turning typed marks into a running total and a grade on the
1-7 scale. Nothing here holds state; scorecards call compute_total() every
time they are drawn.

MARK FORMATS:
-------------
Each assessment field holds one of:
- ""      nothing entered yet, contributes 0
- "92%"   a percentage of the item, contributes 92/100 * weight
- "18.5"  points already weighted, contributes 18.5 as is

ROUNDING:
---------
The grade is classified on the total rounded half away from zero
(44.5 -> 45 -> grade 3). The "points still needed" figures use the
unrounded total, so a total of 44.6 shows 0.40 needed for a 3 while
already classifying as a 3.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from ..config import CUTOFFS, MAX_GRADE, MIN_GRADE
from ..models.field import parse_number

# (cutoff, grade) from the highest grade down, for first-match lookup.
_CUTOFF_TABLE = sorted(((cutoff, grade) for grade, cutoff in CUTOFFS.items()), reverse=True)


def contribution(value: str, weight: float) -> float:
    """
    Points one assessment field adds to the total.

    Unparsable values contribute 0; the field validator keeps them from
    being typed in the first place.
    """
    if value == "":
        return 0.0
    if value.endswith("%"):
        mark = parse_number(value[:-1])
        return 0.0 if mark is None else mark / 100 * weight
    mark = parse_number(value)
    return 0.0 if mark is None else mark


def round_total(total: float) -> int:
    """Round half away from zero (Python's round() rounds half to even)."""
    return int(Decimal(total).to_integral_value(rounding=ROUND_HALF_UP))


def classify(rounded_total: int) -> int:
    """
    Map a rounded total to a grade using CUTOFFS.

    [0,20)->1, [20,45)->2, [45,50)->3, [50,65)->4, [65,75)->5, [75,85)->6,
    85 and above->7. Totals below every cutoff (negative marks) are a 1.
    """
    for cutoff, grade in _CUTOFF_TABLE:
        if rounded_total >= cutoff:
            return grade
    return MIN_GRADE


def compute_total(items, values) -> tuple:
    """
    Compute the running total and grade of a course.

    Args:
        items: AssessmentItems of the course, in order
        values: Entered text for each item, same order and length

    Returns:
        (total, grade): unrounded total as a float, grade as an int 1-7
    """
    total = 0.0
    for item, value in zip(items, values):
        total += contribution(value, item.weight)
    return total, classify(round_total(total))


def remaining_for(grade: int, total: float) -> float:
    """
    Points still needed to reach `grade` from an unrounded total.

    Negative when the cutoff has already been passed; never clamped.
    """
    return CUTOFFS[grade] - total


def levels_above(grade: int) -> range:
    """Every grade strictly above `grade`, ascending, through MAX_GRADE."""
    return range(grade + 1, MAX_GRADE + 1)


def overall_grade(grades) -> Optional[float]:
    """Arithmetic mean of course grades, or None when there are no courses."""
    grades = list(grades)
    if not grades:
        return None
    return sum(grades) / len(grades)
