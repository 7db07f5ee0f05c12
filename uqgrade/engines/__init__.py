"""
Grade, scorecard and tab engines.

Everything in this package is independent of the terminal: the engines
take plain values and events and return plain values, frames and commands.
"""

from .grade import (
    classify,
    compute_total,
    levels_above,
    overall_grade,
    remaining_for,
    round_total,
)
from .scorecard import CourseScorecard, OverallScorecard
from .semester import current_semester, resolve_when
from .tabs import State, TabController, split_codes

__all__ = [
    "classify",
    "compute_total",
    "levels_above",
    "overall_grade",
    "remaining_for",
    "round_total",
    "CourseScorecard",
    "OverallScorecard",
    "current_semester",
    "resolve_when",
    "State",
    "TabController",
    "split_codes",
]
