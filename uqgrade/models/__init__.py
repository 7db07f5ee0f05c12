"""
Data models for the grade tracker.

This package contains the dataclasses, enums and the InputField used
throughout the system. These serve as "contracts" between the engines
and the user interface.
"""

from .course import AssessmentItem, Course, When
from .events import (
    Action,
    ActionKind,
    EDIT_KINDS,
    LookupCompleted,
    Quit,
    LookupRequest,
    CancelLookup,
)
from .field import InputField, is_mark, is_course_codes, parse_number
from .frame import DisplayLine, Frame, LineKind, PromptLine

__all__ = [
    # Course models
    "AssessmentItem",
    "Course",
    "When",
    # Events and commands
    "Action",
    "ActionKind",
    "EDIT_KINDS",
    "LookupCompleted",
    "Quit",
    "LookupRequest",
    "CancelLookup",
    # Fields
    "InputField",
    "is_mark",
    "is_course_codes",
    "parse_number",
    # Frames
    "DisplayLine",
    "Frame",
    "LineKind",
    "PromptLine",
]
