"""
UQ Grade Tracker Package
========================

Track in-progress grades for several courses in one terminal session.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           ENGINE LAYER                                   │
│            (Pure logic - no terminal, no network, no printing)          │
│                                                                         │
│  ┌─────────────┐  ┌──────────────────┐  ┌───────────────────────────┐   │
│  │ grade       │  │ CourseScorecard  │  │ TabController             │   │
│  │ (totals,    │  │ OverallScorecard │  │ (state machine: event ->  │   │
│  │  cutoffs)   │  │ (one tab each)   │  │  command, Frame)          │   │
│  └─────────────┘  └──────────────────┘  └───────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
              ▲ LookupCompleted                  │ LookupRequest
              │                                  ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                            DATA LAYER                                    │
│      CourseLookup = CourseCache (JSON on disk) + CourseScraper (HTTP)   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                       PRESENTATION LAYER                                 │
│   GradeApp (Textual event loop + renderer)   TerminalDisplay (ANSI)     │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

uqgrade/
├── __init__.py          # This file - main exports
├── __main__.py          # python -m uqgrade
├── config.py            # Configuration constants
├── cli.py               # Command-line interface
│
├── models/              # Dataclasses, events and the InputField
│   ├── course.py        # AssessmentItem, Course, When
│   ├── events.py        # Action, LookupCompleted, commands
│   ├── field.py         # InputField, validators
│   └── frame.py         # Frame, DisplayLine, PromptLine
│
├── data/                # Course profiles
│   ├── cache.py         # CourseCache
│   ├── scraper.py       # CourseScraper
│   └── lookup.py        # CourseLookup
│
├── engines/             # Grade logic and the tab state machine
│   ├── grade.py         # compute_total, classify, remaining_for
│   ├── scorecard.py     # CourseScorecard, OverallScorecard
│   ├── semester.py      # resolve_when
│   └── tabs.py          # TabController
│
└── ui/                  # User interface implementations
    ├── app.py           # GradeApp
    ├── keymap.py        # key -> Action
    ├── render.py        # Frame -> Rich Text
    ├── theme.py         # Theme
    └── terminal.py      # TerminalDisplay

USAGE
-----

Running from command line:

    uqgrade CSSE1001 MATH1051
    python -m uqgrade -s 2 -y 2024 CSSE1001

Driving the state machine without a terminal:

    from uqgrade import Action, ActionKind, AssessmentItem, Course, TabController

    course = Course("CSSE1001", (AssessmentItem("Quiz", 10), AssessmentItem("Exam", 90)))
    controller = TabController([course])
    for char in "50%":
        controller.handle(Action.character(char))
    controller.frame().lines
"""

# Version
__version__ = "1.0.0"

# Main exports
from .cli import main

# Model exports (for programmatic use)
from .models import (
    Action,
    ActionKind,
    AssessmentItem,
    Course,
    Frame,
    InputField,
    LookupCompleted,
    When,
)

# Engine exports
from .engines import (
    CourseScorecard,
    OverallScorecard,
    TabController,
    classify,
    compute_total,
    remaining_for,
    resolve_when,
)

# Data exports
from .data import CourseCache, CourseLookup, CourseScraper

# UI exports
from .ui import GradeApp, TerminalDisplay

# Configuration exports
from .config import CACHE_DIR, CUTOFFS, OVERALL_LABEL

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "main",
    # Models
    "Action",
    "ActionKind",
    "AssessmentItem",
    "Course",
    "Frame",
    "InputField",
    "LookupCompleted",
    "When",
    # Engines
    "CourseScorecard",
    "OverallScorecard",
    "TabController",
    "classify",
    "compute_total",
    "remaining_for",
    "resolve_when",
    # Data
    "CourseCache",
    "CourseLookup",
    "CourseScraper",
    # UI
    "GradeApp",
    "TerminalDisplay",
    # Config
    "CACHE_DIR",
    "CUTOFFS",
    "OVERALL_LABEL",
]
