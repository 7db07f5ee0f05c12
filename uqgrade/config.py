"""
Configuration constants for the grade tracker.

This module contains all configuration values and constants used throughout
the tracker. Centralizing these makes it easy to adjust behavior when the
grading scheme or the course site changes.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Fetched course profiles are cached per semester so that re-opening the
# tracker for the same courses does not hit the network again.
CACHE_DIR = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache")) / "uqgrade"
LOG_FILE = CACHE_DIR / "uqgrade.log"


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# Minimum rounded total (out of 100) needed for each grade on the 1-7 scale.
CUTOFFS = {1: 0, 2: 20, 3: 45, 4: 50, 5: 65, 6: 75, 7: 85}
MIN_GRADE = 1
MAX_GRADE = 7

# Label of the synthetic tab averaging every course grade.
OVERALL_LABEL = "OVERALL"

# Longest mark a user can type into a single assessment field.
ASSESSMENT_CHAR_LIMIT = 10


# =============================================================================
# COURSE SITE
# =============================================================================

COURSE_URL = "https://my.uq.edu.au/programs-courses/course.html"
ALLOWED_DOMAINS = ("my.uq.edu.au", "course-profiles.uq.edu.au")

# The offerings table links to section 1 of the profile, assessment lives
# in section 5.
PROFILE_SECTION = "section_1"
ASSESSMENT_SECTION = "section_5"

# Every request is bounded by this timeout (seconds); the retry adapter
# below multiplies it by at most RETRY_TOTAL + 1 attempts.
REQUEST_TIMEOUT = 15
RETRY_TOTAL = 5
RETRY_BACKOFF = 2
RETRY_STATUSES = [429, 500, 502, 503, 504]
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


# =============================================================================
# LAYOUT
# =============================================================================

MIN_TAB_WIDTH = 10
MIN_WIN_WIDTH = 60
# Above this many tabs, tabs stop sharing MIN_WIN_WIDTH and get
# MIN_TAB_WIDTH each instead.
NUM_TABS_SWITCH = 5
SEPARATOR_WIDTH = 35
