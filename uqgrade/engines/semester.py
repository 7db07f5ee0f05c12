"""
Semester resolution.

Course profiles are published per offering, so every lookup needs to know
which semester is being tracked. The command line accepts 0 ("current")
or an explicit semester; this module turns either into a When.

SEMESTER CALENDAR:
------------------
    Semester 1   March - July
    Semester 2   August - November
    Summer (3)   December - February, belonging to the year it starts in
"""

import logging
from datetime import date
from typing import Optional

from ..models import When

logger = logging.getLogger(__name__)

CURRENT = 0
SUMMER = 3


def current_semester(today: date) -> tuple:
    """
    Semester running on `today`.

    Returns:
        (semester, year)
    """
    if 3 <= today.month <= 7:
        return 1, today.year
    if 8 <= today.month <= 11:
        return 2, today.year
    if today.month <= 2:
        return SUMMER, today.year - 1
    return SUMMER, today.year


def label(semester: int, year: int) -> str:
    """Offering name as the course site spells it."""
    if semester == SUMMER:
        return f"Summer Semester, {year}"
    return f"Semester {semester}, {year}"


def resolve_when(semester: int = CURRENT, year: int = 0, today: Optional[date] = None) -> When:
    """
    Resolve command-line semester/year into a When.

    Args:
        semester: 0 for the current semester, 1, 2 or 3 (summer)
        year: Calendar year, 0 for the current one. Ignored when semester
              is 0, since the current semester fixes its own year.
        today: Reference date, defaults to date.today()

    Raises:
        ValueError: semester outside 0-3 or negative year
    """
    if semester < CURRENT or semester > SUMMER:
        raise ValueError(f"invalid semester: {semester}")
    if year < 0:
        raise ValueError(f"invalid year: {year}")

    today = today or date.today()
    if semester == CURRENT:
        semester, year = current_semester(today)
        logger.debug("Current semester: %d, %d", semester, year)
    elif year == 0:
        year = today.year

    when = When(semester, year, label(semester, year))
    logger.debug("Fully qualified when: %s", when)
    return when
