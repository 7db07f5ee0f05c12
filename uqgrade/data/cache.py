"""
On-disk cache of course profiles.

Scraping a profile takes two page loads per course, so every resolved
course is written to CACHE_DIR as JSON and read back on the next lookup
for the same semester.

FILE LAYOUT:
------------
    <CACHE_DIR>/<year>-<semester>-<CODE>
    {"name": "CSSE1001", "assessment": [{"name": "Quiz", "weight": 10.0}, ...]}
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..config import CACHE_DIR
from ..models import Course, When

logger = logging.getLogger(__name__)


class CourseCache:
    """
    Reads and writes cached courses for one semester.

    A missing or unreadable file is a cache miss, never an error: the
    caller falls back to the network.

    Usage:
        cache = CourseCache(when)
        course = cache.load("CSSE1001")
        if course is None:
            ...
            cache.store(course)
    """

    def __init__(self, when: When, directory: Path = CACHE_DIR):
        self.when = when
        self.directory = Path(directory)

    def path(self, code: str) -> Path:
        return self.directory / f"{self.when.year}-{self.when.semester}-{code}"

    def load(self, code: str) -> Optional[Course]:
        path = self.path(code)
        try:
            with open(path, "r", encoding="utf-8") as f:
                course = Course.from_dict(json.load(f))
        except FileNotFoundError:
            return None
        except (OSError, ValueError, KeyError, TypeError) as e:
            # json.JSONDecodeError is a ValueError
            logger.debug("CACHE: ignoring %s: %s", path, e)
            return None
        logger.debug("CACHE: found %s @ %s", code, path)
        return course

    def store(self, course: Course) -> bool:
        """
        Write `course` to the cache.

        Returns:
            False if the file could not be written; a partially written file is removed
        """
        path = self.path(course.name)
        logger.debug("CACHE: caching %s @ %s", course.name, path)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(course.to_dict(), f)
        except OSError as e:
            logger.error("CACHE: unable to cache %s: %s", path, e)
            if path.is_file():
                path.unlink()
            return False
        return True
