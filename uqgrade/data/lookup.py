"""
Course lookup.

CourseLookup is the single entry point the rest of the tracker uses to
turn course codes into Courses: the cache first, the course site second.
"""

import logging

import requests

from ..models import When
from .cache import CourseCache
from .scraper import CourseScraper

logger = logging.getLogger(__name__)


class CourseLookup:
    """
    Resolves course codes for one semester.

    Each code is resolved independently and ends up in exactly one of the
    two returned lists. Codes are expected uppercased already.

    Usage:
        lookup = CourseLookup(when)
        resolved, invalid = lookup(["CSSE1001", "MATH1051"])
    """

    def __init__(self, when: When, cache: CourseCache = None, scraper: CourseScraper = None):
        self.when = when
        self.cache = cache or CourseCache(when)
        self.scraper = scraper or CourseScraper(when)

    def __call__(self, codes) -> tuple:
        """
        Returns:
            (resolved, invalid): Courses in input order, unresolved codes in
            input order
        """
        resolved = []
        invalid = []
        for code in codes:
            course = self.resolve(code)
            if course is None:
                invalid.append(code)
            else:
                resolved.append(course)
        logger.debug("FOUND: %s", [course.name for course in resolved])
        logger.debug("INVALID: %s", invalid)
        return resolved, invalid

    def resolve(self, code: str):
        """Cached or freshly scraped Course for `code`, None if unresolvable."""
        course = self.cache.load(code)
        if course is not None:
            return course
        try:
            course = self.scraper.fetch(code)
        except requests.RequestException as e:
            logger.debug("%s: %s", code, e)
            return None
        if course is not None:
            self.cache.store(course)
        return course
