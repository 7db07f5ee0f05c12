"""
Course data module.

This package handles fetching course profiles and caching them on disk.
"""

from .cache import CourseCache
from .lookup import CourseLookup
from .scraper import CourseScraper, create_retry_session, find_profile_link, parse_assessment

__all__ = [
    "CourseCache",
    "CourseLookup",
    "CourseScraper",
    "create_retry_session",
    "find_profile_link",
    "parse_assessment",
]
