"""
Course profile scraper.

Resolves a course code to its assessment items in two page loads:

1. The course page (COURSE_URL?course_code=CODE) lists every offering in
   a table with class "offerings". The row naming the tracked semester
   (e.g., "Semester 1, 2024") links to the course profile through an
   anchor with class "profile-available".
2. The profile link points at section 1; section 5 holds the assessment
   summary, a table inside div.columns whose rows read
   | <a>Assessment name</a> | due date | weight |

Only hosts in ALLOWED_DOMAINS are ever requested.
"""

import logging
import re
from html.parser import HTMLParser
from typing import Optional
from urllib.parse import urljoin, urlparse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    ALLOWED_DOMAINS,
    ASSESSMENT_SECTION,
    COURSE_URL,
    PROFILE_SECTION,
    REQUEST_TIMEOUT,
    RETRY_BACKOFF,
    RETRY_STATUSES,
    RETRY_TOTAL,
    USER_AGENT,
)
from ..models import AssessmentItem, Course, When

logger = logging.getLogger(__name__)

WEIGHT_PATTERN = re.compile(r"\d+(?:\.\d+)?")


# --- SESSION SETUP ---
def create_retry_session() -> requests.Session:
    session = requests.Session()
    retries = Retry(
        total=RETRY_TOTAL,
        backoff_factor=RETRY_BACKOFF,  # Wait 2s, 4s, 8s... on 429/5xx
        status_forcelist=RETRY_STATUSES,
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def _classes(attrs) -> list:
    return (dict(attrs).get("class") or "").split()


class _OfferingParser(HTMLParser):
    """Finds the profile link in the offerings row naming a semester."""

    def __init__(self, semester_label: str):
        super().__init__()
        self.semester_label = semester_label
        self.link: Optional[str] = None
        self._table_depth = 0     # nesting of table.offerings
        self._row = None          # {"texts": [...], "links": [...]} of the open <tr>
        self._anchor = None       # text parts of the open <a>

    def handle_starttag(self, tag, attrs):
        if tag == "table":
            if self._table_depth or "offerings" in _classes(attrs):
                self._table_depth += 1
            return
        if not self._table_depth:
            return
        if tag == "tr":
            self._row = {"texts": [], "links": []}
        elif tag == "a" and self._row is not None:
            self._anchor = []
            if "profile-available" in _classes(attrs):
                href = dict(attrs).get("href")
                if href:
                    self._row["links"].append(href)

    def handle_endtag(self, tag):
        if not self._table_depth:
            return
        if tag == "table":
            self._table_depth -= 1
        elif tag == "a" and self._anchor is not None:
            self._row["texts"].append("".join(self._anchor))
            self._anchor = None
        elif tag == "tr" and self._row is not None:
            self._finish_row()

    def handle_data(self, data):
        if self._anchor is not None:
            self._anchor.append(data)

    def _finish_row(self):
        row, self._row = self._row, None
        self._anchor = None
        if self.link is not None or not row["links"]:
            return
        if any(self.semester_label in text for text in row["texts"]):
            self.link = row["links"][0]


class _AssessmentParser(HTMLParser):
    """Collects assessment rows from the first div.columns table body that has any."""

    def __init__(self):
        super().__init__()
        self.items: list = []
        self._divs = []           # one bool per open <div>: has class "columns"
        self._table_depth = 0     # tables opened inside div.columns
        self._in_body = False
        self._rows = []           # items of the open <tbody>
        self._cells = None        # cells of the open <tr>
        self._cell = None         # {"text": [...], "link": [...]} of the open <td>
        self._anchor_depth = 0

    def handle_starttag(self, tag, attrs):
        if tag == "div":
            self._divs.append("columns" in _classes(attrs))
        elif tag == "table" and any(self._divs):
            self._table_depth += 1
        elif tag == "tbody" and self._table_depth:
            self._in_body = True
            self._rows = []
        elif tag == "tr" and self._in_body:
            self._cells = []
        elif tag == "td" and self._cells is not None:
            self._close_cell()
            self._cell = {"text": [], "link": []}
        elif tag == "a" and self._cell is not None:
            self._anchor_depth += 1

    def handle_endtag(self, tag):
        if tag == "div":
            if self._divs:
                self._divs.pop()
        elif tag == "table" and self._table_depth:
            self._table_depth -= 1
        elif tag == "tbody" and self._in_body:
            self._in_body = False
            if self._rows and not self.items:
                self.items = self._rows
        elif tag == "tr" and self._cells is not None:
            self._close_cell()
            item = self._row_item(self._cells)
            if item is not None:
                self._rows.append(item)
            self._cells = None
        elif tag == "td":
            self._close_cell()
        elif tag == "a" and self._anchor_depth:
            self._anchor_depth -= 1

    def handle_data(self, data):
        if self._cell is None:
            return
        self._cell["text"].append(data)
        if self._anchor_depth:
            self._cell["link"].append(data)

    def _close_cell(self):
        if self._cell is not None:
            self._cells.append(self._cell)
            self._cell = None
            self._anchor_depth = 0

    @staticmethod
    def _row_item(cells) -> Optional[AssessmentItem]:
        if len(cells) < 3:
            return None
        lines = "".join(cells[0]["link"]).strip().split("\n")
        name = lines[-1].strip()
        match = WEIGHT_PATTERN.search("".join(cells[2]["text"]))
        if match is None:
            logger.debug("%s: no weight", name)
            return None
        return AssessmentItem(name, float(match.group()))


def find_profile_link(html: str, semester_label: str) -> Optional[str]:
    """Href of the course profile offered in `semester_label`, or None."""
    parser = _OfferingParser(semester_label)
    parser.feed(html)
    parser.close()
    return parser.link


def parse_assessment(html: str) -> list:
    """AssessmentItems listed in a profile's assessment section."""
    parser = _AssessmentParser()
    parser.feed(html)
    parser.close()
    return parser.items


class CourseScraper:
    """
    Fetches a course's assessment items from the course site.

    Usage:
        scraper = CourseScraper(when)
        course = scraper.fetch("CSSE1001")   # None if not offered

    Raises:
        requests.RequestException: from fetch(), on network or HTTP errors
    """

    def __init__(self, when: When, session: Optional[requests.Session] = None,
                 timeout: float = REQUEST_TIMEOUT):
        self.when = when
        self.session = session or create_retry_session()
        self.timeout = timeout

    def _get(self, url: str, params: Optional[dict] = None):
        logger.debug("Request: %s %s", url, params or "")
        resp = self.session.get(url, params=params, timeout=self.timeout)
        logger.debug("Response Code: %s", resp.status_code)
        resp.raise_for_status()
        return resp

    def fetch(self, code: str) -> Optional[Course]:
        resp = self._get(COURSE_URL, params={"course_code": code})
        link = find_profile_link(resp.text, self.when.fully_qualified)
        if link is None:
            logger.debug("%s: no link found", code)
            return None

        link = urljoin(resp.url, link).replace(PROFILE_SECTION, ASSESSMENT_SECTION, 1)
        if urlparse(link).hostname not in ALLOWED_DOMAINS:
            logger.debug("%s: refusing to follow %s", code, link)
            return None

        items = parse_assessment(self._get(link).text)
        if not items:
            logger.debug("%s: no assessment found", code)
            return None
        course = Course(code, tuple(items))
        logger.debug("%s", course)
        return course
