import pytest
import requests

from uqgrade.config import COURSE_URL
from uqgrade.data.scraper import CourseScraper, find_profile_link, parse_assessment
from uqgrade.models import AssessmentItem, Course, When

PROFILE_URL = "https://course-profiles.uq.edu.au/student_section_loader/section_1/118260"
ASSESSMENT_URL = "https://course-profiles.uq.edu.au/student_section_loader/section_5/118260"

COURSE_PAGE = """
<html><body>
<table class="offerings">
  <thead><tr><th>Semester</th><th>Location</th><th>Profile</th></tr></thead>
  <tbody>
    <tr>
      <td><a href="/offering/1">Semester 2, 2023 (24/07/2023 - 18/11/2023)</a></td>
      <td>St Lucia</td>
      <td><a class="profile-available" href="/section_1/100001">Course Profile</a></td>
    </tr>
    <tr>
      <td><a href="/offering/2">Semester 1, 2024 (26/02/2024 - 22/06/2024)</a></td>
      <td>St Lucia</td>
      <td><a class="profile-available" href="%s">Course Profile</a></td>
    </tr>
  </tbody>
</table>
</body></html>
""" % PROFILE_URL

ASSESSMENT_PAGE = """
<html><body>
<div class="section">
  <div class="columns">
    <table>
      <thead><tr><th>Assessment task</th><th>Due date</th><th>Weight</th></tr></thead>
      <tbody>
        <tr>
          <td><a href="#1">
            Quiz
          </a></td>
          <td>Week 3</td>
          <td>10%</td>
        </tr>
        <tr>
          <td><a href="#2">Tutorial/ Practical
            Assignment 1</a></td>
          <td>Week 6</td>
          <td>Weighting 22.5 %</td>
        </tr>
        <tr>
          <td><a href="#3">Hurdle</a></td>
          <td>Week 8</td>
          <td>Pass/Fail</td>
        </tr>
        <tr>
          <td><a href="#4">Examination</a></td>
          <td>Exam period</td>
          <td>67.5%</td>
        </tr>
      </tbody>
    </table>
  </div>
</div>
</body></html>
"""


class FakeResponse:
    def __init__(self, url, text="", status_code=200):
        self.url = url
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}")


class FakeSession:
    """Serves canned pages by URL and records every request."""

    def __init__(self, pages):
        self.pages = pages
        self.requests = []

    def get(self, url, params=None, timeout=None):
        self.requests.append((url, params, timeout))
        if params:
            code = params["course_code"]
            return self.pages.get((url, code)) or FakeResponse(f"{url}?course_code={code}", status_code=404)
        return self.pages.get(url) or FakeResponse(url, status_code=404)


def course_page(code, html):
    return {(COURSE_URL, code): FakeResponse(f"{COURSE_URL}?course_code={code}", html)}


def test_find_profile_link(when):
    assert find_profile_link(COURSE_PAGE, when.fully_qualified) == PROFILE_URL
    assert find_profile_link(COURSE_PAGE, "Semester 2, 2023") == "/section_1/100001"
    assert find_profile_link(COURSE_PAGE, "Summer Semester, 2024") is None


def test_find_profile_link_ignores_other_tables(when):
    html = COURSE_PAGE.replace('class="offerings"', 'class="archive"')
    assert find_profile_link(html, when.fully_qualified) is None


def test_parse_assessment():
    assert parse_assessment(ASSESSMENT_PAGE) == [
        AssessmentItem("Quiz", 10.0),
        AssessmentItem("Assignment 1", 22.5),
        AssessmentItem("Examination", 67.5),
    ]


def test_parse_assessment_outside_columns_is_ignored():
    assert parse_assessment(ASSESSMENT_PAGE.replace('class="columns"', 'class="rows"')) == []


def test_fetch_follows_assessment_section(when):
    session = FakeSession({
        **course_page("CSSE1001", COURSE_PAGE),
        ASSESSMENT_URL: FakeResponse(ASSESSMENT_URL, ASSESSMENT_PAGE),
    })
    course = CourseScraper(when, session=session, timeout=3).fetch("CSSE1001")

    assert course == Course("CSSE1001", (
        AssessmentItem("Quiz", 10.0),
        AssessmentItem("Assignment 1", 22.5),
        AssessmentItem("Examination", 67.5),
    ))
    assert session.requests == [
        (COURSE_URL, {"course_code": "CSSE1001"}, 3),
        (ASSESSMENT_URL, None, 3),
    ]


def test_fetch_not_offered(when):
    session = FakeSession(course_page("CSSE1001", COURSE_PAGE))
    scraper = CourseScraper(When(1, 2031, "Semester 1, 2031"), session=session)
    assert scraper.fetch("CSSE1001") is None
    assert len(session.requests) == 1


def test_fetch_refuses_foreign_hosts(when):
    html = COURSE_PAGE.replace(PROFILE_URL, "https://example.com/section_1/1")
    session = FakeSession(course_page("CSSE1001", html))
    assert CourseScraper(when, session=session).fetch("CSSE1001") is None
    assert len(session.requests) == 1


def test_fetch_without_assessment(when):
    session = FakeSession({
        **course_page("CSSE1001", COURSE_PAGE),
        ASSESSMENT_URL: FakeResponse(ASSESSMENT_URL, "<html><body></body></html>"),
    })
    assert CourseScraper(when, session=session).fetch("CSSE1001") is None


def test_fetch_http_error_propagates(when):
    scraper = CourseScraper(when, session=FakeSession({}))
    with pytest.raises(requests.HTTPError):
        scraper.fetch("XXXX0000")
