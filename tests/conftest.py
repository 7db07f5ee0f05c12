import pytest

from uqgrade.models import AssessmentItem, Course, When


@pytest.fixture
def when():
    return When(1, 2024, "Semester 1, 2024")


@pytest.fixture
def quiz_exam():
    return Course("CSSE1001", (AssessmentItem("Quiz", 10.0), AssessmentItem("Exam", 90.0)))


@pytest.fixture
def single():
    """Course with one assessment item worth the whole grade."""
    return Course("MATH1051", (AssessmentItem("Final", 100.0),))
