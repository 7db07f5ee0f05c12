import pytest

from uqgrade.engines.grade import (
    classify,
    compute_total,
    contribution,
    levels_above,
    overall_grade,
    remaining_for,
    round_total,
)


@pytest.mark.parametrize("total, grade", [
    (0, 1), (19, 1), (20, 2), (44, 2), (45, 3), (49, 3), (50, 4),
    (64, 4), (65, 5), (74, 5), (75, 6), (84, 6), (85, 7), (100, 7), (-3, 1),
])
def test_classify_cutoffs(total, grade):
    assert classify(total) == grade


def test_classify_is_monotonic():
    grades = [classify(t) for t in range(-10, 121)]
    assert grades == sorted(grades)
    assert grades[0] == 1
    assert grades[-1] == 7


def test_percent_and_absolute_marks(quiz_exam):
    total, grade = compute_total(quiz_exam.items, ["50%", "20"])
    assert total == 25.0
    assert grade == 2


def test_empty_marks(quiz_exam):
    assert compute_total(quiz_exam.items, ["", ""]) == (0.0, 1)


def test_grade_uses_rounded_total(quiz_exam):
    total, grade = compute_total(quiz_exam.items, ["", "44.5"])
    assert total == 44.5
    assert grade == 3


def test_round_half_away_from_zero():
    assert round_total(2.5) == 3
    assert round_total(44.5) == 45
    assert round_total(44.4) == 44
    assert round_total(-0.5) == -1


def test_unparsable_value_contributes_nothing():
    assert contribution("abc", 10) == 0.0
    assert contribution("abc%", 10) == 0.0
    assert contribution("", 10) == 0.0


def test_remaining_uses_unrounded_total():
    assert remaining_for(3, 44.6) == pytest.approx(0.4)
    assert remaining_for(7, 25.0) == 60.0


def test_remaining_is_not_clamped():
    assert remaining_for(2, 30.0) == -10.0


def test_levels_above():
    assert list(levels_above(5)) == [6, 7]
    assert list(levels_above(7)) == []
    assert list(levels_above(1)) == [2, 3, 4, 5, 6, 7]


def test_overall_grade():
    assert overall_grade([4, 6]) == 5.0
    assert overall_grade([]) is None
