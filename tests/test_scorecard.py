from uqgrade.engines import CourseScorecard, OverallScorecard
from uqgrade.models import Action, ActionKind, LineKind

from .helpers import course, type_into


def test_new_card_focuses_first_field(quiz_exam):
    card = CourseScorecard(quiz_exam)
    assert len(card.inputs) == len(quiz_exam.items)
    assert card.focus_index == 0
    assert [field.focused for field in card.inputs] == [True, False]


def test_field_prompts_show_name_and_weight(quiz_exam):
    card = CourseScorecard(quiz_exam)
    assert card.inputs[0].prompt == f"{'Quiz':<20}(10.0): "


def test_cycle_focus_wraps(quiz_exam):
    card = CourseScorecard(quiz_exam)
    card.cycle_focus(-1)
    assert card.focus_index == 3
    card.cycle_focus(1)
    assert card.focus_index == 0


def test_cycle_focus_moves_field_focus(quiz_exam):
    card = CourseScorecard(quiz_exam)
    card.cycle_focus(1)
    assert [field.focused for field in card.inputs] == [False, True]
    card.cycle_focus(1)
    assert [field.focused for field in card.inputs] == [False, False]
    assert card.focused_input() is None


def test_edits_reach_focused_field(quiz_exam):
    card = CourseScorecard(quiz_exam)
    type_into(card, "50%")
    card.cycle_focus(1)
    type_into(card, "20")
    assert card.values == ["50%", "20"]
    assert card.recompute() == (25.0, 2)


def test_summary_lines_ignore_edits(quiz_exam):
    card = CourseScorecard(quiz_exam)
    card.cycle_focus(-1)
    assert not card.on_input(Action.character("5"))
    assert card.values == ["", ""]


def test_invalid_text_is_rejected(quiz_exam):
    card = CourseScorecard(quiz_exam)
    type_into(card, "abc")
    assert card.values == ["", ""]


def test_lines(quiz_exam):
    card = CourseScorecard(quiz_exam)
    type_into(card, "50%")
    card.cycle_focus(1)
    type_into(card, "20")
    lines = card.lines()
    kinds = [line.kind for line in lines]
    assert kinds[:5] == [LineKind.INPUT, LineKind.INPUT, LineKind.SEPARATOR,
                         LineKind.TOTAL, LineKind.GRADE]
    assert lines[0].text == f"{'Quiz':<20}(10.0): 50%"
    assert lines[3].text == f"{'Total':<19}(100.0): 25.0"
    assert lines[4].text == f"{'Current Grade':<23}(7): 2"

    remaining = [line.text for line in lines if line.kind == LineKind.REMAINING]
    assert remaining[0] == "To get a 3 you need 20.00 more percent"
    assert remaining[-1] == "To get a 7 you need 60.00 more percent"
    assert len(remaining) == 5


def test_lines_recompute_after_every_edit(single):
    card = CourseScorecard(single)
    type_into(card, "9")
    assert card.lines()[2].text.endswith("9.0")
    type_into(card, "0")
    assert card.lines()[2].text.endswith("90.0")
    assert card.grade == 7
    assert not [line for line in card.lines() if line.kind == LineKind.REMAINING]


def test_summary_highlight(quiz_exam):
    card = CourseScorecard(quiz_exam)
    card.cycle_focus(1)
    card.cycle_focus(1)
    highlighted = [line.kind for line in card.lines() if line.highlighted]
    assert highlighted == [LineKind.TOTAL]
    card.cycle_focus(1)
    highlighted = [line.kind for line in card.lines() if line.highlighted]
    assert highlighted == [LineKind.GRADE]


def test_cursor_column_on_focused_field(single):
    card = CourseScorecard(single)
    type_into(card, "7")
    line = card.lines()[0]
    assert line.cursor == len(card.inputs[0].prompt) + 1


def _graded(*marks):
    cards = []
    for i, mark in enumerate(marks):
        card = CourseScorecard(course(f"C{i}", 100))
        type_into(card, mark)
        cards.append(card)
    return cards


def test_overall_mean():
    cards = _graded("55", "80")
    overall = OverallScorecard([card.name for card in cards])
    assert overall.recompute(cards) == 5.0
    assert [field.value for field in overall.inputs] == ["4.00", "6.00"]


def test_overall_fields_are_read_only():
    cards = _graded("55")
    overall = OverallScorecard(["C0"])
    overall.recompute(cards)
    field = overall.inputs[0]
    assert not field.editable
    assert not field.show_cursor
    assert not overall.on_input(Action.character("1"))
    assert not overall.on_input(Action(ActionKind.BACKSPACE))
    assert field.value == "4.00"


def test_overall_without_courses_is_not_applicable():
    overall = OverallScorecard()
    assert overall.recompute([]) is None
    lines = overall.lines([])
    assert lines[-1].text == f"{'Overall Grade':<19}(7.00): N/A"
    assert lines[-1].highlighted


def test_overall_lines():
    cards = _graded("55", "80")
    overall = OverallScorecard(["C0", "C1"])
    lines = overall.lines(cards)
    assert lines[0].text == f"{'C0':<19}(7.00): 4.00"
    assert lines[0].highlighted
    assert lines[0].cursor is None
    assert lines[-1].text == f"{'Overall Grade':<19}(7.00): 5.00"


def test_overall_cycle_focus_wraps():
    overall = OverallScorecard(["A", "B"])
    overall.cycle_focus(-1)
    assert overall.focus_index == 2
    assert not any(field.focused for field in overall.inputs)
    overall.cycle_focus(1)
    assert overall.focus_index == 0
    assert overall.inputs[0].focused


def test_overall_insert_and_remove_keep_focus():
    overall = OverallScorecard(["A", "B"])
    overall.cycle_focus(1)
    overall.remove(0)
    assert overall.focus_index == 0
    assert overall.inputs[0].prompt.startswith("B")
    assert overall.inputs[0].focused
    overall.insert(1, "C")
    assert [field.prompt.split()[0] for field in overall.inputs] == ["B", "C"]
    assert overall.inputs[0].focused
