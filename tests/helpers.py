from uqgrade.models import Action, AssessmentItem, Course


def course(name, *weights):
    return Course(name, tuple(AssessmentItem(f"Item {i}", w) for i, w in enumerate(weights, 1)))


def type_into(target, text):
    """Send one CHARACTER action per character to a field, card or controller."""
    handle = getattr(target, "handle", None) or getattr(target, "on_input", None) or target.edit
    for char in text:
        handle(Action.character(char))


def press(target, kind, times=1):
    for _ in range(times):
        target.handle(Action(kind))
