"""
Tab controller: the tracker's state machine.

The controller owns the ordered tabs (one CourseScorecard per course plus
the trailing OVERALL tab), the active tab and the add-course prompt. All
mutation goes through handle(), which takes one event and returns at most
one command for the event loop to carry out.

STATES:
-------
    BROWSING     Keys navigate tabs and edit the active scorecard.
    PROMPT_OPEN  The add-course prompt captures every edit key until it is
                 confirmed (enter) or cancelled (escape).

COURSE LOOKUP:
--------------
Confirming the prompt does not look anything up itself. handle() returns a
LookupRequest; the event loop resolves the codes off-loop and feeds back a
LookupCompleted carrying the same request id. Completions for a request
that was cancelled are dropped. Several lookups may be pending at once;
each one inserts its courses when it completes.
"""

import logging
import re
from enum import Enum

from ..config import OVERALL_LABEL
from ..models import (
    Action,
    ActionKind,
    CancelLookup,
    EDIT_KINDS,
    Frame,
    InputField,
    LookupCompleted,
    LookupRequest,
    PromptLine,
    Quit,
    is_course_codes,
)
from .scorecard import CourseScorecard, OverallScorecard

logger = logging.getLogger(__name__)

PROMPT_PLACEHOLDER = "Course Code(s)"


class State(Enum):
    BROWSING = "browsing"
    PROMPT_OPEN = "prompt_open"


def split_codes(raw: str) -> list:
    """Split prompt text on commas and spaces into uppercased course codes."""
    return [token.strip().upper() for token in re.split(r"[, ]", raw) if token.strip()]


class TabController:
    """
    Ordered course tabs plus the OVERALL tab.

    INVARIANTS:
    -----------
    - labels[-1] == "OVERALL" and scorecards[-1] is the OverallScorecard
    - len(labels) == len(scorecards)
    - the OverallScorecard has one field per course tab, field i mirroring
      tab i; insert_course_tab() and remove_course_tab() are the only
      places either list changes
    - 0 <= active_tab < len(labels)

    Usage:
        controller = TabController(courses, when)
        command = controller.handle(Action(ActionKind.NEXT_TAB))
        frame = controller.frame()
    """

    def __init__(self, courses=(), when=None):
        self.labels = [course.name for course in courses] + [OVERALL_LABEL]
        self.scorecards = [CourseScorecard(course) for course in courses]
        self.scorecards.append(OverallScorecard([course.name for course in courses]))
        self.active_tab = 0
        self.state = State.BROWSING
        self.show_help = False
        self.title = when.fully_qualified if when else ""

        self.prompt = InputField(validator=is_course_codes, placeholder=PROMPT_PLACEHOLDER)
        self.prompt.show_cursor = False

        # request_id -> LookupRequest, in confirm order
        self.pending: dict = {}
        self._next_request_id = 1

    # =========================================================================
    # TABS
    # =========================================================================

    @property
    def overall(self) -> OverallScorecard:
        return self.scorecards[-1]

    @property
    def course_cards(self) -> list:
        return self.scorecards[:-1]

    @property
    def active(self):
        return self.scorecards[self.active_tab]

    @property
    def prompt_open(self) -> bool:
        return self.state == State.PROMPT_OPEN

    def insert_course_tab(self, course) -> int:
        """
        Add a tab for `course` just before OVERALL.

        Returns:
            Index of the new tab
        """
        index = len(self.labels) - 1
        self.labels.insert(index, course.name)
        self.scorecards.insert(index, CourseScorecard(course))
        self.overall.insert(index, course.name)
        logger.debug("Inserted tab %s at %d", course.name, index)
        return index

    def remove_course_tab(self, index: int) -> bool:
        """
        Remove the course tab at `index` and its OVERALL field.

        Returns:
            False (and changes nothing) if `index` is not a course tab
        """
        if not 0 <= index < len(self.labels) - 1:
            return False
        logger.debug("Removing tab %s at %d", self.labels[index], index)
        del self.labels[index]
        del self.scorecards[index]
        self.overall.remove(index)
        return True

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def handle(self, event):
        """
        Apply one event and return the command it produces, if any.

        Args:
            event: An Action or a LookupCompleted

        Returns:
            Quit, LookupRequest, CancelLookup or None
        """
        if isinstance(event, LookupCompleted):
            return self._lookup_completed(event)

        logger.debug("%s: %s", self.state.value, event)
        if event.kind == ActionKind.QUIT:
            return Quit()
        if event.kind == ActionKind.HELP:
            self.show_help = not self.show_help
            return None

        if self.prompt_open:
            return self._handle_prompt(event)
        return self._handle_browsing(event)

    def _handle_browsing(self, action: Action):
        kind = action.kind
        if kind == ActionKind.NEXT_TAB:
            self.active_tab = (self.active_tab + 1) % len(self.labels)
        elif kind == ActionKind.PREV_TAB:
            self.active_tab = (self.active_tab - 1) % len(self.labels)
        elif kind == ActionKind.DELETE_TAB:
            if self.labels[self.active_tab] != OVERALL_LABEL:
                self.remove_course_tab(self.active_tab)
                self.active_tab = 0
        elif kind == ActionKind.OPEN_PROMPT:
            self.state = State.PROMPT_OPEN
            self.prompt.set_value("")
            self.prompt.focus()
            self.prompt.show_cursor = True
        elif kind == ActionKind.UP:
            self.active.cycle_focus(-1)
        elif kind == ActionKind.DOWN:
            self.active.cycle_focus(1)
        elif kind in EDIT_KINDS:
            self.active.on_input(action)
        elif kind == ActionKind.PROMPT_CANCEL and self.pending:
            command = CancelLookup(tuple(self.pending))
            logger.debug("Cancelling lookups %s", command.request_ids)
            self.pending.clear()
            self.prompt.set_value("Lookup cancelled")
            return command
        return None

    def _close_prompt(self):
        self.state = State.BROWSING
        self.prompt.blur()
        self.prompt.show_cursor = False

    def _looking_up_message(self) -> str:
        codes = [code for request in self.pending.values() for code in request.codes]
        return f"Looking up {', '.join(codes)}..."

    def _handle_prompt(self, action: Action):
        kind = action.kind
        if kind == ActionKind.PROMPT_CANCEL:
            self._close_prompt()
            self.prompt.set_value("")
        elif kind == ActionKind.PROMPT_CONFIRM:
            self._close_prompt()
            codes = split_codes(self.prompt.value)
            if not codes:
                self.prompt.set_value("")
                return None
            request = LookupRequest(self._next_request_id, tuple(codes))
            self._next_request_id += 1
            self.pending[request.request_id] = request
            self.prompt.set_value(self._looking_up_message())
            return request
        elif kind in EDIT_KINDS:
            self.prompt.edit(action)
        return None

    def _lookup_completed(self, event: LookupCompleted):
        if self.pending.pop(event.request_id, None) is None:
            logger.debug("Dropping cancelled lookup %d", event.request_id)
            return None

        for course in event.resolved:
            self.active_tab = self.insert_course_tab(course)

        message = ""
        if event.invalid:
            message = f"Invalid course codes: {', '.join(event.invalid)}"
        if self.prompt_open:
            # The user is typing a new list; keep their text.
            if message:
                logger.warning(message)
        elif message or not self.pending:
            self.prompt.set_value(message)
        else:
            self.prompt.set_value(self._looking_up_message())
        return None

    # =========================================================================
    # RENDERING
    # =========================================================================

    def frame(self) -> Frame:
        """Snapshot everything the renderer needs for the next redraw."""
        if self.active.is_overall:
            lines = self.active.lines(self.course_cards)
        else:
            lines = self.active.lines()
        cursor = self.prompt.cursor if self.prompt_open else None
        prompt = PromptLine(self.prompt.value, self.prompt.placeholder, self.prompt_open, cursor)
        return Frame(
            title=self.title,
            labels=tuple(self.labels),
            active_tab=self.active_tab,
            lines=tuple(lines),
            prompt=prompt,
            show_help=self.show_help,
        )
