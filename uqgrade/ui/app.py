"""
Interactive tracker.

GradeApp is the event loop: it turns key presses into Actions, hands each
one to the TabController, carries out the command the controller returns
and redraws from a fresh Frame. It holds no grade state of its own.

Course lookups are the only blocking work. Each one runs in its own thread
worker so keys keep working while the course site answers, and several
lookups may run at once. Every result comes back to the loop as a
LookupCompleted event.
"""

import logging

from rich.text import Text
from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static
from textual.worker import get_current_worker

from ..engines import TabController
from ..models import Action, ActionKind, CancelLookup, LookupCompleted, LookupRequest, Quit
from .keymap import map_key
from .render import render_help, render_prompt, render_tabs, render_window
from .theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)


class GradeApp(App):
    """
    Textual front end of a TabController.

    Usage:
        app = GradeApp(TabController(courses, when), CourseLookup(when))
        app.run()
        sys.exit(app.return_code or 0)
    """

    CSS = """
    Screen {
        padding: 1 2;
    }
    #title {
        height: 1;
    }
    #tabs {
        height: 3;
    }
    #prompt {
        margin-top: 1;
    }
    #help {
        margin-top: 1;
    }
    """

    ENABLE_COMMAND_PALETTE = False

    # Tab and ctrl+c are claimed by Textual itself unless bound with priority.
    BINDINGS = [
        Binding("ctrl+c", "key_action('quit')", "Quit", show=False, priority=True),
        Binding("tab", "key_action('next_tab')", "Next tab", show=False, priority=True),
        Binding("shift+tab", "key_action('prev_tab')", "Prev tab", show=False, priority=True),
    ]

    def __init__(self, controller: TabController, course_lookup, render_theme: Theme = DEFAULT_THEME):
        super().__init__()
        self.controller = controller
        self.course_lookup = course_lookup
        self.render_theme = render_theme
        # request_id -> Worker of every lookup still running
        self.lookups = {}

    # ── layout ───────────────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        yield Static(id="title")
        yield Static(id="tabs")
        yield Static(id="window")
        yield Static(id="prompt")
        yield Static(id="help")

    def on_mount(self) -> None:
        self.redraw_frame()

    def redraw_frame(self) -> None:
        frame = self.controller.frame()
        self.query_one("#title", Static).update(Text(frame.title, style=self.render_theme.title))
        self.query_one("#tabs", Static).update(render_tabs(frame, self.render_theme))
        self.query_one("#window", Static).update(render_window(frame, self.render_theme))
        self.query_one("#prompt", Static).update(render_prompt(frame, self.render_theme))
        self.query_one("#help", Static).update(render_help(frame, self.render_theme))

    # ── events ───────────────────────────────────────────────────────────

    def on_key(self, event: events.Key) -> None:
        action = map_key(event.key, event.character, self.controller.prompt_open)
        if action is None:
            return
        event.stop()
        event.prevent_default()
        self.feed(action)

    def action_key_action(self, kind: str) -> None:
        self.feed(Action(ActionKind(kind)))

    def feed(self, event) -> None:
        """Run one event through the controller, execute its command, redraw."""
        if isinstance(event, LookupCompleted):
            self.lookups.pop(event.request_id, None)
        command = self.controller.handle(event)
        if isinstance(command, Quit):
            self.exit(return_code=0)
            return
        if isinstance(command, LookupRequest):
            self.lookups[command.request_id] = self.lookup_courses(command)
        elif isinstance(command, CancelLookup):
            for request_id in command.request_ids:
                worker = self.lookups.pop(request_id, None)
                if worker is not None:
                    worker.cancel()
        self.redraw_frame()

    # ── workers ──────────────────────────────────────────────────────────

    @work(thread=True, group="lookup")
    def lookup_courses(self, request: LookupRequest) -> None:
        resolved, invalid = self.course_lookup(list(request.codes))
        if get_current_worker().is_cancelled:
            logger.debug("Lookup %d finished after cancel", request.request_id)
            return
        completed = LookupCompleted(request.request_id, tuple(resolved), tuple(invalid))
        self.call_from_thread(self.feed, completed)
