"""Terminal event loop — a Textual app driving a Presentation."""

from __future__ import annotations

import logging

from rich.table import Table
from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Static

from .models import KeyPress, Quit, ReloadTick, Resize, ScheduleReload
from .presentation import Presentation
from .renderer import render_slide
from .themes import select_theme

logger = logging.getLogger(__name__)


def key_name(event: events.Key) -> str:
    """Map a Textual key event onto the names the presentation understands."""
    if event.character is not None and event.is_printable:
        return event.character
    return event.key


class SlideView(VerticalScroll, can_focus=False):
    """Scrollable slide area; never takes focus so keys reach the app."""


class PresenterApp(App):
    CSS = """
    #slide-view {
        height: 1fr;
        padding: 1 2;
    }
    #status {
        height: 1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "press('ctrl+c')", show=False, priority=True),
    ]

    ENABLE_COMMAND_PALETTE = False

    def __init__(self, presentation: Presentation) -> None:
        super().__init__()
        self.presentation = presentation
        self._view_ready = False

    def compose(self) -> ComposeResult:
        with SlideView(id="slide-view"):
            yield Static(id="slide")
        yield Static(id="status")

    def on_mount(self) -> None:
        self.presentation.update(Resize(self.size.width, self.size.height))
        self._view_ready = True
        self.refresh_view()
        self.perform(self.presentation.init())

    # ------------------------------------------------------------------
    # Messages in
    # ------------------------------------------------------------------

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.feed(KeyPress(key_name(event)))

    def on_resize(self, event: events.Resize) -> None:
        self.presentation.update(Resize(event.size.width, event.size.height))
        if self._view_ready:
            self.refresh_view()

    def action_press(self, key: str) -> None:
        self.feed(KeyPress(key))

    def reload_tick(self) -> None:
        self.feed(ReloadTick())

    def feed(self, msg) -> None:
        """Feed *msg* to the presentation, redraw, then run its commands."""
        page = self.presentation.page
        commands = self.presentation.update(msg)
        self.refresh_view()
        if self.presentation.page != page:
            self.query_one(SlideView).scroll_home(animate=False)
        self.perform(commands)

    # ------------------------------------------------------------------
    # Commands out
    # ------------------------------------------------------------------

    def perform(self, commands: list) -> None:
        for command in commands:
            if isinstance(command, Quit):
                self.exit()
            elif isinstance(command, ScheduleReload):
                # One-shot: the tick handler returns the next ScheduleReload.
                self.set_timer(command.interval, self.reload_tick)

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def slide_text(self) -> str:
        p = self.presentation
        theme = p.theme or select_theme(None)
        # Leave room for the view's horizontal padding.
        width = max(p.width - 4, 20)
        return render_slide(p.current_slide(), width, theme) + p.virtual_text

    def status_bar(self) -> Table:
        p = self.presentation
        if p.search.active:
            left = Text("/" + p.search.query, style="bold")
        else:
            left = Text.assemble((p.author, "bold #ff5f87"), " ", (p.date, "dim"))

        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_column(justify="right")
        grid.add_row(left, Text(p.paging(), style="dim"))
        return grid

    def refresh_view(self) -> None:
        self.query_one("#slide", Static).update(Text.from_ansi(self.slide_text()))
        self.query_one("#status", Static).update(self.status_bar())
