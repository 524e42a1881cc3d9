"""Presentation state — slides, current page and the key/timer dispatcher."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from . import code
from .models import (
    DEFAULT_AUTHOR,
    DEFAULT_DATE,
    DEFAULT_PAGING,
    KeyPress,
    Quit,
    ReloadTick,
    Resize,
    ScheduleReload,
)
from .navigation import NavigationState, clamp, navigate
from .parser import format_paging, parse_deck
from .reload import DEFAULT_INTERVAL, ReloadMonitor
from .search import Search
from .source import load_source
from .themes import SlideTheme, select_theme

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "ctrl+c"})
SEARCH_KEY = "/"
FIND_NEXT_KEY = "ctrl+n"
RUN_CODE_KEY = "ctrl+e"

SUBMIT_KEY = "enter"
CANCEL_KEYS = frozenset({"escape", "ctrl+c"})
BACKSPACE_KEY = "backspace"


@dataclass
class Presentation:
    file_name: str | None = None
    theme_override: str | None = None
    reload_interval: float = DEFAULT_INTERVAL
    reader: Callable[[str | None], str] | None = None
    clock: Callable[[], datetime] = datetime.now

    slides: list[str] = field(default_factory=lambda: [""])
    page: int = 0
    author: str = DEFAULT_AUTHOR
    date: str = ""
    paging_template: str = DEFAULT_PAGING
    theme: SlideTheme | None = None
    # Extra output shown under the current slide, reset on page change.
    virtual_text: str = ""
    search: Search = field(default_factory=Search)
    buffer: str = ""
    width: int = 0
    height: int = 0
    monitor: ReloadMonitor | None = None

    def __post_init__(self) -> None:
        if self.file_name and self.monitor is None:
            self.monitor = ReloadMonitor(self.file_name, interval=self.reload_interval)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Read and parse the deck, replacing slides and metadata.

        Raises SourceError when the deck cannot be read.
        """
        read = self.reader or load_source
        deck = parse_deck(read(self.file_name))
        meta = deck.metadata

        # Resolve everything before assigning so a failure leaves the
        # previous deck intact.
        try:
            date = self.clock().strftime(meta.date or DEFAULT_DATE)
        except ValueError as exc:
            logger.warning("Invalid date format %r: %s", meta.date, exc)
            date = self.clock().strftime(DEFAULT_DATE)
        theme = select_theme(self.theme_override or meta.theme)

        self.slides = deck.slides
        self.author = meta.author
        self.date = date
        self.paging_template = meta.paging
        self.theme = theme

    def init(self) -> list:
        """Commands to run once the event loop starts."""
        if self.monitor is None:
            return []
        self.monitor.start()
        return [ScheduleReload(self.monitor.interval)]

    # ------------------------------------------------------------------
    # Page state
    # ------------------------------------------------------------------

    def set_page(self, page: int) -> None:
        if page == self.page:
            return
        self.virtual_text = ""
        self.page = page

    def current_slide(self) -> str:
        return self.slides[self.page]

    def paging(self) -> str:
        return format_paging(self.paging_template, self.page, len(self.slides))

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------

    def update(self, msg) -> list:
        """Apply one message and return the commands the event loop must run."""
        if isinstance(msg, KeyPress):
            return self._handle_key(msg.key)
        if isinstance(msg, ReloadTick):
            return self._handle_reload()
        if isinstance(msg, Resize):
            self.width, self.height = msg.width, msg.height
            return []
        logger.debug("Ignoring unknown message: %r", msg)
        return []

    def _handle_key(self, key: str) -> list:
        # Find-next and run-code work in both modes.
        if key == FIND_NEXT_KEY:
            self.find_next()
            return []
        if key == RUN_CODE_KEY:
            self.run_code()
            return []

        if self.search.active:
            self._handle_search_key(key)
            return []

        if key in QUIT_KEYS:
            return [Quit()]
        if key == SEARCH_KEY:
            self.buffer = ""
            self.search.begin()
        else:
            state = navigate(
                NavigationState(buffer=self.buffer, page=self.page, total_slides=len(self.slides)),
                key,
            )
            self.buffer = state.buffer
            self.set_page(state.page)
        return []

    def _handle_search_key(self, key: str) -> None:
        if key == SUBMIT_KEY:
            if self.search.query:
                self.find_next()
            self.search.done()
        elif key in CANCEL_KEYS:
            self.search.cancel()
        elif key == BACKSPACE_KEY:
            self.search.backspace()
        elif key == "space":
            self.search.insert(" ")
        elif len(key) == 1 and key.isprintable():
            self.search.insert(key)

    def find_next(self) -> None:
        """Move to the next slide matching the current query, if any."""
        match = self.search.find(self.slides, self.page)
        if match is not None:
            self.set_page(match)

    def run_code(self) -> None:
        """Execute the code blocks on the current slide into the virtual text."""
        try:
            blocks = code.parse_blocks(self.current_slide())
        except ValueError as exc:
            self.virtual_text = f"\nError: {exc}"
            return
        outputs = [code.execute(block).out for block in blocks]
        self.virtual_text = "\n".join(outputs)

    def _handle_reload(self) -> list:
        if self.monitor is None:
            return []
        if self.monitor.poll(self.load):
            self.set_page(clamp(self.page, len(self.slides)))
        return [ScheduleReload(self.monitor.interval)]
