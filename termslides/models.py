"""Shared data models, messages and parsing constants."""

from __future__ import annotations

from dataclasses import dataclass

# A line consisting solely of three dashes separates two slides.
DELIMITER = "\n---\n"

DEFAULT_AUTHOR = ""
DEFAULT_DATE = "%Y-%m-%d"
DEFAULT_THEME = "default"
DEFAULT_PAGING = "Slide %d / %d"

# Marker replaced by the page number / slide count in a paging template.
PAGING_MARKER = "%d"


@dataclass
class Metadata:
    author: str = DEFAULT_AUTHOR
    date: str = DEFAULT_DATE
    theme: str = DEFAULT_THEME
    paging: str = DEFAULT_PAGING


# ---------------------------------------------------------------------------
# Event loop messages (inputs to Presentation.update)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class ReloadTick:
    pass


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


# ---------------------------------------------------------------------------
# Commands (outputs of Presentation.update, performed by the event loop)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class ScheduleReload:
    interval: float
