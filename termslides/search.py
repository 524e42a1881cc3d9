"""Search — query entry and case-insensitive slide search."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class SearchMode(enum.Enum):
    INACTIVE = "inactive"
    EDITING = "editing"


@dataclass
class Search:
    mode: SearchMode = SearchMode.INACTIVE
    query: str = ""
    last_match: int | None = None

    @property
    def active(self) -> bool:
        return self.mode is SearchMode.EDITING

    def begin(self) -> None:
        """Start editing a fresh query."""
        self.mode = SearchMode.EDITING
        self.query = ""

    def done(self) -> None:
        self.mode = SearchMode.INACTIVE

    def cancel(self) -> None:
        self.query = ""
        self.done()

    def insert(self, text: str) -> None:
        self.query += text

    def backspace(self) -> None:
        self.query = self.query[:-1]

    def find(self, slides: Sequence[str], page: int) -> int | None:
        """Index of the next slide after *page* containing the query.

        The scan runs to the last slide, then wraps around from the first
        slide up to *page*.  Returns None when the query is empty or nothing
        else matches.
        """
        if not self.query:
            return None
        needle = self.query.casefold()
        order = [*range(page + 1, len(slides)), *range(0, min(page, len(slides)))]
        for i in order:
            if needle in slides[i].casefold():
                logger.debug("Query %r matched slide %d", self.query, i)
                self.last_match = i
                return i
        logger.debug("Query %r: no other match from slide %d", self.query, page)
        return None
