"""Deck parser — splits raw text into slides and extracts metadata."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .meta import parse_metadata
from .models import DELIMITER, PAGING_MARKER, Metadata

logger = logging.getLogger(__name__)


@dataclass
class ParsedDeck:
    slides: list[str]
    metadata: Metadata = field(default_factory=Metadata)
    had_metadata: bool = False


def parse_deck(raw: str) -> ParsedDeck:
    """Split *raw* into slides on ``---`` lines.

    The first segment is tried as a metadata block.  If it is one and more
    segments follow, it is dropped from the slides since it holds only
    configuration.  A single segment is always kept as a slide, so the
    result never has zero slides.
    """
    content = raw.replace("\r\n", "\n")
    content = content.removeprefix(DELIMITER.lstrip("\n"))
    segments = content.split(DELIMITER)

    metadata, exists = parse_metadata(segments[0])
    if exists and len(segments) > 1:
        segments = segments[1:]

    logger.debug("Parsed %d slide(s), metadata=%s", len(segments), exists)
    return ParsedDeck(slides=segments, metadata=metadata, had_metadata=exists)


def format_paging(template: str, page: int, total: int) -> str:
    """Render a paging template for 0-based *page* out of *total* slides.

    Two ``%d`` markers become the 1-based page and the slide count, one
    marker becomes the page alone, and any other count leaves the template
    as a literal string.
    """
    markers = template.count(PAGING_MARKER)
    if markers == 2:
        values = [str(page + 1), str(total)]
    elif markers == 1:
        values = [str(page + 1)]
    else:
        return template

    parts = template.split(PAGING_MARKER)
    out = parts[0]
    for value, rest in zip(values, parts[1:]):
        out += value + rest
    return out
