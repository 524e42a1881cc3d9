"""Shared fixtures for termslides tests."""

from __future__ import annotations

import textwrap
from datetime import datetime

import pytest

from termslides.presentation import Presentation


# ---------------------------------------------------------------------------
# Minimal decks (strings) used across multiple test modules
# ---------------------------------------------------------------------------

DECK_WITH_METADATA = textwrap.dedent("""\
    ---
    author: Ada
    date: "%d %B %Y"
    paging: "%d of %d"
    ---
    # Slide One

    ---
    # Slide Two

    ---
    # Slide Three
    """)

FIVE_SLIDES = ["# Intro", "# Agenda", "# Details", "# The foo slide", "# Questions"]

FIXED_NOW = datetime(2024, 3, 9, 12, 0, 0)


def _make_presentation(slides: list[str], **kwargs) -> Presentation:
    raw = "\n---\n".join(slides)
    p = Presentation(reader=lambda _: raw, clock=lambda: FIXED_NOW, **kwargs)
    p.load()
    return p


@pytest.fixture
def make_presentation():
    """Factory for a loaded Presentation backed by an in-memory deck."""
    return _make_presentation


@pytest.fixture
def five_slides():
    return list(FIVE_SLIDES)


@pytest.fixture
def presentation():
    return _make_presentation(FIVE_SLIDES)


@pytest.fixture
def tmp_deck(tmp_path):
    """Write DECK_WITH_METADATA to a temp file and return its path."""
    p = tmp_path / "deck.md"
    p.write_text(DECK_WITH_METADATA)
    return p
