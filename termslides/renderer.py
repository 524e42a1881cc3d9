"""Render slide markdown to styled terminal text using rich."""

from __future__ import annotations

import io
import logging

from rich.console import Console
from rich.markdown import Markdown
from rich.theme import Theme

from .code import strip_hidden_lines
from .themes import SlideTheme

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80


def render_slide(content: str, width: int, theme: SlideTheme) -> str:
    """Render *content* at *width* columns and return it as ANSI text.

    Render failures are returned as a visible error message in place of the
    slide rather than raised.
    """
    width = width if width > 0 else DEFAULT_WIDTH
    try:
        console = Console(
            file=io.StringIO(),
            width=width,
            force_terminal=theme.color,
            color_system="truecolor" if theme.color else None,
            theme=Theme(theme.styles),
            highlight=False,
        )
        console.print(Markdown(strip_hidden_lines(content), code_theme=theme.code_theme))
    except Exception as exc:
        logger.warning("Markdown render failed: %s", exc)
        return f"Error: Could not render markdown! ({exc})"
    return console.file.getvalue()
