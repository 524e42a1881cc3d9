"""Theme selection for slide rendering."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .models import DEFAULT_THEME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlideTheme:
    name: str
    code_theme: str = "monokai"
    # rich style name -> style definition, e.g. {"markdown.h1": "bold cyan"}
    styles: dict[str, str] = field(default_factory=dict)
    color: bool = True


THEMES: dict[str, SlideTheme] = {
    "dark": SlideTheme(
        name="dark",
        code_theme="monokai",
        styles={
            "markdown.h1": "bold #f25d94",
            "markdown.h2": "bold #39a0ed",
            "markdown.h3": "bold #39a0ed",
            "markdown.code": "#ff5f87 on #303030",
            "markdown.link": "#00afff underline",
        },
    ),
    "light": SlideTheme(
        name="light",
        code_theme="friendly",
        styles={
            "markdown.h1": "bold #5a56e0",
            "markdown.h2": "bold #005faf",
            "markdown.h3": "bold #005faf",
            "markdown.code": "#ff005f on #eeeeee",
            "markdown.link": "#005fd7 underline",
        },
    ),
    "dracula": SlideTheme(
        name="dracula",
        code_theme="dracula",
        styles={
            "markdown.h1": "bold #ff79c6",
            "markdown.h2": "bold #bd93f9",
            "markdown.h3": "bold #bd93f9",
            "markdown.code": "#50fa7b",
            "markdown.link": "#8be9fd underline",
        },
    ),
    "ascii": SlideTheme(name="ascii", code_theme="bw", color=False),
    "notty": SlideTheme(name="notty", code_theme="bw", color=False),
}


def default_theme() -> SlideTheme:
    if os.environ.get("NO_COLOR"):
        return THEMES["notty"]
    return THEMES["dark"]


def load_theme_file(path: Path) -> SlideTheme:
    """Load a JSON theme: a flat object of rich styles plus ``code_theme``."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Theme file must be a JSON object, got {type(data).__name__}")
    code_theme = str(data.pop("code_theme", "monokai"))
    return SlideTheme(
        name=str(path),
        code_theme=code_theme,
        styles={str(k): str(v) for k, v in data.items()},
    )


def select_theme(name: str | None) -> SlideTheme:
    """Resolve a theme by name, by JSON file path, or fall back to the default."""
    if not name or name == DEFAULT_THEME:
        return default_theme()
    if name in THEMES:
        return THEMES[name]

    path = Path(name).expanduser()
    try:
        return load_theme_file(path)
    except (OSError, ValueError) as exc:
        logger.warning("Could not load theme %r, using default: %s", name, exc)
        return default_theme()
