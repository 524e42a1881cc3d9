"""Code blocks — extract fenced blocks from a slide and execute them."""

from __future__ import annotations

import logging
import os
import re
import tempfile
import time
from dataclasses import dataclass

from .utils import command_available, run_command

logger = logging.getLogger(__name__)

# ```lang ... ``` or ~~~lang ... ~~~ (three or more fence characters).
_FENCE_RE = re.compile(r"(?:`{3,}|~{3,})(\w+)\n(.*?)\n(?:`{3,}|~{3,})", re.DOTALL)

# Lines starting with this prefix are executed but not shown.
HIDDEN_PREFIX = "///"

_HIDDEN_LINE_RE = re.compile(r"^[ \t]*" + re.escape(HIDDEN_PREFIX) + r".*(?:\n|$)", re.MULTILINE)


@dataclass
class Block:
    code: str
    language: str


@dataclass
class Result:
    out: str
    exit_code: int
    execution_time: float = 0.0


@dataclass(frozen=True)
class Language:
    extension: str
    commands: tuple[tuple[str, ...], ...]


# Placeholders: <file> full path, <name> path without extension, <path> directory.
LANGUAGES: dict[str, Language] = {
    "bash": Language(".sh", (("bash", "<file>"),)),
    "sh": Language(".sh", (("sh", "<file>"),)),
    "zsh": Language(".zsh", (("zsh", "<file>"),)),
    "fish": Language(".fish", (("fish", "<file>"),)),
    "python": Language(".py", (("python3", "<file>"),)),
    "ruby": Language(".rb", (("ruby", "<file>"),)),
    "perl": Language(".pl", (("perl", "<file>"),)),
    "lua": Language(".lua", (("lua", "<file>"),)),
    "javascript": Language(".js", (("node", "<file>"),)),
    "elixir": Language(".exs", (("elixir", "<file>"),)),
    "julia": Language(".jl", (("julia", "<file>"),)),
    "go": Language(".go", (("go", "run", "<file>"),)),
    "rust": Language(".rs", (("rustc", "<file>", "-o", "<name>"), ("<name>",))),
    "cpp": Language(".cpp", (("g++", "<file>", "-o", "<name>"), ("<name>",))),
}


def strip_hidden_lines(markdown: str) -> str:
    """Remove ``///`` lines so they are not displayed."""
    return _HIDDEN_LINE_RE.sub("", markdown)


def _unhide(code: str) -> str:
    lines = []
    for line in code.split("\n"):
        stripped = line.lstrip()
        if stripped.startswith(HIDDEN_PREFIX):
            line = line[: len(line) - len(stripped)] + stripped[len(HIDDEN_PREFIX):].lstrip(" ")
        lines.append(line)
    return "\n".join(lines)


def parse_blocks(markdown: str) -> list[Block]:
    """Return every fenced code block in *markdown*, in order.

    Raises ValueError when the slide has no code blocks.
    """
    blocks = [
        Block(code=_unhide(m.group(2)), language=m.group(1).lower())
        for m in _FENCE_RE.finditer(markdown)
    ]
    if not blocks:
        raise ValueError("no code blocks found")
    return blocks


def _expand(template: tuple[str, ...], path: str) -> list[str]:
    name, _ = os.path.splitext(path)
    directory = os.path.dirname(path)
    return [
        part.replace("<file>", path).replace("<name>", name).replace("<path>", directory)
        for part in template
    ]


def execute(block: Block) -> Result:
    """Write the block to a temp file and run it with its language's commands."""
    language = LANGUAGES.get(block.language)
    if language is None:
        logger.debug("Unsupported language: %s", block.language)
        return Result(out="Error: unsupported language", exit_code=-1)

    program = language.commands[0][0]
    if not command_available(program):
        return Result(out=f"Error: {program} not found", exit_code=127)

    t0 = time.monotonic()
    with tempfile.TemporaryDirectory(prefix="termslides_") as tmp:
        path = os.path.join(tmp, "main" + language.extension)
        with open(path, "w", encoding="utf-8") as f:
            f.write(block.code)

        out = ""
        for template in language.commands:
            result = run_command(_expand(template, path), cwd=tmp)
            out = result.stdout + result.stderr
            if result.returncode != 0:
                return Result(
                    out=out,
                    exit_code=result.returncode,
                    execution_time=time.monotonic() - t0,
                )

    elapsed = time.monotonic() - t0
    logger.debug("Executed %s block in %.2fs", block.language, elapsed)
    return Result(out=out, exit_code=0, execution_time=elapsed)
