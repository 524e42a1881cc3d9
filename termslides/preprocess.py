"""Pre-processing for executable decks.

A block of the form::

    ~~~sort -r
    b
    a
    ~~~

is replaced by the output of its command, with the block body piped to the
command's standard input.
"""

from __future__ import annotations

import logging
import re
import shlex
from dataclasses import dataclass

from .utils import run_command

logger = logging.getLogger(__name__)

_BLOCK_RE = re.compile(r"^~~~(\S.*)\n((?:.*\n)*?)~~~$", re.MULTILINE)


@dataclass
class Block:
    raw: str
    command: str
    args: list[str]
    input: str
    output: str = ""


def parse(content: str) -> list[Block]:
    """Find every ``~~~command`` block in *content*."""
    blocks: list[Block] = []
    for m in _BLOCK_RE.finditer(content):
        try:
            words = shlex.split(m.group(1))
        except ValueError:
            words = m.group(1).split()
        if not words:
            continue
        blocks.append(
            Block(raw=m.group(0), command=words[0], args=words[1:], input=m.group(2))
        )
    return blocks


def execute(block: Block) -> None:
    """Run the block's command and store what should replace the block."""
    result = run_command([block.command, *block.args], stdin=block.input)
    if result.returncode != 0:
        logger.warning(
            "Pre-process command %r failed (exit %d): %s",
            block.command, result.returncode, result.stderr.strip(),
        )
        block.output = result.stderr.strip() or f"exit status {result.returncode}"
        return
    block.output = result.stdout.removesuffix("\n")


def pre(content: str) -> str:
    """Replace every pre-process block in *content* with its command output."""
    for block in parse(content):
        execute(block)
        content = content.replace(block.raw, block.output, 1)
    return content
