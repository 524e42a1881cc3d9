"""Input acquisition — reads a deck from a file or a piped stream."""

from __future__ import annotations

import logging
import os
import stat
import sys
from typing import TextIO

from . import preprocess
from .utils import is_executable

logger = logging.getLogger(__name__)


class SourceError(Exception):
    """The deck could not be acquired; fatal at startup."""


def strip_shebang(content: str) -> str:
    """Remove exactly one leading ``#!`` line, if present."""
    if content.startswith("#!"):
        _, _, rest = content.partition("\n")
        return rest
    return content


def read_file(path: str) -> str:
    """Read the deck at *path*.

    Executable files have their shebang stripped and are then run through
    the pre-processor, in that order, so that a deck made executable to
    present it is never handed to the parser as a raw script.
    """
    try:
        st = os.stat(path)
    except OSError as exc:
        raise SourceError("could not read file") from exc
    if stat.S_ISDIR(st.st_mode):
        raise SourceError("can not read directory")

    try:
        with open(path, encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"could not read file: {exc}") from exc

    if is_executable(st):
        logger.debug("%s is executable, pre-processing", path)
        content = preprocess.pre(strip_shebang(content))

    return content


def read_stream(stream: TextIO | None = None) -> str:
    """Read a whole deck from *stream* (default: stdin).

    Fails when nothing is piped in, i.e. the stream is an interactive
    terminal or an empty non-pipe.
    """
    stream = stream if stream is not None else sys.stdin
    if stream is None:
        raise SourceError("no slides provided")

    try:
        st = os.fstat(stream.fileno())
    except (OSError, ValueError) as exc:
        raise SourceError("no slides provided") from exc

    if stream.isatty() or (not stat.S_ISFIFO(st.st_mode) and st.st_size == 0):
        raise SourceError("no slides provided")

    content = stream.read()
    logger.debug("Read %d character(s) from stream", len(content))
    return content


def load_source(file_name: str | None) -> str:
    """Read from *file_name* when given, otherwise from stdin."""
    if file_name:
        return read_file(file_name)
    return read_stream()
