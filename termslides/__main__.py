"""termslides — present a markdown slide deck in the terminal."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .app import PresenterApp
from .presentation import Presentation
from .reload import DEFAULT_INTERVAL
from .source import SourceError

logger = logging.getLogger(__name__)


def _configure_logging(log_file: str | None, debug: bool) -> None:
    """Log to *log_file* only; the terminal belongs to the presentation."""
    root = logging.getLogger("termslides")
    if not log_file:
        root.addHandler(logging.NullHandler())
        return
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    root.addHandler(file_handler)


def _reattach_tty() -> None:
    """Point stdin back at the terminal after the deck was piped in."""
    try:
        fd = os.open("/dev/tty", os.O_RDONLY)
    except OSError as exc:
        logger.warning("No terminal available for keyboard input: %s", exc)
        return
    os.dup2(fd, sys.stdin.fileno())
    os.close(fd)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termslides",
        description="Present a markdown slide deck in the terminal.",
    )
    parser.add_argument("file", nargs="?", default=None,
                        help="Markdown deck to present (omit or '-' to read from stdin)")
    parser.add_argument("--theme", default=None,
                        help="Theme name (dark, light, dracula, ascii, notty) or path to a JSON "
                             "theme; overrides the deck's theme and survives reloads")
    parser.add_argument("--reload-interval", type=float, default=DEFAULT_INTERVAL, metavar="SECONDS",
                        help=f"How often to check the file for changes (default: {DEFAULT_INTERVAL:g})")
    parser.add_argument("--log-file", default=None, metavar="PATH",
                        help="Write log messages to PATH")
    parser.add_argument("--debug", action="store_true",
                        help="Log debug messages (requires --log-file)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.reload_interval <= 0:
        print("Error: --reload-interval must be positive.", file=sys.stderr)
        sys.exit(1)

    _configure_logging(args.log_file, args.debug)
    logger.info("CLI arguments: %s", vars(args))

    file_name = None if args.file in (None, "-") else args.file
    presentation = Presentation(
        file_name=file_name,
        theme_override=args.theme,
        reload_interval=args.reload_interval,
    )

    try:
        presentation.load()
    except SourceError as exc:
        logger.error("Could not load slides: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    logger.info("Loaded %d slide(s) from %s", len(presentation.slides), file_name or "stdin")

    if file_name is None:
        _reattach_tty()

    PresenterApp(presentation).run()


if __name__ == "__main__":
    main()
