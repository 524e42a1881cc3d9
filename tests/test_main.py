"""Tests for termslides.__main__ — CLI argument parsing and startup."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from termslides.__main__ import build_parser, main


@pytest.fixture(autouse=True)
def _reset_logger():
    logger = logging.getLogger("termslides")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestArgParsing:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.file is None
        assert args.theme is None
        assert args.reload_interval == 1.0
        assert args.log_file is None
        assert args.debug is False

    def test_all_options(self):
        args = build_parser().parse_args(
            ["deck.md", "--theme", "light", "--reload-interval", "0.25", "--log-file", "x.log", "--debug"]
        )
        assert args.file == "deck.md"
        assert args.theme == "light"
        assert args.reload_interval == 0.25
        assert args.log_file == "x.log"
        assert args.debug is True

    def test_non_positive_interval_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["deck.md", "--reload-interval", "0"])
        assert exc.value.code == 1
        assert "reload-interval" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Startup
# ---------------------------------------------------------------------------

class TestStartup:
    def test_missing_file_exits_before_loop(self, tmp_path, capsys):
        with patch("termslides.__main__.PresenterApp") as app:
            with pytest.raises(SystemExit) as exc:
                main([str(tmp_path / "missing.md")])
        assert exc.value.code == 1
        assert "Error: could not read file" in capsys.readouterr().err
        app.assert_not_called()

    def test_directory_exits(self, tmp_path, capsys):
        with patch("termslides.__main__.PresenterApp"):
            with pytest.raises(SystemExit):
                main([str(tmp_path)])
        assert "can not read directory" in capsys.readouterr().err

    def test_runs_app_with_loaded_presentation(self, tmp_deck):
        with patch("termslides.__main__.PresenterApp") as app:
            main([str(tmp_deck), "--theme", "light"])
        presentation = app.call_args[0][0]
        assert presentation.file_name == str(tmp_deck)
        assert presentation.theme_override == "light"
        assert len(presentation.slides) == 3
        app.return_value.run.assert_called_once()

    def test_stdin_reattaches_terminal(self):
        with patch("termslides.__main__.PresenterApp") as app, \
                patch("termslides.presentation.load_source", return_value="# Piped"), \
                patch("termslides.__main__._reattach_tty") as reattach:
            main(["-"])
        reattach.assert_called_once()
        assert app.call_args[0][0].file_name is None

    def test_log_file_written(self, tmp_deck, tmp_path):
        log = tmp_path / "termslides.log"
        with patch("termslides.__main__.PresenterApp"):
            main([str(tmp_deck), "--log-file", str(log), "--debug"])
        text = log.read_text()
        assert "Loaded 3 slide(s)" in text
