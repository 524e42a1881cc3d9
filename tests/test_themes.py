"""Tests for termslides.themes — theme selection."""

from __future__ import annotations

import json

import pytest

from termslides.themes import THEMES, select_theme


class TestSelectTheme:
    @pytest.mark.parametrize("name", ["dark", "light", "dracula", "ascii", "notty"])
    def test_named(self, name):
        assert select_theme(name) is THEMES[name]

    def test_default_is_dark(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert select_theme("default").name == "dark"
        assert select_theme(None).name == "dark"

    def test_default_respects_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        theme = select_theme("default")
        assert theme.name == "notty"
        assert theme.color is False

    def test_json_file(self, tmp_path):
        path = tmp_path / "mine.json"
        path.write_text(json.dumps({"code_theme": "native", "markdown.h1": "bold red"}))
        theme = select_theme(str(path))
        assert theme.code_theme == "native"
        assert theme.styles == {"markdown.h1": "bold red"}

    def test_missing_file_falls_back(self, tmp_path, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert select_theme(str(tmp_path / "nope.json")).name == "dark"

    def test_invalid_json_falls_back(self, tmp_path, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        path = tmp_path / "bad.json"
        path.write_text("[1, 2")
        assert select_theme(str(path)).name == "dark"

    def test_non_object_json_falls_back(self, tmp_path, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        assert select_theme(str(path)).name == "dark"
