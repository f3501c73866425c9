"""Tests for the external editor launcher."""

import subprocess

import pytest

from billbalance.services.editor import EditorError, edit_file, resolve_editor
from billbalance.services.editor import launcher


class TestResolveEditor:
    """Tests for editor selection."""

    def test_explicit_editor_wins(self):
        """Test an explicit editor beats the environment."""
        assert resolve_editor("nano", {"VISUAL": "code -w"}) == "nano"

    def test_visual_before_editor(self):
        """Test $VISUAL is preferred over $EDITOR."""
        assert resolve_editor(None, {"VISUAL": "code -w", "EDITOR": "vim"}) == "code -w"

    def test_editor_variable(self):
        """Test $EDITOR is used when $VISUAL is unset or blank."""
        assert resolve_editor(None, {"VISUAL": "  ", "EDITOR": "vim"}) == "vim"

    def test_platform_default(self, monkeypatch):
        """Test the fallback when nothing is configured."""
        monkeypatch.setattr(launcher.sys, "platform", "linux")
        assert resolve_editor(None, {}) == "vi"
        monkeypatch.setattr(launcher.sys, "platform", "win32")
        assert resolve_editor(None, {}) == "notepad"


class TestEditFile:
    """Tests for running the editor."""

    def test_runs_editor_with_path(self, monkeypatch, tmp_path):
        """Test the editor command is split and given the file path."""
        calls = []

        def fake_run(command, check):
            calls.append((command, check))
            return subprocess.CompletedProcess(command, 0)

        monkeypatch.setattr(launcher.subprocess, "run", fake_run)
        target = tmp_path / "spend.yaml"

        edit_file(target, editor="code --wait")

        assert calls == [(["code", "--wait", str(target)], True)]

    def test_missing_editor(self, monkeypatch, tmp_path):
        """Test a missing executable raises EditorError."""
        def fake_run(command, check):
            raise FileNotFoundError(command[0])

        monkeypatch.setattr(launcher.subprocess, "run", fake_run)

        with pytest.raises(EditorError, match="Editor not found: nope"):
            edit_file(tmp_path / "spend.yaml", editor="nope")

    def test_editor_failure(self, monkeypatch, tmp_path):
        """Test a non-zero exit raises EditorError."""
        def fake_run(command, check):
            raise subprocess.CalledProcessError(3, command)

        monkeypatch.setattr(launcher.subprocess, "run", fake_run)

        with pytest.raises(EditorError, match="status 3"):
            edit_file(tmp_path / "spend.yaml", editor="vim")
