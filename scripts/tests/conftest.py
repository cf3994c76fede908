"""Pytest fixtures shared by the note store tests."""

import pytest

import log
from log import note_log_clear, note_log_print
from note_store import NoteSettings
from settings_store import SettingsStore


@pytest.fixture(autouse=True)
def isolated_log(tmp_path, monkeypatch):
    """Send log output to a per-test file; dump it after the test for -s runs."""
    monkeypatch.setattr(log, "LOG_FILE", tmp_path / "logs" / "notetaker.log")
    monkeypatch.setattr(log, "LOG_TO_STDERR", False)
    monkeypatch.setattr(log, "LOG", True)
    monkeypatch.setattr(log, "first_line", True)
    note_log_clear()
    yield log.LOG_FILE
    note_log_print()


@pytest.fixture
def settings_store(tmp_path):
    return SettingsStore(tmp_path / "settings.json")


@pytest.fixture
def notes(settings_store):
    """A NoteSettings bound to an empty, temporary settings file."""
    return NoteSettings(store=settings_store)
