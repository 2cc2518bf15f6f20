"""
Pytest configuration and fixtures shared by all tests.

Provides logging setup, note factories and an isolated notes/config
location for every test.
"""

# SPDX-License-Identifier: MIT

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pendulum
import pytest

from purenotes import configuration
from purenotes.log import configure_logging
from purenotes.model.note import Note
from purenotes.repository.configuration import CONFIGURATION_REPO
from purenotes.time import datetime_to_reference_seconds
from purenotes.view import state as view_state


def pytest_configure(config):
    """Configure logging before any tests are collected."""
    configure_logging(level="DEBUG", format="json")


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file and notes file into tmp_path for each test."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(
        configuration, "DATA_NOTES_PATH", tmp_path / "PureNotes.json"
    )
    monkeypatch.delenv(configuration.NOTES_PATH_ENV_VAR, raising=False)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    configure_logging(level="DEBUG", format="json")
    view_state.set_show_header(True)
    view_state.set_timezone("UTC")
    return tmp_path


@pytest.fixture
def now() -> pendulum.DateTime:
    return pendulum.datetime(2024, 2, 20, 12, 0, 0, tz="UTC")


@pytest.fixture
def make_note() -> Callable[..., Note]:
    """Build a note modified at a given instant."""
    counter = {"id": 0}

    def _make_note(
        modified: pendulum.DateTime,
        title: str = "",
        text: str = "",
        snippet: str = "",
        id: int | None = None,
    ) -> Note:
        counter["id"] += 1
        note_id = id if id is not None else counter["id"]
        return Note(
            id=note_id,
            title=title or f"note {note_id}",
            text=text,
            snippet=snippet,
            modify_date=datetime_to_reference_seconds(modified),
        )

    return _make_note


@pytest.fixture
def write_notes_file(isolated_paths: Path) -> Callable[[Any], Path]:
    """Write raw JSON-able content to the notes file and return its path."""

    def _write(content: Any, name: str = "PureNotes.json") -> Path:
        path = isolated_paths / name
        path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_raw_notes(now: pendulum.DateTime) -> list[dict[str, Any]]:
    """Notes in the on-disk format: one recent, one last week, one old."""
    return [
        {
            "id": 1,
            "title": "Groceries",
            "text": "Milk\nEggs\nBread",
            "snippet": "Milk",
            "modifyDate": datetime_to_reference_seconds(now.subtract(hours=2)),
        },
        {
            "id": 2,
            "title": "Trip plan",
            "text": "Book the train to Lyon",
            "snippet": "Book the train",
            "modifyDate": datetime_to_reference_seconds(now.subtract(days=3)),
        },
        {
            "id": 3,
            "title": "Old ideas",
            "text": "Write a note browser",
            "snippet": "Write a note",
            "modifyDate": datetime_to_reference_seconds(now.subtract(days=400)),
        },
    ]
