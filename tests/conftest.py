"""Shared fixtures for habitual tests.

Configuration paths are redirected into a temporary directory so tests never
read or write the real user config, and view state is reset between tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
from yaml import safe_dump

from habitual import configuration
from habitual.repository.configuration import CONFIGURATION_REPO
from habitual.view import state as view_state


@pytest.fixture(autouse=True)
def isolated_configuration(tmp_path, monkeypatch):
    """Point config and default log paths at a temporary directory."""
    monkeypatch.setattr(
        configuration, "APP_CONFIG_PATH", tmp_path / "config" / "config.yaml"
    )
    monkeypatch.setattr(configuration, "DEFAULT_LOG_PATH", tmp_path / "habits.yaml")
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)
    yield
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)


@pytest.fixture
def write_log(tmp_path) -> Callable[..., Path]:
    """Factory writing a habit log YAML file and returning its path."""

    def _write(
        habits: list[dict[str, Any]],
        entries: list[dict[str, Any]],
        name: str = "habits.yaml",
    ) -> Path:
        path = tmp_path / name
        path.write_text(safe_dump({"habits": habits, "entries": entries}))
        return path

    return _write


@pytest.fixture
def sample_log(write_log) -> Path:
    """Daily 'Read' habit with a tolerated skip and weekly 'Gym' on Mon/Wed/Fri."""
    habits = [
        {"id": "read", "name": "Read", "frequency": "daily", "sort_order": 1},
        {
            "id": "gym",
            "name": "Gym",
            "frequency": "weekly",
            "frequency_target": 42,
            "color": "orange",
            "sort_order": 2,
        },
    ]
    entries = [
        {"habit_id": "read", "entry_date": "2024-01-01", "status": "completed"},
        {"habit_id": "read", "entry_date": "2024-01-02", "status": "completed"},
        {"habit_id": "read", "entry_date": "2024-01-03", "status": "skipped"},
        {"habit_id": "read", "entry_date": "2024-01-04", "status": "completed"},
        # Week of 2023-12-31: Mon 1, Wed 3, Fri 5
        {"habit_id": "gym", "entry_date": "2024-01-01", "status": "completed"},
        {"habit_id": "gym", "entry_date": "2024-01-03", "status": "completed"},
        {"habit_id": "gym", "entry_date": "2024-01-05", "status": "completed"},
    ]
    return write_log(habits, entries)
