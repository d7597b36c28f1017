from __future__ import annotations

import copy
from collections.abc import Iterator
from pathlib import Path

import pytest

from tickwatch.config.paths import reset_paths
from tickwatch.config.settings import settings


@pytest.fixture(autouse=True)
def isolate_settings() -> Iterator[None]:
    """Run every test against default settings, whatever is on disk."""
    original_data = copy.deepcopy(settings._data)
    settings._data = {}
    try:
        yield
    finally:
        settings._data = original_data


@pytest.fixture
def xdg_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point XDG config/state homes at a temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    reset_paths()
    try:
        yield tmp_path
    finally:
        reset_paths()


class RecordingDisplay:
    """Display double that remembers every percentage shown."""

    def __init__(self) -> None:
        self.values: list[float] = []

    def show(self, percentage: float) -> None:
        self.values.append(percentage)


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def checklist_file(tmp_path: Path) -> Path:
    path = tmp_path / "todo.txt"
    path.write_text(
        "- [X] Task 1\n  - [X] Sub 1\n- [ ] Task 2\n",
        encoding="utf-8",
    )
    return path
