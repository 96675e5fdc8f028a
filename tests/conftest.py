"""
Notes test suite: shared fixtures.

Run:  pytest tests/ -v
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from notes_app.config import Settings
from notes_app.domains.notes.services import NoteService
from notes_app.main import create_app


class SteppingClock:
    """Wall clock that advances one second per call, so every backup gets its own name."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime.now().replace(microsecond=0)
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep the developer's NOTES_* variables out of the tests."""
    for name in ("NOTES_DIR", "NOTES_PORT", "NOTES_HOST", "NOTES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def settings(tmp_path):
    return Settings(notes_dir=tmp_path / "notes")


@pytest.fixture
def note_service(settings, clock):
    return NoteService(settings, clock=clock)


@pytest.fixture
def client(settings, clock):
    return TestClient(create_app(settings, clock=clock))
