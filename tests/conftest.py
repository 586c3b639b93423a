"""Pytest fixtures for the Task Notes API tests."""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from task_notes.config import Settings
from task_notes.main import create_app
from task_notes.store import TaskStore


class FakeClock:
    """Clock that advances by a fixed step on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=UTC)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def clock() -> FakeClock:
    """A deterministic clock."""
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> TaskStore:
    """An empty store driven by the fake clock."""
    return TaskStore(clock=clock)


@pytest.fixture
def settings() -> Settings:
    """Settings that do not depend on the environment."""
    return Settings(seed_welcome=False)


@pytest.fixture
def client(settings: Settings, store: TaskStore) -> TestClient:
    """Create a test client for the API."""
    return TestClient(create_app(settings, store))
