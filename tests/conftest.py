"""
Pytest configuration and fixtures for todolist tests.

Provides store fixtures, test data factories, and a config that never reads
the user's real configuration file.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest

from todolist.config import Config
from todolist.models import Task
from todolist.services.task_store import TaskListStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove todolist environment overrides so tests see file/defaults only."""
    for name in (
        "TODOLIST_INPUT_PLACEHOLDER",
        "TODOLIST_INPUT_CLOSE_ON_SUBMIT",
        "TODOLIST_DISPLAY_TITLE",
        "TODOLIST_DISPLAY_EMPTY_MESSAGE",
        "TODOLIST_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store():
    """Provide an empty task store."""
    return TaskListStore()


@pytest.fixture
def filled_store():
    """
    Provide a store holding three pending tasks.

    Example:
        def test_something(filled_store):
            assert [t.description for t in filled_store] == ["Buy milk", "Walk dog", "Call mom"]
    """
    s = TaskListStore()
    for description in ("Buy milk", "Walk dog", "Call mom"):
        s.add_task(description)
    return s


@pytest.fixture
def default_config(tmp_path):
    """Config pointing at a file that does not exist, i.e. all defaults."""
    return Config(tmp_path / "missing.ini")


@pytest.fixture
def write_config(tmp_path):
    """
    Factory fixture writing an INI file and returning a Config for it.

    Example:
        def test_something(write_config):
            config = write_config("[input]\\nclose_on_submit = false\\n")
    """
    def _write_config(content: str) -> Config:
        path = tmp_path / "config.ini"
        path.write_text(content)
        return Config(path)
    return _write_config


@pytest.fixture
def make_task():
    """
    Factory fixture for creating Task models.

    Example:
        def test_something(make_task):
            task = make_task(description="Custom Task", is_completed=True)
    """
    def _make_task(
        id: UUID = None,
        description: str = "Test Task",
        is_completed: bool = False,
        created_at: datetime = None,
        completed_at: datetime = None
    ) -> Task:
        return Task(
            id=id or uuid4(),
            description=description,
            is_completed=is_completed,
            created_at=created_at or datetime.now(timezone.utc),
            completed_at=completed_at
        )
    return _make_task
