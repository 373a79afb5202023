# tests/conftest.py

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from smart_todo.core.state import AppState
from smart_todo.tasks.task_api import TaskService
from smart_todo.tasks.task_models import Priority, Task, TaskStatus

from .fakes import FakeClock, FakeTaskRepo

NOW = datetime(2024, 6, 1, 9, 30, 0)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="Smart To-Do List",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_file_path=tmp_path / "tasks.csv",
        title_width=20,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def service(repo: FakeTaskRepo, clock: FakeClock) -> TaskService:
    return TaskService(repo, clock)


@pytest.fixture()
def state(settings: SimpleNamespace, service: TaskService) -> AppState:
    return AppState(settings=settings, service=service)


@pytest.fixture()
def make_task():
    def _make(
        task_id: int,
        *,
        title: str = "Task",
        description: str = "",
        due: date = date(2024, 6, 10),
        priority: Priority = Priority.MEDIUM,
        status: TaskStatus = TaskStatus.PENDING,
        created_at: datetime = datetime(2024, 5, 1, 8, 0, 0),
        completed_at: datetime | None = None,
    ) -> Task:
        return Task(
            id=task_id,
            title=title,
            description=description,
            due_date=due,
            priority=priority,
            status=status,
            created_at=created_at,
            completed_at=completed_at,
        )

    return _make
