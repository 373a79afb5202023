# tests/test_task_api.py

from __future__ import annotations

from datetime import date

from smart_todo.tasks.task_api import TaskService
from smart_todo.tasks.task_models import CompleteResult, DeleteResult, TaskStatus
from smart_todo.tasks.task_views import TaskFilter

from .fakes import FakeClock, FakeTaskRepo


def test_add_to_empty_store(service: TaskService, repo: FakeTaskRepo) -> None:
    task = service.add("Pay rent", "", date(2024, 1, 1), "High")

    assert task.id == 1
    assert task.status is TaskStatus.PENDING
    assert task.completed_at is None
    assert repo.save_calls == 1
    assert [t.title for t in repo.stored] == ["Pay rent"]


def test_complete_unknown_id_still_persists(service: TaskService, repo: FakeTaskRepo) -> None:
    service.add("a", "", date(2024, 7, 1), "Low")
    before = service.tasks
    saves = repo.save_calls

    assert service.complete(999) is CompleteResult.NOT_FOUND
    assert service.tasks == before
    assert repo.save_calls == saves + 1


def test_delete_persists_in_both_outcomes(service: TaskService, repo: FakeTaskRepo) -> None:
    task = service.add("a", "", date(2024, 7, 1), "Low")

    assert service.delete(task.id) is DeleteResult.DELETED
    assert service.delete(task.id) is DeleteResult.NOT_FOUND
    assert repo.save_calls == 3
    assert repo.stored == []


def test_complete_sets_timestamp_from_clock(service: TaskService, clock: FakeClock) -> None:
    task = service.add("a", "", date(2024, 7, 1), "Low")
    clock.advance(seconds=90)

    assert service.complete(task.id) is CompleteResult.COMPLETED
    clock.advance(days=1)
    assert service.complete(task.id) is CompleteResult.ALREADY_COMPLETED

    (stored,) = service.tasks
    assert stored.completed_at == task.created_at.replace(minute=31, second=30)


def test_load_and_refresh_marks_overdue_and_saves(make_task, clock: FakeClock) -> None:
    repo = FakeTaskRepo([make_task(5, due=date(2023, 1, 1)), make_task(6, due=date(2030, 1, 1))])
    service = TaskService(repo, clock)

    tasks = service.load_and_refresh()

    assert [t.status for t in tasks] == [TaskStatus.OVERDUE, TaskStatus.PENDING]
    assert repo.save_calls == 1
    assert repo.stored[0].status is TaskStatus.OVERDUE


def test_load_and_refresh_without_changes_does_not_save(make_task, clock: FakeClock) -> None:
    repo = FakeTaskRepo([make_task(1, due=date(2030, 1, 1))])
    service = TaskService(repo, clock)

    service.load_and_refresh()

    assert repo.save_calls == 0


def test_views_refresh_overdue_as_time_passes(service: TaskService, clock: FakeClock, repo) -> None:
    service.add("soon", "", date(2024, 6, 2), "Low")
    service.add("later", "", date(2024, 6, 30), "High")
    saves = repo.save_calls

    assert [t.title for t in service.list_sorted()] == ["later", "soon"]

    clock.advance(days=3)
    assert [t.title for t in service.list_sorted()] == ["soon", "later"]
    assert [t.title for t in service.list_filtered(TaskFilter.OVERDUE)] == ["soon"]
    # views never write
    assert repo.save_calls == saves


def test_persist_failure_keeps_memory_state(service: TaskService, repo: FakeTaskRepo) -> None:
    repo.fail_saves = True

    task = service.add("a", "", date(2024, 7, 1), "Low")

    assert service.last_save_ok is False
    assert service.tasks == [task]
    assert repo.stored == []

    repo.fail_saves = False
    assert service.persist() is True
    assert service.last_save_ok is True
