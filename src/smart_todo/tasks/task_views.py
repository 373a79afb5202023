# src/smart_todo/tasks/task_views.py

from __future__ import annotations

"""
Read-only views over the task list: display ordering and filters.

Nothing here mutates the input sequence or touches storage. Callers are
expected to run overdue.refresh_overdue() first so statuses match today.
"""

from collections.abc import Callable, Iterable
from datetime import date, timedelta
from enum import StrEnum

from .task_models import Task, TaskStatus

TaskPredicate = Callable[[Task], bool]

OVERDUE_RANK = 0
UNKNOWN_PRIORITY_RANK = 99
PRIORITY_RANKS: dict[str, int] = {
    "High": 1,
    "Medium": 2,
    "Low": 3,
}


class TaskFilter(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"
    DUE_SOON = "due_soon"  # today or tomorrow
    OVERDUE = "overdue"


def effective_rank(task: Task) -> int:
    # Overdue overrides priority; Completed tasks still rank by priority.
    if task.status is TaskStatus.OVERDUE:
        return OVERDUE_RANK
    return PRIORITY_RANKS.get(str(task.priority), UNKNOWN_PRIORITY_RANK)


def sort_for_display(tasks: Iterable[Task]) -> list[Task]:
    return sorted(tasks, key=lambda t: (effective_rank(t), t.due_date))


def predicate_for(kind: TaskFilter, today: date) -> TaskPredicate:
    if kind is TaskFilter.PENDING:
        return lambda t: t.status is TaskStatus.PENDING
    if kind is TaskFilter.COMPLETED:
        return lambda t: t.status is TaskStatus.COMPLETED
    if kind is TaskFilter.OVERDUE:
        return lambda t: t.status is TaskStatus.OVERDUE
    if kind is TaskFilter.DUE_SOON:
        tomorrow = today + timedelta(days=1)
        return lambda t: t.due_date in (today, tomorrow)
    raise ValueError(f"unknown filter: {kind!r}")


def filter_tasks(tasks: Iterable[Task], predicate: TaskPredicate) -> list[Task]:
    return [t for t in tasks if predicate(t)]
