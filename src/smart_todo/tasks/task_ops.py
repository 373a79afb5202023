# src/smart_todo/tasks/task_ops.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date, datetime

from .task_models import CompleteResult, DeleteResult, Priority, Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskCollection:
    """
    Ordered in-memory task list plus its id counter.

    Ids are max(existing) + 1, and the counter never moves backwards during
    a session, so deleting the newest task does not free its id.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self.replace_all(tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def snapshot(self) -> list[Task]:
        return list(self._tasks)

    def replace_all(self, tasks: Iterable[Task]) -> None:
        self._tasks = list(tasks)
        highest = max((t.id for t in self._tasks), default=0)
        self._next_id = max(self._next_id, highest + 1)

    def get(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def next_id(self) -> int:
        highest = max((t.id for t in self._tasks), default=0)
        return max(self._next_id, highest + 1)

    def add(
        self,
        *,
        title: str,
        description: str,
        due_date: date,
        priority: Priority | str,
        now: datetime,
    ) -> Task:
        if not isinstance(priority, Priority):
            priority = Priority.parse(priority)

        task = Task(
            id=self.next_id(),
            title=title,
            description=description,
            due_date=due_date,
            priority=priority,
            status=TaskStatus.PENDING,
            created_at=now.replace(microsecond=0),
            completed_at=None,
        )
        self._tasks.append(task)
        self._next_id = task.id + 1
        logger.debug("Task added id=%s priority=%s due=%s", task.id, priority.value, due_date)
        return task

    def complete(self, task_id: int, *, now: datetime) -> CompleteResult:
        task = self.get(task_id)
        if task is None:
            return CompleteResult.NOT_FOUND
        if task.is_completed:
            return CompleteResult.ALREADY_COMPLETED

        task.status = TaskStatus.COMPLETED
        task.completed_at = now.replace(microsecond=0)
        logger.debug("Task completed id=%s at=%s", task.id, task.completed_at)
        return CompleteResult.COMPLETED

    def delete(self, task_id: int) -> DeleteResult:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[i]
                logger.debug("Task deleted id=%s", task_id)
                return DeleteResult.DELETED
        return DeleteResult.NOT_FOUND
