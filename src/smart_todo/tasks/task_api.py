# src/smart_todo/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from ..core.clock import SystemClock
from ..core.ports import Clock, TaskRepo
from .overdue import refresh_overdue
from .task_models import CompleteResult, DeleteResult, Priority, Task
from .task_ops import TaskCollection
from .task_store import TaskStoreError
from .task_views import TaskFilter, filter_tasks, predicate_for, sort_for_display

logger = logging.getLogger(__name__)


class TaskService:
    """
    High-level task API used by the console shell.

    Owns the in-process task list. Every mutating call saves the full list
    afterwards, including complete/delete calls that hit an unknown id.
    """

    def __init__(self, repo: TaskRepo, clock: Clock | None = None) -> None:
        self._repo = repo
        self._clock: Clock = clock or SystemClock()
        self._tasks = TaskCollection()
        self.last_save_ok = True

    @property
    def tasks(self) -> list[Task]:
        return self._tasks.snapshot()

    def load_and_refresh(self) -> list[Task]:
        self._tasks.replace_all(self._repo.load())
        changed = refresh_overdue(self._tasks, self._clock.today())
        if changed:
            logger.info("Marked %d task(s) overdue on load", changed)
            self.persist()
        return self.tasks

    def persist(self, tasks: Iterable[Task] | None = None) -> bool:
        """
        Save `tasks` (default: the current list).

        Write failures are logged and reported via the return value; the
        in-memory list is kept as-is and nothing is retried.
        """
        to_save = self._tasks.snapshot() if tasks is None else list(tasks)
        try:
            self._repo.save(to_save)
        except TaskStoreError:
            logger.exception("Failed to save %d task(s)", len(to_save))
            self.last_save_ok = False
            return False
        self.last_save_ok = True
        return True

    def add(
        self,
        title: str,
        description: str,
        due_date: date,
        priority: Priority | str,
    ) -> Task:
        task = self._tasks.add(
            title=title,
            description=description,
            due_date=due_date,
            priority=priority,
            now=self._clock.now(),
        )
        logger.info("Task added id=%s", task.id)
        self.persist()
        return task

    def complete(self, task_id: int) -> CompleteResult:
        result = self._tasks.complete(task_id, now=self._clock.now())
        logger.info("Complete task id=%s -> %s", task_id, result.value)
        self.persist()
        return result

    def delete(self, task_id: int) -> DeleteResult:
        result = self._tasks.delete(task_id)
        logger.info("Delete task id=%s -> %s", task_id, result.value)
        self.persist()
        return result

    def refresh(self) -> int:
        # In-memory only; the new statuses reach disk with the next save.
        return refresh_overdue(self._tasks, self._clock.today())

    def list_sorted(self) -> list[Task]:
        self.refresh()
        return sort_for_display(self._tasks)

    def list_filtered(self, kind: TaskFilter) -> list[Task]:
        self.refresh()
        selected = filter_tasks(self._tasks, predicate_for(kind, self._clock.today()))
        return sort_for_display(selected)
