# src/smart_todo/tasks/overdue.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


def is_overdue(task: Task, today: date) -> bool:
    return task.status is TaskStatus.PENDING and task.due_date < today


def refresh_overdue(tasks: Iterable[Task], today: date) -> int:
    """
    Move every Pending task whose due date is before `today` to Overdue.

    Completed and already-Overdue tasks are left alone, so running it twice
    changes nothing the second time. Returns how many tasks changed.
    """
    changed = 0
    for task in tasks:
        if is_overdue(task, today):
            task.status = TaskStatus.OVERDUE
            changed += 1
            logger.debug("Task id=%s is overdue (due=%s today=%s)", task.id, task.due_date, today)
    return changed
