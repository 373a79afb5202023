# src/smart_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task service.

The service depends on Protocols instead of concrete implementations.
This keeps storage and time swappable and makes testing easier.
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-file task persistence: every load and save covers the full sequence."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...


class Clock(Protocol):
    def now(self) -> datetime: ...
    def today(self) -> date: ...
