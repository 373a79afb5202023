# src/smart_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_api import TaskService


@dataclass(slots=True)
class AppState:
    # Settings (or a SimpleNamespace with the same fields in tests).
    settings: object
    service: TaskService
