# src/smart_todo/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - OVERDUE is derived from the due date (see overdue.refresh_overdue),
      it is never chosen by the user.
    - Values are the exact strings written to the task file.
    """

    PENDING = "Pending"
    COMPLETED = "Completed"
    OVERDUE = "Overdue"

    @classmethod
    def parse(cls, raw: str) -> TaskStatus:
        text = (raw or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        raise ValueError(f"unknown status: {raw!r}")


class Priority(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, raw: str) -> Priority:
        """Case-insensitive lookup: 'high', 'HIGH' and 'High' are all HIGH."""
        text = (raw or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        raise ValueError(f"unknown priority: {raw!r}")


class CompleteResult(StrEnum):
    COMPLETED = "completed"
    ALREADY_COMPLETED = "already_completed"
    NOT_FOUND = "not_found"


class DeleteResult(StrEnum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    due_date: date
    priority: Priority
    status: TaskStatus
    created_at: datetime
    completed_at: datetime | None = None

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED


def parse_date(raw: str) -> date:
    """Strict YYYY-MM-DD parsing (no compact or single-digit forms)."""
    text = (raw or "").strip()
    if not _DATE_RE.match(text):
        raise ValueError(f"invalid date (expected YYYY-MM-DD): {raw!r}")
    return datetime.strptime(text, DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_timestamp(raw: str) -> datetime:
    return datetime.fromisoformat((raw or "").strip())


def format_timestamp(value: datetime) -> str:
    return value.isoformat(timespec="seconds")
