# src/smart_todo/cli/input_parsing.py

from __future__ import annotations

from datetime import date

from ..tasks.task_models import Priority, parse_date


def parse_int(raw: str) -> int:
    """Menu choices and task ids: plain integers, surrounding spaces ignored."""
    return int((raw or "").strip())


def parse_due_date(raw: str) -> date:
    return parse_date(raw)


def parse_priority(raw: str) -> Priority:
    return Priority.parse(raw)
