# src/smart_todo/tasks/task_store.py

from __future__ import annotations

import contextlib
import csv
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_models import (
    Priority,
    Task,
    TaskStatus,
    format_date,
    format_timestamp,
    parse_date,
    parse_timestamp,
)

logger = logging.getLogger(__name__)

HEADER = ("ID", "Title", "Description", "DueDate", "Priority", "Status", "CreatedAt", "CompletedAt")
MIN_FIELDS = 7


class TaskStoreError(RuntimeError):
    """Raised when the task file cannot be written."""


def _one_line(text: str) -> str:
    return " ".join(text.splitlines())


class TaskFileStore:
    """
    Flat-file task store (one CSV record per task).

    The file is always rewritten as a whole:
    - load() reads every record, skipping the ones it cannot parse
    - save() writes header + all records to a temp file, then os.replace()s it

    Text fields use standard CSV quoting, so a title containing a comma
    survives a save/load round-trip. Plain fields are written verbatim.
    Every record is one physical line; line breaks inside text are saved as spaces.
    """

    def __init__(self, path: str | Path = "tasks.csv") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- encoding helpers ----

    @staticmethod
    def _task_to_row(task: Task) -> list[str]:
        return [
            str(task.id),
            _one_line(task.title),
            _one_line(task.description),
            format_date(task.due_date),
            task.priority.value,
            task.status.value,
            format_timestamp(task.created_at),
            format_timestamp(task.completed_at) if task.completed_at is not None else "",
        ]

    @staticmethod
    def _row_to_task(row: list[str]) -> Task:
        completed_raw = row[7].strip() if len(row) > 7 else ""
        return Task(
            id=int(row[0]),
            title=row[1],
            description=row[2],
            due_date=parse_date(row[3]),
            priority=Priority.parse(row[4]),
            status=TaskStatus.parse(row[5]),
            created_at=parse_timestamp(row[6]),
            completed_at=parse_timestamp(completed_raw) if completed_raw else None,
        )

    # ---- public API ----

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task file at %s; starting with an empty list.", self._path)
            return []

        try:
            raw_lines = self._path.read_bytes().splitlines()
        except OSError:
            logger.exception("Failed to load tasks from %s", self._path)
            return []

        tasks: list[Task] = []
        skipped = 0
        if not raw_lines:
            return tasks

        header = raw_lines[0].decode("utf-8", errors="replace")
        if header != ",".join(HEADER):
            logger.debug("Unexpected header in %s: %r", self._path, header)

        # One record per physical line: a stray quote or a bad byte only costs its own line.
        for line_num, raw in enumerate(raw_lines[1:], start=2):
            try:
                line = raw.decode("utf-8")
                row = next(csv.reader([line]), [])
            except (UnicodeDecodeError, csv.Error) as e:
                logger.warning("Skipping unreadable line %d in %s: %s", line_num, self._path, e)
                skipped += 1
                continue

            if len(row) < MIN_FIELDS:
                logger.warning("Skipping malformed line %d in %s: %s", line_num, self._path, line)
                skipped += 1
                continue
            try:
                tasks.append(self._row_to_task(row))
            except ValueError as e:
                logger.warning(
                    "Skipping line %d in %s (data format issue): %s - %s",
                    line_num,
                    self._path,
                    line,
                    e,
                )
                skipped += 1

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        count = 0
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="") as fh:
                writer = csv.writer(fh, lineterminator="\n")
                writer.writerow(HEADER)
                for task in tasks:
                    writer.writerow(self._task_to_row(task))
                    count += 1
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise TaskStoreError(f"Error saving tasks to {self._path}: {e}") from e
        logger.debug("Saved %d tasks to %s", count, self._path)
