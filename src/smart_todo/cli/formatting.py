# src/smart_todo/cli/formatting.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import Task, format_date

RULE = "-" * 71
EMPTY_TEXT = "No tasks to display."


def truncate_title(title: str, width: int = 20) -> str:
    # Room for the column gap: 20 -> keep 15 chars + "..." once past 18.
    limit = width - 2
    if len(title) <= limit:
        return title
    return title[: limit - 3] + "..."


def render_task_table(tasks: Sequence[Task], *, title_width: int = 20) -> str:
    if not tasks:
        return EMPTY_TEXT

    row_fmt = "{:<4} {:<%d} {:<10} {:<12} {:<10} {:<12}" % title_width
    lines = [
        "",
        row_fmt.format("ID", "Title", "Priority", "DueDate", "Status", "CreatedAt"),
        RULE,
    ]
    for t in tasks:
        lines.append(
            row_fmt.format(
                t.id,
                truncate_title(t.title, title_width),
                t.priority.value,
                format_date(t.due_date),
                t.status.value,
                format_date(t.created_at.date()),
            )
        )
    lines.append(RULE)
    return "\n".join(lines)
