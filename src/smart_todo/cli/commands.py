# src/smart_todo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import CompleteResult, DeleteResult
from ..tasks.task_views import TaskFilter
from .formatting import render_task_table
from .input_parsing import parse_due_date, parse_int, parse_priority

Prompt = Callable[[str], str]
Emitter = Callable[[str], None]
MenuHandler = Callable[[AppState, Prompt, Emitter], str | None]

logger = logging.getLogger(__name__)

EXIT_KEY = "6"
BACK_KEY = "5"


class MenuRegistry:
    """Numbered menu registry used by the console connector (1. Add Task, ...)."""

    def __init__(self, title: str) -> None:
        self.title = title
        self._handlers: dict[str, MenuHandler] = {}
        self._labels: dict[str, str] = {}

    def register(
        self,
        key: str,
        handler: MenuHandler,
        label: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        self._handlers[key] = handler
        self._labels[key] = label
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def lookup(self, choice: str) -> MenuHandler | None:
        """
        Handler registered for `choice` (menu number or alias), or None if unknown.
        A handler returns its reply, or None when it printed everything itself.
        """
        return self._handlers.get(choice.strip().lower())

    def build_menu(self, extra: dict[str, str] | None = None) -> str:
        lines = [f"\n--- {self.title} ---"]
        labels = dict(self._labels)
        labels.update(extra or {})
        for key, label in labels.items():
            lines.append(f"{key}. {label}")
        return "\n".join(lines)


def _save_warning(state: AppState) -> str:
    if state.service.last_save_ok:
        return ""
    path = getattr(state.settings, "tasks_file_path", "the task file")
    return f"\nWarning: could not save tasks to {path}."


def _title_width(state: AppState) -> int:
    return int(getattr(state.settings, "title_width", 20))


def _prompt_until_valid(prompt: Prompt, emit: Emitter, label: str, parse, error: str):
    while True:
        raw = prompt(label)
        try:
            return parse(raw)
        except ValueError:
            emit(error)


def _prompt_task_id(prompt: Prompt, label: str) -> int | None:
    try:
        return parse_int(prompt(label))
    except ValueError:
        return None


def cmd_add(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    title = prompt("Title: ").strip()
    description = prompt("Description: ").strip()
    due = _prompt_until_valid(
        prompt,
        emit,
        "Due Date (YYYY-MM-DD): ",
        parse_due_date,
        "Invalid date format. Please use YYYY-MM-DD.",
    )
    priority = _prompt_until_valid(
        prompt,
        emit,
        "Priority (High/Medium/Low): ",
        parse_priority,
        "Invalid priority. Please enter High, Medium, or Low.",
    )

    state.service.add(title, description, due, priority)
    return "Task added successfully!" + _save_warning(state)


def cmd_complete(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    task_id = _prompt_task_id(prompt, "Enter Task ID to mark completed: ")
    if task_id is None:
        return "Invalid input. Please enter a numeric Task ID."

    result = state.service.complete(task_id)
    if result is CompleteResult.COMPLETED:
        msg = f"Task ID {task_id} marked as completed!"
    elif result is CompleteResult.ALREADY_COMPLETED:
        msg = f"Task ID {task_id} is already completed."
    else:
        msg = f"Task not found with ID {task_id}."
    return msg + _save_warning(state)


def cmd_delete(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    task_id = _prompt_task_id(prompt, "Enter Task ID to delete: ")
    if task_id is None:
        return "Invalid input. Please enter a numeric Task ID."

    result = state.service.delete(task_id)
    if result is DeleteResult.DELETED:
        msg = f"Task with ID {task_id} deleted."
    else:
        msg = f"Task with ID {task_id} not found."
    return msg + _save_warning(state)


def cmd_view(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    return render_task_table(state.service.list_sorted(), title_width=_title_width(state))


FILTER_OPTIONS: dict[str, tuple[str, TaskFilter, str]] = {
    "1": ("View Pending Tasks", TaskFilter.PENDING, "Pending Tasks"),
    "2": ("View Completed Tasks", TaskFilter.COMPLETED, "Completed Tasks"),
    "3": ("View Tasks Due Today or Tomorrow", TaskFilter.DUE_SOON, "Tasks Due Today or Tomorrow"),
    "4": ("View Overdue Tasks", TaskFilter.OVERDUE, "Overdue Tasks"),
}


def build_filter_menu() -> str:
    lines = ["\n--- Filter Tasks ---"]
    for key, (label, _, _) in FILTER_OPTIONS.items():
        lines.append(f"{key}. {label}")
    lines.append(f"{BACK_KEY}. Back to Main Menu")
    return "\n".join(lines)


def cmd_filter(state: AppState, prompt: Prompt, emit: Emitter) -> None:
    """
    Filter submenu. Loops until "5. Back to Main Menu".
    Filtering never persists; it only refreshes overdue statuses in memory.
    """
    while True:
        emit(build_filter_menu())
        try:
            key = str(parse_int(prompt("Choose filter option: ")))
        except ValueError:
            emit("Invalid input. Please enter a number (1-5).")
            continue

        if key == BACK_KEY:
            return

        option = FILTER_OPTIONS.get(key)
        if option is None:
            emit("Invalid filter option! Please choose a number between 1 and 5.")
            continue

        _, kind, heading = option
        logger.debug("Filter view kind=%s", kind.value)
        emit(f"\n--- {heading} ---")
        emit(render_task_table(state.service.list_filtered(kind), title_width=_title_width(state)))


def build_registry(title: str = "Smart To-Do List") -> MenuRegistry:
    reg = MenuRegistry(title)
    reg.register("1", cmd_add, "Add Task", aliases=["add"])
    reg.register("2", cmd_complete, "Mark Task as Completed", aliases=["done", "complete"])
    reg.register("3", cmd_delete, "Delete Task", aliases=["delete", "rm"])
    reg.register("4", cmd_view, "View All Tasks", aliases=["view", "ls"])
    reg.register("5", cmd_filter, "Filter Tasks", aliases=["filter"])
    return reg
