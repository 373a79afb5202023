# tests/test_main.py

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from smart_todo.cli import main as cli_main

from .fakes import ScriptedInput

HEADER = "ID,Title,Description,DueDate,Priority,Status,CreatedAt,CompletedAt"


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def test_exit_option_saves_and_returns_zero(
    settings: SimpleNamespace, monkeypatch: pytest.MonkeyPatch, capsys, restore_logging
) -> None:
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr("builtins.input", ScriptedInput(["6"]))

    assert cli_main.main() == 0

    assert settings.tasks_file_path.read_text(encoding="utf-8").splitlines() == [HEADER]
    assert "Exiting..." in capsys.readouterr().out


def test_tasks_added_before_eof_are_saved(
    settings: SimpleNamespace, monkeypatch: pytest.MonkeyPatch, restore_logging
) -> None:
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(
        "builtins.input",
        ScriptedInput(["1", "Pay rent", "", "2099-01-01", "High"]),
    )

    assert cli_main.main() == 0

    lines = settings.tasks_file_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == HEADER
    assert lines[1].startswith("1,Pay rent,,2099-01-01,High,Pending,")
