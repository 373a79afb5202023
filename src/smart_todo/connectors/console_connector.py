# src/smart_todo/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import EXIT_KEY, Emitter, MenuRegistry, Prompt, build_registry
from ..cli.input_parsing import parse_int
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_WORDS = ("exit", "quit")


def _normalize_choice(raw: str) -> str:
    text = raw.strip()
    try:
        return str(parse_int(text))
    except ValueError:
        return text.lower()


def _unknown_choice_message(choice: str) -> str:
    try:
        parse_int(choice)
    except ValueError:
        return "Invalid input. Please enter a number."
    return "Invalid option! Please choose a number between 1 and 6."


def run_console_loop(
    state: AppState,
    *,
    prompt: Prompt | None = None,
    emit: Emitter | None = None,
    registry: MenuRegistry | None = None,
) -> None:
    """
    Main menu loop. Returns when the user picks Exit, or on EOF / Ctrl+C.
    The final save is done by the caller (cli.main).
    """
    # Resolved per call so a patched builtins.input is honoured.
    prompt = prompt or input
    emit = emit or print
    app_name = str(getattr(state.settings, "app_name", "Smart To-Do List"))
    menu = registry or build_registry(app_name)
    logger.info("Console connector started (tasks=%d).", len(state.service.tasks))

    while True:
        emit(menu.build_menu({EXIT_KEY: "Exit"}))
        try:
            choice = _normalize_choice(prompt("Choose option: "))

            if choice == EXIT_KEY or choice in EXIT_WORDS:
                logger.info("Console exit option selected.")
                break

            handler = menu.lookup(choice)
            if handler is None:
                emit(_unknown_choice_message(choice))
                continue

            reply = handler(state, prompt, emit)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break
        except Exception:
            logger.exception("Menu handler crashed.")
            emit("Internal error while handling the menu option.")
            continue

        if reply is not None:
            emit(reply)

    logger.info("Console connector finished.")
