# src/daytasks/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..cli.render import render_view
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> None:
    """
    Line-oriented front end.

    Slash commands map to session intents. Plain text typed while a draft is
    open becomes the draft description.
    """
    logger.info("Console connector started.")
    first_weekday = int(getattr(state.settings, "first_weekday", 6))

    def emit(text: str) -> None:
        output_fn(text)

    output_fn("[CONSOLE] Use /help for commands. Use /exit to quit.\n")
    output_fn(render_view(state.session.view(), first_weekday))

    while True:
        try:
            prompt = "task> " if state.session.view().draft_visible else ">>> "
            user_input = input_fn(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output_fn("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            output_fn(reply)
            continue

        # Free text: the task description while the draft input is shown.
        view = state.session.view()
        if view.draft_visible:
            view = state.session.edit_draft(user_input)
            output_fn(f"Draft: {view.draft_text!r} (use /save to keep it)")
        else:
            output_fn("Not a command. Select a day and use /new to start a task (/help).")

    logger.info("Console connector finished.")
