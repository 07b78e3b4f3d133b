# src/daytasks/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.calendar_math import CalendarDate, parse_key
from ..core.state import AppState
from .render import render_tasks, render_view

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /next, /save, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._aliases: dict[str, list[str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._aliases[key] = [a.lower() for a in aliases]
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            aliases = self._aliases.get(name) or []
            alias_str = f" (also: {', '.join('/' + a for a in aliases)})" if aliases else ""
            lines.append(f"  /{name}{alias_str} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _first_weekday(state: AppState) -> int:
    return int(getattr(state.settings, "first_weekday", 6))


def _show(state: AppState) -> str:
    return render_view(state.session.view(), _first_weekday(state))


def _resolve_date(state: AppState, raw: str) -> CalendarDate:
    """
    "5" -> day 5 of the displayed month, "2024-03-05" -> that date.
    Raises ValueError for anything else.
    """
    if raw.isdigit():
        cursor = state.session.cursor
        return CalendarDate(cursor.year, cursor.month, int(raw))
    return parse_key(raw)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_month(state: AppState, args: list[str]) -> str:
    return _show(state)


def cmd_next(state: AppState, args: list[str]) -> str:
    state.session.change_month(1)
    return _show(state)


def cmd_prev(state: AppState, args: list[str]) -> str:
    state.session.change_month(-1)
    return _show(state)


def cmd_select(state: AppState, args: list[str]) -> str:
    """
    /select 5           -> toggle day 5 of the displayed month
    /select 2024-03-05  -> toggle that date (must be in the displayed month)
    """
    if not args:
        return "Usage: /select <day> or /select YYYY-MM-DD."

    try:
        d = _resolve_date(state, args[0])
    except ValueError:
        return f"Not a day of {state.session.view().month_label}: {args[0]}"

    if not state.session.cursor.contains(d):
        label = state.session.view().month_label
        return f"{d.key} is not in {label}. Use /next or /prev first."

    state.session.select_date(d)
    return _show(state)


def cmd_new(state: AppState, args: list[str]) -> str:
    view = state.session.begin_task()
    if not view.draft_visible:
        return "Select a day first (/select <day>)."
    return _show(state)


def cmd_draft(state: AppState, args: list[str]) -> str:
    view = state.session.edit_draft(" ".join(args))
    if not view.draft_visible:
        return "No open draft. Use /new after selecting a day."
    return f"Draft: {view.draft_text!r}"


def cmd_save(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    store = state.session.store
    count_before = store.count_tasks()
    view = state.session.save_task()

    if store.count_tasks() == count_before:
        if view.selected_key is None:
            return "Select a day first (/select <day>)."
        return "Nothing to save: the task description is empty."

    if emit:
        emit(f"Task saved for {view.selected_key}.")
    return render_tasks(view)


def cmd_tasks(state: AppState, args: list[str]) -> str:
    return render_tasks(state.session.view())


def cmd_status(state: AppState, args: list[str]) -> str:
    view = state.session.view()
    app_name = str(getattr(state.settings, "app_name", "daytasks"))
    selected = view.selected_key or "none"
    return (
        "Status:\n"
        f"  App: {app_name}\n"
        f"  Month: {view.month_label}\n"
        f"  Selected: {selected}\n"
        f"  Draft open: {'yes' if view.draft_visible else 'no'}\n"
        f"  Tasks stored: {state.session.store.count_tasks()}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("month", cmd_month, help_text="Show the current month.", aliases=["show"])
registry.register("next", cmd_next, help_text="Go to the next month.", aliases=["n"])
registry.register("prev", cmd_prev, help_text="Go to the previous month.", aliases=["p"])
registry.register(
    "select",
    cmd_select,
    help_text="Select or deselect a day: /select <day> | /select YYYY-MM-DD.",
    aliases=["s"],
)
registry.register("new", cmd_new, help_text="Create a task for the selected day.")
registry.register("draft", cmd_draft, help_text="Set the task description: /draft <text>.")
registry.register("save", cmd_save, help_text="Save the draft task.")
registry.register("tasks", cmd_tasks, help_text="List saved tasks for the selected day.")
registry.register("status", cmd_status, help_text="Show session summary.")
