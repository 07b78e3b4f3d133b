# src/daytasks/cli/render.py

"""Plain-text rendering of a SessionView for the console connector."""

from __future__ import annotations

from ..core.calendar_math import leading_blanks, weekday_headers
from ..core.session import SessionView

CELL_WIDTH = 5


def _day_cell(view: SessionView, day_key: str, day: int) -> str:
    if day_key == view.selected_key:
        text = f"[{day}]"
    elif day_key in view.days_with_tasks:
        text = f"{day}*"
    else:
        text = str(day)
    return f"{text:^{CELL_WIDTH}}"


def render_grid(view: SessionView, first_weekday: int = 6) -> str:
    headers = "".join(f"{h:^{CELL_WIDTH}}" for h in weekday_headers(first_weekday))
    width = len(headers)

    cells = [" " * CELL_WIDTH] * leading_blanks(view.year, view.month, first_weekday)
    cells += [_day_cell(view, d.key, d.day) for d in view.days]

    lines = [f"{view.month_label:^{width}}".rstrip(), headers.rstrip()]
    for i in range(0, len(cells), 7):
        lines.append("".join(cells[i : i + 7]).rstrip())
    return "\n".join(lines)


def render_tasks(view: SessionView) -> str:
    if not view.selected_key:
        return "No day selected."
    if not view.tasks:
        return f"No saved tasks for {view.selected_key}."
    lines = [f"Saved Tasks for {view.selected_key}:"]
    lines.extend(f"  {i}. {t}" for i, t in enumerate(view.tasks, start=1))
    return "\n".join(lines)


def render_view(view: SessionView, first_weekday: int = 6) -> str:
    parts = [render_grid(view, first_weekday), ""]

    if view.selected_key is None:
        parts.append("No day selected. Use /select <day> to pick one.")
    else:
        parts.append(f"Selected: {view.selected_key}")
        if view.draft_visible:
            parts.append(f"Draft: {view.draft_text!r}")
            parts.append("Type the task description (or /draft <text>), then /save.")
        elif view.can_begin_task:
            parts.append("Use /new to create a task.")

    if view.tasks:
        parts.append("")
        parts.append(render_tasks(view))

    return "\n".join(parts)
