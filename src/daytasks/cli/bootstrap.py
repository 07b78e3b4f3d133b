# src/daytasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the starting month (settings override or today's month),
- wires the task store and session into AppState.
"""

from __future__ import annotations

import logging
from datetime import date

from ..config import get_settings
from ..core.calendar_math import MonthCursor, month_label
from ..core.session import CalendarSession
from ..core.state import AppState
from ..core.task_store import TaskStore

logger = logging.getLogger(__name__)


def _start_cursor(settings, today: date | None) -> MonthCursor:
    start = getattr(settings, "start_month", None)
    if start is not None:
        year, month = start
        return MonthCursor(year, month)
    return MonthCursor.containing(today or date.today())


def create_initial_state(*, settings=None, today: date | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    cursor = _start_cursor(settings, today)
    session = CalendarSession(start=cursor, store=TaskStore())
    logger.info("Session ready, showing %s", month_label(cursor.year, cursor.month))

    return AppState(settings=settings, session=session)
