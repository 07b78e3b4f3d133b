# src/daytasks/core/session.py

"""
Selection / draft state machine.

A presentation layer calls the intent methods and renders the SessionView
they return. Intents whose precondition does not hold are silent no-ops.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from .calendar_math import CalendarDate, MonthCursor, days_in_month, key_of, month_label
from .ports import TaskRepo
from .task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionView:
    year: int
    month: int  # 0..11
    month_label: str
    days: tuple[CalendarDate, ...]
    selected_key: str | None
    draft_visible: bool
    draft_text: str
    tasks: tuple[str, ...]
    can_begin_task: bool
    days_with_tasks: frozenset[str]


@dataclass(slots=True)
class InteractionState:
    selected_key: str | None = None
    draft_visible: bool = False
    draft_text: str = ""


class CalendarSession:
    """
    One user's calendar: displayed month, task store and interaction state.

    Sessions share nothing; create one per user/connector.
    """

    def __init__(
        self,
        *,
        today: date | None = None,
        start: MonthCursor | None = None,
        store: TaskRepo | None = None,
    ) -> None:
        if start is None:
            start = MonthCursor.containing(today or date.today())
        self._cursor = start
        self._days = days_in_month(start.year, start.month)
        self._store: TaskRepo = store if store is not None else TaskStore()
        self._ui = InteractionState()

    # ---- read side ----

    @property
    def cursor(self) -> MonthCursor:
        return self._cursor

    @property
    def store(self) -> TaskRepo:
        return self._store

    @property
    def interaction(self) -> InteractionState:
        # Copy: callers must go through intents to change state.
        return InteractionState(self._ui.selected_key, self._ui.draft_visible, self._ui.draft_text)

    def view(self) -> SessionView:
        c = self._cursor
        key = self._ui.selected_key
        return SessionView(
            year=c.year,
            month=c.month,
            month_label=month_label(c.year, c.month),
            days=self._days,
            selected_key=key,
            draft_visible=self._ui.draft_visible,
            draft_text=self._ui.draft_text,
            tasks=self._store.tasks_for(key),
            can_begin_task=key is not None,
            days_with_tasks=self._store.dates_with_tasks(c.year, c.month),
        )

    # ---- transitions ----

    def _reset_draft(self, selected_key: str | None) -> None:
        """The only place selection changes. Always collapses the draft."""
        self._ui.selected_key = selected_key
        self._ui.draft_visible = False
        self._ui.draft_text = ""

    # ---- intents ----

    def change_month(self, delta: int) -> SessionView:
        cursor = self._cursor.shift(delta)
        try:
            days = days_in_month(cursor.year, cursor.month)
        except ValueError:
            # Past the range datetime.date supports (years 1..9999).
            logger.debug("change_month ignored: %s/%s is out of range", cursor.year, cursor.month)
            return self.view()

        self._cursor = cursor
        self._days = days
        self._reset_draft(None)
        logger.debug(
            "Month changed by %s -> %s", delta, month_label(self._cursor.year, self._cursor.month)
        )
        return self.view()

    def select_date(self, d: CalendarDate) -> SessionView:
        if not self._cursor.contains(d):
            logger.debug("select_date ignored: %s is outside the displayed month", key_of(d))
            return self.view()

        key = key_of(d)
        if key == self._ui.selected_key:
            self._reset_draft(None)
            logger.debug("Deselected %s", key)
        else:
            self._reset_draft(key)
            logger.debug("Selected %s", key)
        return self.view()

    def begin_task(self) -> SessionView:
        if self._ui.selected_key is not None:
            self._ui.draft_visible = True
        return self.view()

    def edit_draft(self, text: str) -> SessionView:
        if self._ui.draft_visible:
            self._ui.draft_text = text
        return self.view()

    def save_task(self) -> SessionView:
        key = self._ui.selected_key
        text = self._ui.draft_text
        if key is None or not text.strip():
            logger.debug("save_task ignored (selected=%s, empty draft=%s)", key, not text.strip())
            return self.view()

        self._store.add_task(key, text)
        self._reset_draft(key)
        logger.info("Saved task for %s (%d on that day)", key, len(self._store.tasks_for(key)))
        return self.view()
