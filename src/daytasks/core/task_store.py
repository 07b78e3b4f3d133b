# src/daytasks/core/task_store.py

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store keyed by date key (YYYY-MM-DD).

    - append-only per key, insertion order preserved, duplicates allowed
    - a key gets its list on the first successful add
    - readers receive tuples, never the live lists
    """

    def __init__(self) -> None:
        self._tasks: dict[str, list[str]] = {}

    def add_task(self, date_key: str | None, text: str | None) -> None:
        if not date_key or text is None or not text.strip():
            logger.debug("add_task ignored (date_key=%r, empty text=%s)", date_key, not text)
            return
        self._tasks.setdefault(date_key, []).append(text)
        logger.debug("Task added for %s (now %d)", date_key, len(self._tasks[date_key]))

    def tasks_for(self, date_key: str | None) -> tuple[str, ...]:
        if not date_key:
            return ()
        return tuple(self._tasks.get(date_key, ()))

    def dates_with_tasks(self, year: int, month: int) -> frozenset[str]:
        """Keys inside the given (year, 0-based month) that hold at least one task."""
        prefix = f"{year:04d}-{month + 1:02d}-"
        return frozenset(k for k, items in self._tasks.items() if items and k.startswith(prefix))

    def count_tasks(self) -> int:
        return sum(len(items) for items in self._tasks.values())
