# src/daytasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The session depends on this Protocol instead of the concrete TaskStore,
so an alternative store (or a fake in tests) can be plugged in.
"""

from typing import Protocol


class TaskRepo(Protocol):
    def add_task(self, date_key: str | None, text: str | None) -> None: ...
    def tasks_for(self, date_key: str | None) -> tuple[str, ...]: ...
    def dates_with_tasks(self, year: int, month: int) -> frozenset[str]: ...
    def count_tasks(self) -> int: ...
