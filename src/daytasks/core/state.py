# src/daytasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .session import CalendarSession


@dataclass(slots=True)
class AppState:
    # Settings object (real Settings or a SimpleNamespace in tests).
    settings: Any
    session: CalendarSession
