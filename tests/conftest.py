# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from daytasks.cli.bootstrap import create_initial_state
from daytasks.core.session import CalendarSession
from daytasks.core.state import AppState

# Leap-year March: February before it has 29 days.
TODAY = date(2024, 3, 15)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="daytasks-test",
        log_level="DEBUG",
        log_to_file=False,
        console_enabled=True,
        first_weekday=6,
        start_month=None,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def session() -> CalendarSession:
    return CalendarSession(today=TODAY)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings, today=TODAY)
