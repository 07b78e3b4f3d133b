# src/daytasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Malformed values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "DAYTASKS"

logger = logging.getLogger(__name__)

_WEEKDAY_NAMES = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

_START_MONTH_RE = re.compile(r"^(\d{4})-(\d{1,2})$")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_weekday(name: str, default: int) -> int:
    """Accept 0..6 (0 = Monday) or an English day name ("sun", "Sunday")."""
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw.isdigit():
        n = int(raw)
        return n if 0 <= n <= 6 else default
    for day_name, idx in _WEEKDAY_NAMES.items():
        if len(raw) >= 3 and day_name.startswith(raw):
            return idx
    return default


def _env_start_month(name: str) -> tuple[int, int] | None:
    """YYYY-MM (1-based month on input) -> (year, 0-based month)."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    m = _START_MONTH_RE.match(raw)
    if not m or not 1 <= int(m.group(2)) <= 12:
        logger.warning("Ignoring malformed %s=%r (expected YYYY-MM).", name, raw)
        return None
    return int(m.group(1)), int(m.group(2)) - 1


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Connectors ----
    console_enabled: bool

    # ---- Calendar ----
    first_weekday: int  # 0 = Monday ... 6 = Sunday
    start_month: tuple[int, int] | None  # (year, 0-based month)

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "daytasks").strip() or "daytasks"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        # The original month view is laid out Sun..Sat.
        first_weekday = _env_weekday(_k("FIRST_WEEKDAY"), 6)
        start_month = _env_start_month(_k("START_MONTH"))

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/daytasks"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            console_enabled=console_enabled,
            first_weekday=first_weekday,
            start_month=start_month,
            data_dir=data_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
