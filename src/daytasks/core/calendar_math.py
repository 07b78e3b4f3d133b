# src/daytasks/core/calendar_math.py

"""
Pure calendar helpers.

Months are 0-based everywhere in this module (0 = January, 11 = December).
Date keys are built from the integer fields only, so they never shift with
the process timezone.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Indexed like date.weekday(): 0 = Monday.
WEEKDAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_KEY_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Carry an out-of-range month into the year: (2024, 12) -> (2025, 0)."""
    carry, month0 = divmod(int(month), 12)
    return int(year) + carry, month0


@dataclass(frozen=True, slots=True)
class CalendarDate:
    year: int
    month: int  # 0..11
    day: int

    def __post_init__(self) -> None:
        # Raises ValueError for impossible dates (Feb 30, month 12, ...).
        if not 0 <= self.month <= 11:
            raise ValueError(f"month must be in 0..11, got {self.month}")
        date(self.year, self.month + 1, self.day)

    @classmethod
    def from_date(cls, d: date) -> CalendarDate:
        return cls(d.year, d.month - 1, d.day)

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)

    @property
    def key(self) -> str:
        return key_of(self)

    @property
    def weekday(self) -> int:
        return self.to_date().weekday()


@dataclass(frozen=True, slots=True, init=False)
class MonthCursor:
    """The (year, month) pair currently on screen. Always normalized."""

    year: int
    month: int

    def __init__(self, year: int, month: int) -> None:
        y, m = normalize_month(year, month)
        object.__setattr__(self, "year", y)
        object.__setattr__(self, "month", m)

    @classmethod
    def containing(cls, d: date | CalendarDate) -> MonthCursor:
        if isinstance(d, CalendarDate):
            return cls(d.year, d.month)
        return cls(d.year, d.month - 1)

    def shift(self, delta: int) -> MonthCursor:
        return MonthCursor(self.year, self.month + int(delta))

    def contains(self, d: CalendarDate) -> bool:
        return d.year == self.year and d.month == self.month


def days_in_month(year: int, month: int) -> tuple[CalendarDate, ...]:
    """All days of the month in ascending order (month is normalized first)."""
    y, m = normalize_month(year, month)
    _, ndays = calendar.monthrange(y, m + 1)
    return tuple(CalendarDate(y, m, d) for d in range(1, ndays + 1))


def key_of(d: CalendarDate) -> str:
    return f"{d.year:04d}-{d.month + 1:02d}-{d.day:02d}"


def parse_key(key: str) -> CalendarDate:
    """Inverse of key_of. Raises ValueError on anything that is not YYYY-MM-DD."""
    m = _KEY_RE.match((key or "").strip())
    if not m:
        raise ValueError(f"not a YYYY-MM-DD date key: {key!r}")
    year, month1, day = (int(g) for g in m.groups())
    return CalendarDate(year, month1 - 1, day)


def month_label(year: int, month: int) -> str:
    # Fixed English names; calendar.month_name would follow the process locale.
    y, m = normalize_month(year, month)
    return f"{MONTH_NAMES[m]} {y}"


def weekday_headers(first_weekday: int = 6) -> tuple[str, ...]:
    start = int(first_weekday) % 7
    return tuple(WEEKDAY_ABBR[(start + i) % 7] for i in range(7))


def leading_blanks(year: int, month: int, first_weekday: int = 6) -> int:
    """Empty grid cells before day 1 when weeks start on `first_weekday`."""
    y, m = normalize_month(year, month)
    first = date(y, m + 1, 1).weekday()
    return (first - int(first_weekday)) % 7
