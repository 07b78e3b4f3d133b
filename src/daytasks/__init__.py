"""daytasks: month calendar with per-day task notes."""

__version__ = "0.1.0"
