"""Time unit definitions for durations.

This module provides the TimeUnit quantity kind. All durations convert
through seconds, the SI base unit. Calendar units are fixed-length: a day is
86400 seconds and a year is 365 days, with no leap handling.

Classes:
    TimeUnit: Seconds (base), Minutes, Hours, Days, Weeks, Years.

Type Aliases:
    Time: Value expressed in a TimeUnit.

Example:
    >>> flight_time = Time(1.25, TimeUnit.HOURS)
    >>> print(flight_time)  # "1.25 hr"
    >>> flight_time.to(TimeUnit.MINUTES)  # 75.0
"""

from __future__ import annotations

from enum import auto

from .unit_base import UnitOfMeasure, UnitSpec, UnitTable, unit_table
from .unit_value import Value

SECONDS_PER_DAY = 86_400.0


class TimeUnit(UnitOfMeasure):
    """Units of time. The base unit is seconds."""

    SECONDS = auto()
    MINUTES = auto()
    HOURS = auto()
    DAYS = auto()
    WEEKS = auto()
    YEARS = auto()

    @classmethod
    def _table(cls) -> UnitTable:
        return _TIME_TABLE


_TIME_TABLE = unit_table(
    TimeUnit,
    {
        TimeUnit.SECONDS: UnitSpec("Seconds", "s", 1.0),
        TimeUnit.MINUTES: UnitSpec("Minutes", "min", 60.0),
        TimeUnit.HOURS: UnitSpec("Hours", "hr", 3_600.0),
        TimeUnit.DAYS: UnitSpec("Days", "d", SECONDS_PER_DAY),
        TimeUnit.WEEKS: UnitSpec("Weeks", "wk", 7 * SECONDS_PER_DAY),
        TimeUnit.YEARS: UnitSpec("Years", "yr", 365 * SECONDS_PER_DAY),
    },
)


Time = Value[TimeUnit]  # Type alias for a value in any time unit
