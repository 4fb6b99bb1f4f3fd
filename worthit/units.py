"""Time and frequency units, and the work calendar that relates them.

Durations are measured on a work calendar, not a wall calendar: a day is
7 worked hours, a week 5 worked days, a month 21 worked days.
All "seconds" values below are worked seconds.
"""

from dataclasses import dataclass
from functools import cache
from typing import Literal, TypeAlias

TimeUnit: TypeAlias = Literal[
    "second", "minute", "hour", "day", "week", "month", "year"
]
FrequencyUnit: TypeAlias = Literal["daily", "weekly", "monthly", "yearly"]

# Largest first; decomposition scans in this order
TIME_UNITS: tuple[TimeUnit, ...] = (
    "year",
    "month",
    "week",
    "day",
    "hour",
    "minute",
    "second",
)
FREQUENCY_UNITS: tuple[FrequencyUnit, ...] = ("daily", "weekly", "monthly", "yearly")

SECONDS_IN_MINUTE = 60
MINUTES_IN_HOUR = 60
HOURS_IN_DAY = 7  # worked hours per day
DAYS_IN_WEEK = 5  # worked days per week
DAYS_IN_MONTH = 21  # worked days per month
MONTHS_IN_YEAR = 12


@dataclass(frozen=True, kw_only=True)
class WorkCalendar:
    """Conversion factors between adjacent units."""

    seconds_in_minute: int = SECONDS_IN_MINUTE
    minutes_in_hour: int = MINUTES_IN_HOUR
    hours_in_day: int = HOURS_IN_DAY
    days_in_week: int = DAYS_IN_WEEK
    days_in_month: int = DAYS_IN_MONTH
    months_in_year: int = MONTHS_IN_YEAR

    def seconds_per_unit(self) -> dict[TimeUnit, int]:
        """Return the number of seconds in one of each time unit.

        Week and month are both defined in days; year is defined in months.
        """
        return dict(_seconds_table(self))

    def periods_per_unit(self) -> dict[FrequencyUnit, int]:
        """Return the length in seconds of the period behind each frequency."""
        seconds = _seconds_table(self)
        return {
            "daily": seconds["day"],
            "weekly": seconds["week"],
            "monthly": seconds["month"],
            "yearly": seconds["year"],
        }


@cache
def _seconds_table(calendar: WorkCalendar) -> dict[TimeUnit, int]:
    minute = calendar.seconds_in_minute
    hour = minute * calendar.minutes_in_hour
    day = hour * calendar.hours_in_day
    month = day * calendar.days_in_month
    return {
        "second": 1,
        "minute": minute,
        "hour": hour,
        "day": day,
        "week": day * calendar.days_in_week,
        "month": month,
        "year": month * calendar.months_in_year,
    }


WORK_CALENDAR = WorkCalendar()

# Time unit constants for the default calendar (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 25200
WEEK = 126000
MONTH = 529200
YEAR = 6350400


def is_time_unit(unit: str) -> bool:
    return unit in TIME_UNITS


def is_frequency_unit(unit: str) -> bool:
    return unit in FREQUENCY_UNITS


@dataclass(frozen=True, kw_only=True)
class UnitValue:
    """A magnitude tagged with a time or frequency unit."""

    value: float
    unit: TimeUnit | FrequencyUnit

    def __post_init__(self) -> None:
        if not (is_time_unit(self.unit) or is_frequency_unit(self.unit)):
            valid = ", ".join(TIME_UNITS + FREQUENCY_UNITS)
            raise ValueError(
                f"Unknown unit {self.unit!r}.\n"
                f"Valid units: {valid}"
            )
        if self.value < 0:
            raise ValueError(
                f"UnitValue magnitude must be >= 0, got {self.value} {self.unit}.\n"
                f"Hint: durations and frequencies cannot be negative"
            )

    def __str__(self) -> str:
        return f"{self.value} {self.unit}"
