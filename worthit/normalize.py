"""Convert (value, unit) pairs into base units.

Durations normalize to seconds, frequencies to occurrences per second.
"""

from worthit.units import WORK_CALENDAR, UnitValue, WorkCalendar


def normalize_duration(
    unit_value: UnitValue, calendar: WorkCalendar = WORK_CALENDAR
) -> float:
    """Return the duration in seconds.

    Example:
        >>> normalize_duration(UnitValue(value=1, unit="year"))
        6350400
    """
    seconds = calendar.seconds_per_unit()
    if unit_value.unit not in seconds:
        raise ValueError(
            f"normalize_duration() needs a time unit, got {unit_value.unit!r}.\n"
            f"Hint: use normalize_frequency() for daily/weekly/monthly/yearly"
        )
    return unit_value.value * seconds[unit_value.unit]  # type: ignore[index]


def normalize_frequency(
    unit_value: UnitValue, calendar: WorkCalendar = WORK_CALENDAR
) -> float:
    """Return the frequency as occurrences per second.

    "5 weekly" is a fifth of the rate of "5 daily", since a week holds
    five worked days.
    """
    periods = calendar.periods_per_unit()
    if unit_value.unit not in periods:
        raise ValueError(
            f"normalize_frequency() needs a frequency unit, got {unit_value.unit!r}.\n"
            f"Hint: use normalize_duration() for second/minute/.../year"
        )
    return unit_value.value / periods[unit_value.unit]  # type: ignore[index]
