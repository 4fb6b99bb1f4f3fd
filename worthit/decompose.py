"""Break a number of seconds back into a readable mix of units.

Decomposition is the lossy inverse of normalization: 5950800 seconds
becomes "11 month, 1 week" at 1% precision, dropping the trailing hour.
"""

import math

from worthit.units import TIME_UNITS, WORK_CALENDAR, UnitValue, WorkCalendar

# Residues at or below this many seconds count as zero
EPSILON = 1e-9


def decompose_duration(
    duration: float, precision: float, calendar: WorkCalendar = WORK_CALENDAR
) -> list[UnitValue]:
    """Greedily decompose a duration into units, largest first.

    Args:
        duration: Duration in seconds (>= 0)
        precision: Fraction of the duration that may be left unexplained.
            0 asks for an exact decomposition, 1 or more accepts no terms.
        calendar: Work calendar defining the unit sizes

    Returns:
        List of UnitValue terms with integer magnitudes, largest unit first.
        Their total never exceeds the duration. A non-finite duration
        (an overflowed total) has no decomposition.

    Algorithm: Take as many of the largest fitting unit as possible, then
    decompose the remainder. The remainder is a smaller part of the whole,
    so its precision is scaled up by duration / rest; once that reaches 1
    the remainder is negligible and the recursion stops.
    """
    if precision >= 1:
        # 0 is a good approximation at +/- 100%
        return []
    if not math.isfinite(duration):
        return []

    seconds = calendar.seconds_per_unit()
    unit = next(
        (unit for unit in TIME_UNITS if duration + EPSILON >= seconds[unit]), None
    )
    if unit is None:
        # Less than one second
        return []

    unit_seconds = seconds[unit]
    count = math.floor((duration + EPSILON) / unit_seconds)
    rest = duration - count * unit_seconds
    term = UnitValue(value=count, unit=unit)

    if rest <= EPSILON:
        return [term]

    rest_precision = precision * duration / rest
    return [term, *decompose_duration(rest, rest_precision, calendar)]


def format_duration(
    duration: float, precision: float = 0.05, calendar: WorkCalendar = WORK_CALENDAR
) -> str:
    """Return a human readable string for a duration in seconds.

    Example:
        >>> format_duration(226800)
        '1 week, 4 day'
    """
    decomposition = decompose_duration(duration, precision, calendar)
    return ", ".join(f"{term.value} {term.unit}" for term in decomposition)
