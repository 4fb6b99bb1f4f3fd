from .decompose import EPSILON, decompose_duration, format_duration
from .evaluate import Evaluation, evaluate, is_it_worth_it
from .normalize import normalize_duration, normalize_frequency
from .report import EmptyResults, Report, Results, describe_task, pluralize
from .units import (
    FREQUENCY_UNITS,
    TIME_UNITS,
    WORK_CALENDAR,
    FrequencyUnit,
    TimeUnit,
    UnitValue,
    WorkCalendar,
)

__all__ = [
    "UnitValue",
    "TimeUnit",
    "FrequencyUnit",
    "TIME_UNITS",
    "FREQUENCY_UNITS",
    "WorkCalendar",
    "WORK_CALENDAR",
    "normalize_duration",
    "normalize_frequency",
    "decompose_duration",
    "format_duration",
    "EPSILON",
    "Evaluation",
    "is_it_worth_it",
    "evaluate",
    "Report",
    "Results",
    "EmptyResults",
    "describe_task",
    "pluralize",
]
