"""Break-even math for a one-time optimization of a recurring task."""

import logging
import math
from dataclasses import dataclass

from worthit.normalize import normalize_duration, normalize_frequency
from worthit.units import WORK_CALENDAR, UnitValue, WorkCalendar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    """Outcome of an optimization, totals in seconds over the task lifetime.

    Attributes:
        worth_it: True if the time saved strictly exceeds the time spent
        time_saved: Time shaved off every occurrence, summed over the lifetime
        initial_task_time: Total task time without the optimization
        optimized_task_time: Total task time with the optimization
        gain_ratio: Time saved as a percentage of time spent (inf if none spent)
    """

    worth_it: bool
    time_saved: float
    initial_task_time: float
    optimized_task_time: float
    gain_ratio: float


def is_it_worth_it(
    task_duration: float,
    task_frequency: float,
    task_lifetime: float,
    time_shaved: float,
    time_spent: float,
) -> Evaluation:
    """Decide whether spending `time_spent` to shave `time_shaved` pays off.

    Args:
        task_duration: Duration of one occurrence, in seconds
        task_frequency: Occurrences per second
        task_lifetime: How long the task keeps recurring, in seconds
        time_shaved: Time the optimization removes from each occurrence
        time_spent: One-time cost of the optimization, in seconds

    Note: time_saved is not clamped when time_shaved exceeds task_duration,
          so it can be larger than initial_task_time - optimized_task_time.
    """
    initial_task_time = task_duration * task_frequency * task_lifetime
    optimized_task_time = (
        max(0, task_duration - time_shaved) * task_frequency * task_lifetime
    )
    time_saved = time_shaved * task_lifetime * task_frequency

    worth_it = time_saved > time_spent
    gain_ratio = math.inf if time_spent == 0 else (time_saved / time_spent) * 100

    logger.debug(
        "time_saved=%s time_spent=%s gain_ratio=%s worth_it=%s",
        time_saved,
        time_spent,
        gain_ratio,
        worth_it,
    )
    return Evaluation(
        worth_it=worth_it,
        time_saved=time_saved,
        initial_task_time=initial_task_time,
        optimized_task_time=optimized_task_time,
        gain_ratio=gain_ratio,
    )


def evaluate(
    task_duration: UnitValue,
    task_frequency: UnitValue,
    task_lifetime: UnitValue,
    time_shaved: UnitValue,
    time_spent: UnitValue,
    calendar: WorkCalendar = WORK_CALENDAR,
) -> Evaluation:
    """Normalize five (value, unit) inputs and evaluate them."""
    return is_it_worth_it(
        normalize_duration(task_duration, calendar),
        normalize_frequency(task_frequency, calendar),
        normalize_duration(task_lifetime, calendar),
        normalize_duration(time_shaved, calendar),
        normalize_duration(time_spent, calendar),
    )
