"""Plain-text rendering of an evaluation and of the question behind it."""

import math
from abc import ABC, abstractmethod

from typing_extensions import override

from worthit.decompose import format_duration
from worthit.evaluate import Evaluation
from worthit.units import FrequencyUnit, UnitValue

FREQUENCY_LABELS: dict[FrequencyUnit, str] = {
    "daily": "a day",
    "weekly": "a week",
    "monthly": "a month",
    "yearly": "a year",
}

STAT_LABELS = (
    "Time spent",
    "Time saved",
    "Efficiency factor",
    "Total time of the task",
    "Total time of the task, after optimization",
)


def pluralize(word: str, count: float | None) -> str:
    """Return the English plural of a unit label when count calls for it.

    A missing count leaves the word as is.
    """
    if count is None or count == 1:
        return word
    return word + "s"


def format_gain_ratio(gain_ratio: float) -> str:
    """Render a percentage rounded to an integer, halves rounding up."""
    if math.isinf(gain_ratio):
        return "∞%"
    if math.isnan(gain_ratio):
        return "-"
    return f"{math.floor(gain_ratio + 0.5)}%"


def _magnitude(unit_value: UnitValue) -> str:
    value = unit_value.value
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def _quantity(unit_value: UnitValue) -> str:
    return f"{_magnitude(unit_value)} {pluralize(unit_value.unit, unit_value.value)}"


def describe_task(
    task_duration: UnitValue,
    task_frequency: UnitValue,
    task_lifetime: UnitValue,
    time_spent: UnitValue,
    time_shaved: UnitValue,
) -> str:
    """Phrase the inputs as the question being asked."""
    times = pluralize("time", task_frequency.value)
    return (
        f"I have a recurring task that takes {_quantity(task_duration)}, "
        f"that I have to do {_magnitude(task_frequency)} {times} "
        f"{FREQUENCY_LABELS[task_frequency.unit]} "  # type: ignore[index]
        f"for {_quantity(task_lifetime)}.\n"
        f"If I spent {_quantity(time_spent)} "
        f"I could shorten that task by {_quantity(time_shaved)}."
    )


class Report(ABC):
    """Answer to "is it worth the time?" followed by supporting stats."""

    @property
    @abstractmethod
    def answer(self) -> str:
        pass

    @abstractmethod
    def stats(self) -> list[tuple[str, str]]:
        """Return (label, value) pairs in display order."""
        pass

    def render(self) -> str:
        lines = [self.answer]
        lines.extend(f"{label}: {value}" for label, value in self.stats())
        return "\n".join(lines)


class Results(Report):
    """Answer and stats for an evaluation, durations in readable units."""

    def __init__(
        self, evaluation: Evaluation, time_spent: float, precision: float = 0.05
    ):
        self.evaluation: Evaluation = evaluation
        self.time_spent: float = time_spent
        self.precision: float = precision

    @property
    @override
    def answer(self) -> str:
        return "YES!" if self.evaluation.worth_it else "No..."

    @override
    def stats(self) -> list[tuple[str, str]]:
        evaluation = self.evaluation
        values = (
            self._duration(self.time_spent),
            self._duration(evaluation.time_saved),
            format_gain_ratio(evaluation.gain_ratio),
            self._duration(evaluation.initial_task_time),
            self._duration(evaluation.optimized_task_time),
        )
        return list(zip(STAT_LABELS, values))

    def _duration(self, seconds: float) -> str:
        return format_duration(seconds, self.precision)


class EmptyResults(Report):
    """Same layout as Results, without values."""

    @property
    @override
    def answer(self) -> str:
        return "-"

    @override
    def stats(self) -> list[tuple[str, str]]:
        return [(label, "-") for label in STAT_LABELS]
