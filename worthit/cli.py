"""Command-line front end: is it worth the time to optimize a recurring task?"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from worthit.evaluate import evaluate
from worthit.normalize import normalize_duration, normalize_frequency
from worthit.report import EmptyResults, Report, Results, describe_task
from worthit.units import UnitValue, is_time_unit

logger = logging.getLogger(__name__)

_HANDLER_NAME = "worthit"


@dataclass(frozen=True)
class Field:
    """One (value, unit) input with its allowed units and defaults."""

    name: str
    help: str
    units: tuple[str, ...]
    default_value: float
    default_unit: str

    @property
    def dest(self) -> str:
        return self.name.replace("-", "_")


FIELDS = (
    Field(
        "task-duration",
        "How long the task takes each time",
        ("minute", "hour", "day", "week", "month"),
        3,
        "minute",
    ),
    Field(
        "task-frequency",
        "How many times the task is done per period",
        ("daily", "weekly", "monthly", "yearly"),
        10,
        "daily",
    ),
    Field(
        "task-lifetime",
        "How long the task keeps recurring",
        ("day", "week", "month", "year"),
        1,
        "month",
    ),
    Field(
        "time-spent",
        "One-time cost of the optimization",
        ("minute", "hour", "day", "week", "month", "year"),
        1,
        "hour",
    ),
    Field(
        "time-shaved",
        "Time the optimization removes from each occurrence",
        ("second", "minute", "hour", "day", "week", "month"),
        2,
        "minute",
    ),
)


def _magnitude(text: str) -> float | None:
    """Parse a non-negative magnitude; an empty string means not filled."""
    if not text.strip():
        return None
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"must be a finite number, got {text}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {text}")
    return value


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for the command-line run.

    Installs one handler however many times it is called.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler.set_name(_HANDLER_NAME)
    root_logger.addHandler(handler)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        prog="worthit",
        description="Would it be worth the time to optimize a recurring task?",
    )
    for field in FIELDS:
        parser.add_argument(
            f"--{field.name}",
            type=_magnitude,
            default=field.default_value,
            metavar="VALUE",
            help=f"{field.help} (default: {field.default_value:g}).",
        )
        parser.add_argument(
            f"--{field.name}-unit",
            choices=field.units,
            default=field.default_unit,
            help=f"Unit for --{field.name} (default: {field.default_unit}).",
        )
    parser.add_argument(
        "--precision",
        type=float,
        default=0.05,
        help="Fraction of each duration that may be rounded away (default: 0.05).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug information."
    )
    ns = parser.parse_args(argv)
    for field in FIELDS:
        value = getattr(ns, field.dest)
        if value is None:
            continue
        unit_value = UnitValue(value=value, unit=getattr(ns, f"{field.dest}_unit"))
        if is_time_unit(unit_value.unit):
            seconds = normalize_duration(unit_value)
        else:
            seconds = normalize_frequency(unit_value)
        if not math.isfinite(seconds):
            parser.error(f"argument --{field.name}: too large: {unit_value}")
    return ns


def collect_inputs(ns: argparse.Namespace) -> dict[str, UnitValue] | None:
    """Return the filled inputs keyed by field, or None if any is missing."""
    inputs: dict[str, UnitValue] = {}
    for field in FIELDS:
        value = getattr(ns, field.dest)
        if value is None:
            logger.debug("%s is not filled", field.name)
            return None
        inputs[field.dest] = UnitValue(
            value=value, unit=getattr(ns, f"{field.dest}_unit")
        )
    return inputs


def build_report(ns: argparse.Namespace) -> tuple[str | None, Report]:
    """Return the question sentence (if all inputs are filled) and the report."""
    inputs = collect_inputs(ns)
    if inputs is None:
        return None, EmptyResults()

    evaluation = evaluate(
        inputs["task_duration"],
        inputs["task_frequency"],
        inputs["task_lifetime"],
        inputs["time_shaved"],
        inputs["time_spent"],
    )
    question = describe_task(
        inputs["task_duration"],
        inputs["task_frequency"],
        inputs["task_lifetime"],
        inputs["time_spent"],
        inputs["time_shaved"],
    )
    time_spent = normalize_duration(inputs["time_spent"])
    return question, Results(evaluation, time_spent, ns.precision)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator CLI.

    Returns:
        Exit code (0 on success).
    """
    ns = parse_args(argv)
    setup_logging(ns.verbose)

    question, report = build_report(ns)
    if question is not None:
        print(question)
        print()
    print("Would it be worth the time?")
    print(report.render())
    return 0
