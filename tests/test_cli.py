"""Tests for the command-line front end."""

from __future__ import annotations

import argparse
import logging

import pytest

from worthit import cli
from worthit.report import EmptyResults, Results


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def test_parse_args_defaults() -> None:
    ns = cli.parse_args([])
    assert (ns.task_duration, ns.task_duration_unit) == (3, "minute")
    assert (ns.task_frequency, ns.task_frequency_unit) == (10, "daily")
    assert (ns.task_lifetime, ns.task_lifetime_unit) == (1, "month")
    assert (ns.time_spent, ns.time_spent_unit) == (1, "hour")
    assert (ns.time_shaved, ns.time_shaved_unit) == (2, "minute")
    assert ns.precision == 0.05
    assert ns.verbose is False


def test_parse_args_custom_values() -> None:
    ns = cli.parse_args(
        ["--task-duration", "5", "--task-duration-unit", "hour", "--time-shaved", ""]
    )
    assert ns.task_duration == 5.0
    assert ns.task_duration_unit == "hour"
    assert ns.time_shaved is None


@pytest.mark.parametrize(
    "argv",
    [
        ["--task-duration", "-1"],
        ["--time-spent", "soon"],
        ["--task-lifetime-unit", "second"],
        ["--time-shaved-unit", "year"],
    ],
)
def test_parse_args_rejects_bad_input(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.parse_args(argv)
    assert excinfo.value.code == 2


def test_collect_inputs_missing_value() -> None:
    ns = cli.parse_args(["--task-frequency", " "])
    assert cli.collect_inputs(ns) is None


def test_build_report_with_missing_value() -> None:
    question, report = cli.build_report(cli.parse_args(["--time-spent", ""]))
    assert question is None
    assert isinstance(report, EmptyResults)


def test_build_report_defaults() -> None:
    question, report = cli.build_report(cli.parse_args([]))
    assert question is not None
    assert question.startswith("I have a recurring task that takes 3 minutes")
    assert isinstance(report, Results)
    assert report.evaluation.worth_it is True
    assert report.evaluation.gain_ratio == pytest.approx(700)


def test_main_prints_report(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main([])
    assert code == 0
    out = capsys.readouterr().out
    assert "that I have to do 10 times a day for 1 month." in out
    assert "Would it be worth the time?\nYES!\n" in out
    assert "Time spent: 1 hour" in out
    assert "Time saved: 1 day" in out
    assert "Efficiency factor: 700%" in out
    assert "Total time of the task: 1 day, 3 hour" in out
    assert "Total time of the task, after optimization: 3 hour, 30 minute" in out


def test_main_not_worth_it(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(
        ["--task-lifetime", "1", "--task-lifetime-unit", "day", "--time-spent", "2"]
    )
    assert code == 0
    out = capsys.readouterr().out
    # 10 times a day, 2 minutes shaved: 20 minutes saved for 2 hours spent
    assert "No..." in out
    assert "Time saved: 20 minute" in out
    assert "Efficiency factor: 17%" in out


def test_main_empty_report(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["--task-duration", ""])
    assert code == 0
    out = capsys.readouterr().out
    assert "I have a recurring task" not in out
    assert out.splitlines()[:3] == ["Would it be worth the time?", "-", "Time spent: -"]


def test_main_verbose_logs_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG):
        cli.main(["--verbose"])
        assert logging.getLogger().level == logging.DEBUG
    assert any(record.name == "worthit.evaluate" for record in caplog.records)


def test_magnitude_type() -> None:
    assert cli._magnitude("2.5") == 2.5
    assert cli._magnitude("") is None
    with pytest.raises(argparse.ArgumentTypeError, match="must be >= 0"):
        cli._magnitude("-3")


@pytest.mark.parametrize(
    "argv",
    [
        ["--time-spent", "inf"],
        ["--task-duration", "nan"],
        ["--time-shaved", "-infinity"],
        ["--task-lifetime", "1e308", "--task-lifetime-unit", "year"],
    ],
)
def test_main_rejects_non_finite_input(
    argv: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    assert excinfo.value.code == 2
    assert "Would it be worth the time?" not in capsys.readouterr().out


def test_main_with_overflowing_totals(capsys: pytest.CaptureFixture[str]) -> None:
    """Inputs that are each finite but multiply past float range still report."""
    code = cli.main(
        [
            "--task-duration", "1e300",
            "--task-duration-unit", "month",
            "--task-frequency", "1e300",
            "--task-lifetime", "1e300",
            "--task-lifetime-unit", "year",
        ]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "YES!" in out
    assert "Efficiency factor: ∞%" in out
    assert "Total time of the task: \n" in out


def test_setup_logging_installs_one_handler() -> None:
    cli.setup_logging()
    cli.setup_logging(verbose=True)
    cli.main([])
    root_logger = logging.getLogger()
    named = [h for h in root_logger.handlers if h.get_name() == "worthit"]
    assert len(named) == 1
