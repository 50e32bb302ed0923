"""Reporting of suite results as log summaries and JSON output."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from batch_bench.executors.base import Ordering
from batch_bench.models.definition import Test
from batch_bench.models.result import SuiteResult

XAxis: TypeAlias = Literal["concurrent_requests", "requests_number"]


@dataclass(frozen=True, kw_only=True)
class SuiteReport:
    """A suite result together with the run context needed to report it."""

    config_name: str
    ordering: Ordering
    tests: Sequence[Test]
    result: SuiteResult


def series_points(
    tests: Sequence[Test], result: SuiteResult, x_axis: XAxis
) -> Sequence[tuple[int, float]]:
    """Pair each test's x-axis value with its mean time in seconds."""
    return [
        (getattr(test, x_axis), test_result.mean)
        for test, test_result in zip(tests, result.results, strict=True)
    ]


def log_suite_summary(
    log: logging.Logger, report: SuiteReport, x_axis: XAxis
) -> None:
    """Log a formatted summary of a suite run."""
    log.info("=" * 80)
    log.info("%s", report.result.title)
    log.info("y = time[s], x = %s", x_axis.replace("_", " "))
    log.info("=" * 80)

    for test, test_result in zip(report.tests, report.result.results, strict=True):
        log.info(
            "%s=%d %s: %.4f±%.4fs",
            x_axis,
            getattr(test, x_axis),
            test_result.label,
            test_result.mean,
            test_result.stddev,
        )


def format_output(reports: Sequence[SuiteReport], x_axis: XAxis) -> dict[str, Any]:
    """Format suite reports for JSON output."""
    suites: list[dict[str, Any]] = []
    for report in reports:
        suites.append(
            {
                "title": report.result.title,
                "ordering": report.ordering,
                "config": report.config_name,
                "points": [
                    list(point)
                    for point in series_points(report.tests, report.result, x_axis)
                ],
                "results": [
                    {
                        "label": test_result.label,
                        "x": getattr(test, x_axis),
                        "mean": test_result.mean,
                        "stddev": test_result.stddev,
                        "trials": [trial.elapsed for trial in test_result.trials],
                    }
                    for test, test_result in zip(
                        report.tests, report.result.results, strict=True
                    )
                ],
            }
        )

    return {"x_axis": x_axis, "suites": suites}
