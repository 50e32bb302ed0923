"""CLI entry point for the HTTP batch benchmark."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from batch_bench.config_loader import load_benchmark_config
from batch_bench.errors import BenchmarkError
from batch_bench.executors.base import Ordering
from batch_bench.executors.http_client import HttpClientConfig, HttpClientExecutor
from batch_bench.report import SuiteReport, XAxis, format_output, log_suite_summary
from batch_bench.runner import SuiteRunner

ORDERING_CHOICES: dict[str, Sequence[Ordering]] = {
    "ordered": ("ordered",),
    "unordered": ("unordered",),
    "both": ("ordered", "unordered"),
}

ORDERING_TITLES: dict[Ordering, str] = {
    "ordered": "Ordered buffer",
    "unordered": "Unordered buffer",
}


def suite_title(ordering: Ordering, config_name: str, prefix: str | None) -> str:
    """Build the title of a suite run."""
    return f"{prefix or ORDERING_TITLES[ordering]} - {config_name}"


async def run_benchmarks(
    config_paths: Sequence[Path],
    orderings: Sequence[Ordering],
    runner: SuiteRunner,
    title_prefix: str | None = None,
) -> Sequence[SuiteReport]:
    """Run every config file once per ordering, in order."""
    log = logging.getLogger("batch_bench")

    reports: list[SuiteReport] = []
    for config_path in config_paths:
        log.info("Loading benchmark config: %s", config_path)
        config = await load_benchmark_config(config_path)
        config_name = config_path.stem

        for ordering in orderings:
            result = await runner.run_suite(
                config.tests,
                ordering,
                suite_title(ordering, config_name, title_prefix),
            )
            reports.append(
                SuiteReport(
                    config_name=config_name,
                    ordering=ordering,
                    tests=config.tests,
                    result=result,
                )
            )

    return reports


async def run(
    config_paths: Sequence[Path],
    orderings: Sequence[Ordering],
    x_axis: XAxis,
    title_prefix: str | None = None,
    client_config: HttpClientConfig | None = None,
) -> int:
    """Run the benchmark and return exit code."""
    log = logging.getLogger("batch_bench")

    try:
        async with HttpClientExecutor.from_config(
            client_config or HttpClientConfig()
        ) as executor:
            reports = await run_benchmarks(
                config_paths, orderings, SuiteRunner(executor=executor), title_prefix
            )
    except BenchmarkError as exc:
        log.error("Error: %s", exc)
        if exc.__cause__ is not None:
            log.error("  Caused by: %s", exc.__cause__)
        return 1

    for report in reports:
        log_suite_summary(log, report, x_axis)

    print(json.dumps(format_output(reports, x_axis), indent=2))
    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Benchmark concurrent HTTP GET batches against a target URL"
    )
    parser.add_argument(
        "configs",
        type=Path,
        nargs="+",
        help="Benchmark config files (JSON, or YAML with a .yaml/.yml suffix)",
    )
    parser.add_argument(
        "--ordering",
        choices=sorted(ORDERING_CHOICES),
        default="both",
        help="Result ordering mode(s) to benchmark (default: both)",
    )
    parser.add_argument(
        "--x-axis",
        choices=["concurrent_requests", "requests_number"],
        default="concurrent_requests",
        help="Test field reported as the x value of each result",
    )
    parser.add_argument(
        "--title-prefix",
        default=None,
        help="Replaces the ordering name at the start of each suite title",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            config_paths=args.configs,
            orderings=ORDERING_CHOICES[args.ordering],
            x_axis=args.x_axis,
            title_prefix=args.title_prefix,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
