"""Suite runner coordinating timed trials on a single executor."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

from batch_bench.errors import EmptySampleSetError, UnsuccessfulStatusError
from batch_bench.executors.base import BatchExecutor, Ordering
from batch_bench.models.definition import Test
from batch_bench.models.result import (
    RequestOutcome,
    SuiteResult,
    TestResult,
    TrialResult,
)
from batch_bench.stats import statistic

log = logging.getLogger(__name__)


def validate_outcomes(outcomes: Sequence[RequestOutcome]) -> None:
    """Raise on the first outcome whose status is not 2xx."""
    for outcome in outcomes:
        if not outcome.is_success:
            raise UnsuccessfulStatusError(outcome.status, outcome.url)


@dataclass(frozen=True, kw_only=True)
class SuiteRunner:
    """Runs benchmark tests as timed trials on a single executor.

    ``sleep`` and ``clock`` default to the event loop sleep and the
    monotonic performance counter; tests inject their own to observe delays
    and control elapsed time.
    """

    executor: BatchExecutor
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    clock: Callable[[], float] = time.perf_counter

    async def run_suite(
        self,
        tests: Sequence[Test],
        ordering: Ordering,
        title: str,
    ) -> SuiteResult:
        """Run tests in order and collect one result per test.

        Args:
            tests: Tests to run, strictly one after another
            ordering: Result ordering policy passed to the executor
            title: Human-readable name of this suite run

        Returns:
            Suite result with one entry per test, in input order

        Raises:
            BenchmarkError: On the first fatal condition; later tests do not run

        """
        log.info("=== %s ===", title)

        results: list[TestResult] = []
        for test_idx, test in enumerate(tests):
            log.info("Test%d - %s", test_idx + 1, test.describe())
            results.append(
                await self.run_test(test, ordering, is_first_test=test_idx == 0)
            )

        return SuiteResult(title=title, results=results)

    async def run_test(
        self,
        test: Test,
        ordering: Ordering,
        *,
        is_first_test: bool,
    ) -> TestResult:
        """Run all trials of a test and fold their durations into statistics.

        Every trial start waits ``test.delay_s`` seconds except the first
        trial of the first test in a suite.

        Raises:
            UnsuccessfulStatusError: If any response in a trial is not 2xx
            EmptySampleSetError: If the test has zero repeats

        """
        trials: list[TrialResult] = []
        for idx in range(1, test.repeats + 1):
            if idx > 1 or not is_first_test:
                await self.sleep(test.delay_s)

            trial = await self.run_trial(test, ordering, idx)
            log.info("  [%d/%d] time: %ss", idx, test.repeats, trial.elapsed)
            trials.append(trial)

        stats = statistic([trial.elapsed for trial in trials])
        if stats is None:
            raise EmptySampleSetError(test.label)

        mean, stddev = stats
        log.info("SUMMARY: %s±%ss", mean, stddev)

        return TestResult(label=test.label, mean=mean, stddev=stddev, trials=trials)

    async def run_trial(self, test: Test, ordering: Ordering, idx: int) -> TrialResult:
        """Time one batch of requests and validate every outcome."""
        urls = [test.url_get] * test.requests_number

        start = self.clock()
        outcomes = await self.executor.execute_batch(
            test.concurrent_requests, urls, ordering
        )
        elapsed = self.clock() - start

        validate_outcomes(outcomes)

        return TrialResult(index=idx, elapsed=elapsed)
