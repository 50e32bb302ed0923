"""Models for request outcomes and benchmark results."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RequestOutcome:
    """Status and body of one completed GET exchange."""

    url: str
    status: int
    body: str

    @property
    def is_success(self) -> bool:
        """Whether the status is in the 2xx range."""
        return 200 <= self.status < 300


@dataclass(frozen=True, kw_only=True)
class TrialResult:
    """Wall-clock duration of one trial."""

    index: int
    elapsed: float


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Timing statistics for a test, folded from its trials.

    Contains only timing - the caller knows which test and ordering produced it.
    """

    __test__ = False

    label: str
    mean: float
    stddev: float
    trials: Sequence[TrialResult] = ()

    def as_pair(self) -> tuple[float, float]:
        """Return the ``(mean, stddev)`` pair in seconds."""
        return (self.mean, self.stddev)


@dataclass(frozen=True, kw_only=True)
class SuiteResult:
    """Results of a suite run, one entry per test in input order."""

    title: str
    results: Sequence[TestResult]

    def pairs(self) -> Sequence[tuple[float, float]]:
        """Return ``(mean, stddev)`` pairs in test order."""
        return [result.as_pair() for result in self.results]
