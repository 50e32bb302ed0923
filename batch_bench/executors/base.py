"""Abstract base for executors that run batches of GET requests."""

import asyncio
import itertools
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Literal, Protocol, TypeAlias

from batch_bench.models.result import RequestOutcome

log = logging.getLogger(__name__)

Ordering: TypeAlias = Literal["ordered", "unordered"]


class OutcomeCollector(Protocol):
    """Aggregates outcomes as requests in the window complete."""

    def add(self, index: int, outcome: RequestOutcome) -> None:
        """Record the outcome of the request submitted at ``index``."""

    def results(self) -> Sequence[RequestOutcome]:
        """Return the collected outcomes."""


class OrderedCollector:
    """Places each outcome at its submission index."""

    def __init__(self, size: int) -> None:
        self._slots: list[RequestOutcome | None] = [None] * size

    def add(self, index: int, outcome: RequestOutcome) -> None:
        self._slots[index] = outcome

    def results(self) -> Sequence[RequestOutcome]:
        missing = [index for index, slot in enumerate(self._slots) if slot is None]
        if missing:
            raise RuntimeError(f"No outcome collected for request indexes {missing}")
        return [slot for slot in self._slots if slot is not None]


@dataclass
class UnorderedCollector:
    """Appends outcomes in completion order."""

    outcomes: list[RequestOutcome] = field(default_factory=list)

    def add(self, index: int, outcome: RequestOutcome) -> None:
        self.outcomes.append(outcome)

    def results(self) -> Sequence[RequestOutcome]:
        return self.outcomes


def make_collector(ordering: Ordering, size: int) -> OutcomeCollector:
    """Create the outcome collector for an ordering policy."""
    if ordering == "ordered":
        return OrderedCollector(size)
    if ordering == "unordered":
        return UnorderedCollector()
    raise ValueError(f"Unknown ordering: {ordering!r}")


@dataclass(frozen=True, kw_only=True)
class BatchExecutor(ABC):
    """Abstract base for batch executors.

    Subclasses provide ``fetch``, a single GET exchange. The base class drives
    a sliding concurrency window over a batch of URLs: whenever one request
    completes, the next queued URL is admitted, so at most
    ``concurrency_limit`` requests are ever outstanding.
    """

    @abstractmethod
    async def fetch(self, url: str) -> RequestOutcome:
        """Issue one GET request and return its status and body.

        Args:
            url: URL to request

        Returns:
            Outcome of the completed exchange

        Raises:
            ConnectionFailureError: If the request could not be sent or the
                response body could not be read

        """

    async def execute_batch(
        self,
        concurrency_limit: int,
        urls: Sequence[str],
        ordering: Ordering = "ordered",
    ) -> Sequence[RequestOutcome]:
        """Issue one GET per URL through a sliding concurrency window.

        Args:
            concurrency_limit: Maximum requests in flight at once
            urls: URLs to request, one request per element
            ordering: "ordered" returns outcomes in ``urls`` order,
                "unordered" returns them in completion order

        Returns:
            One outcome per URL

        Raises:
            ValueError: If concurrency_limit is less than one
            ConnectionFailureError: If any request fails; outstanding
                requests are cancelled

        """
        if concurrency_limit < 1:
            raise ValueError(
                f"concurrency_limit must be at least 1, got {concurrency_limit}"
            )

        collector = make_collector(ordering, len(urls))
        queue: Iterator[tuple[int, str]] = iter(enumerate(urls))
        pending: dict[asyncio.Task[RequestOutcome], int] = {}

        def admit(count: int) -> None:
            for index, url in itertools.islice(queue, count):
                pending[asyncio.create_task(self.fetch(url))] = index

        log.debug(
            "Executing batch: requests=%d, concurrency_limit=%d, ordering=%s",
            len(urls),
            concurrency_limit,
            ordering,
        )

        try:
            admit(concurrency_limit)
            while pending:
                done, _ = await asyncio.wait(
                    pending, return_when=asyncio.FIRST_COMPLETED
                )
                for task in done:
                    index = pending.pop(task)
                    collector.add(index, task.result())
                admit(len(done))
        finally:
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

        return collector.results()
