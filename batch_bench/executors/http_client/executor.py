"""aiohttp batch executor implementation."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from batch_bench.errors import ConnectionFailureError
from batch_bench.executors.base import BatchExecutor
from batch_bench.executors.http_client.config import HttpClientConfig
from batch_bench.models.result import RequestOutcome

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class HttpClientExecutor(BatchExecutor):
    """Batch executor issuing GET requests through one aiohttp session.

    The session's connection pool is shared by every request in flight.
    """

    config: HttpClientConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: HttpClientConfig
    ) -> AsyncGenerator["HttpClientExecutor", None]:
        """Create executor with managed session lifecycle."""
        connector = aiohttp.TCPConnector(limit=config.connection_limit)
        async with aiohttp.ClientSession(
            connector=connector,
            timeout=aiohttp.ClientTimeout(total=None),
        ) as session:
            yield cls(config=config, session=session)

    async def fetch(self, url: str) -> RequestOutcome:
        """Issue one GET and read the body as text, replacing undecodable bytes."""
        try:
            async with self.session.get(url, headers=self.config.headers) as response:
                body = await response.text(errors="replace")
                return RequestOutcome(url=url, status=response.status, body=body)
        except aiohttp.ClientError as exc:
            log.error("Request to %s failed: %s", url, exc)
            raise ConnectionFailureError(url) from exc
