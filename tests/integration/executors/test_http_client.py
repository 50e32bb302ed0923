"""Integration tests for the aiohttp batch executor."""

from collections.abc import AsyncGenerator

import aiohttp
import pytest
from aioresponses import aioresponses as aioresponses_cls
from yarl import URL

from batch_bench.errors import ConnectionFailureError
from batch_bench.executors.http_client import HttpClientConfig, HttpClientExecutor

TARGET_URL = "http://bench.test/ping"


@pytest.fixture
async def executor(
    aioresponses: aioresponses_cls,
) -> AsyncGenerator[HttpClientExecutor, None]:
    """Create executor with managed session."""
    async with HttpClientExecutor.from_config(HttpClientConfig()) as impl:
        yield impl


class TestFetch:
    """Tests for fetch."""

    async def test_returns_status_and_body(
        self, executor: HttpClientExecutor, aioresponses: aioresponses_cls
    ) -> None:
        """Returns the response status and full body text."""
        aioresponses.get(TARGET_URL, status=200, body="pong")

        outcome = await executor.fetch(TARGET_URL)

        assert outcome.url == TARGET_URL
        assert outcome.status == 200
        assert outcome.body == "pong"
        assert outcome.is_success

    async def test_returns_error_status_without_raising(
        self, executor: HttpClientExecutor, aioresponses: aioresponses_cls
    ) -> None:
        """Non-2xx statuses are outcomes, not failures."""
        aioresponses.get(TARGET_URL, status=404, body="not found")

        outcome = await executor.fetch(TARGET_URL)

        assert outcome.status == 404
        assert not outcome.is_success

    async def test_wraps_client_errors(
        self, executor: HttpClientExecutor, aioresponses: aioresponses_cls
    ) -> None:
        """Client errors become ConnectionFailureError."""
        aioresponses.get(TARGET_URL, exception=aiohttp.ClientConnectionError("down"))

        with pytest.raises(ConnectionFailureError) as exc_info:
            await executor.fetch(TARGET_URL)

        assert exc_info.value.url == TARGET_URL
        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

    async def test_sends_configured_headers(
        self, aioresponses: aioresponses_cls
    ) -> None:
        """Configured headers are sent with every request."""
        aioresponses.get(TARGET_URL, status=200, body="")
        config = HttpClientConfig(headers={"X-Bench": "1"})

        async with HttpClientExecutor.from_config(config) as executor:
            await executor.fetch(TARGET_URL)

        call = aioresponses.requests[("GET", URL(TARGET_URL))][0]
        assert call.kwargs["headers"] == {"X-Bench": "1"}

    async def test_undecodable_body_is_still_an_outcome(
        self, executor: HttpClientExecutor, aioresponses: aioresponses_cls
    ) -> None:
        """A healthy response with a non-text body is replaced, not fatal."""
        aioresponses.get(
            TARGET_URL,
            status=200,
            body=b"\xff\xd8\xff\xe0binary",
            content_type="image/jpeg",
        )

        outcome = await executor.fetch(TARGET_URL)

        assert outcome.status == 200
        assert outcome.is_success
        assert outcome.body.endswith("binary")
        assert "\ufffd" in outcome.body


class TestExecuteBatch:
    """Tests for execute_batch over aiohttp."""

    async def test_issues_one_request_per_url(
        self, executor: HttpClientExecutor, aioresponses: aioresponses_cls
    ) -> None:
        """Every URL in the batch is requested exactly once."""
        aioresponses.get(TARGET_URL, status=200, body="pong", repeat=True)

        outcomes = await executor.execute_batch(3, [TARGET_URL] * 7, "unordered")

        assert len(outcomes) == 7
        assert len(aioresponses.requests[("GET", URL(TARGET_URL))]) == 7

    async def test_ordered_outcomes_match_urls(
        self, executor: HttpClientExecutor, aioresponses: aioresponses_cls
    ) -> None:
        """Ordered mode tags each position with its own URL's response."""
        urls = [f"http://bench.test/{i}" for i in range(5)]
        for url in urls:
            aioresponses.get(url, status=200, body=url)

        outcomes = await executor.execute_batch(2, urls, "ordered")

        assert [outcome.body for outcome in outcomes] == urls

    async def test_failure_aborts_batch(
        self, executor: HttpClientExecutor, aioresponses: aioresponses_cls
    ) -> None:
        """An unreachable URL aborts the whole batch."""
        aioresponses.get(TARGET_URL, status=200, body="pong", repeat=True)

        with pytest.raises(ConnectionFailureError):
            await executor.execute_batch(
                2, [TARGET_URL, "http://unmocked.test/", TARGET_URL], "ordered"
            )
