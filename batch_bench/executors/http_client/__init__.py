"""aiohttp batch executor module."""

from batch_bench.executors.http_client.config import HttpClientConfig
from batch_bench.executors.http_client.executor import HttpClientExecutor

__all__ = ["HttpClientConfig", "HttpClientExecutor"]
