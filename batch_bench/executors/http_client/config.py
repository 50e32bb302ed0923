"""Configuration for the aiohttp batch executor."""

from collections.abc import Mapping

from pydantic import BaseModel, Field


class HttpClientConfig(BaseModel):
    """Configuration for the aiohttp batch executor."""

    # 0 leaves the concurrency window as the only cap on open connections
    connection_limit: int = Field(default=0, ge=0)
    headers: Mapping[str, str] = Field(default_factory=dict)
