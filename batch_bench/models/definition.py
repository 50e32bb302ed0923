"""Models for benchmark definitions loaded from config documents."""

from collections.abc import Sequence

from pydantic import Field

from batch_bench.models.base import Model


class Test(Model):
    """A single benchmark test: one URL hammered by repeated trials."""

    __test__ = False

    label: str = Field(..., description="Human-readable test description")
    url_get: str = Field(..., description="URL requested with GET by every request")
    requests_number: int = Field(..., ge=0, description="Requests issued per trial")
    concurrent_requests: int = Field(
        ..., ge=1, description="Maximum requests in flight at once"
    )
    repeats: int = Field(..., ge=0, description="Number of trials to run")
    delay_s: int = Field(..., ge=0, description="Pause before a trial, in seconds")

    def describe(self) -> str:
        """Render the multi-line description logged before the test runs."""
        return (
            f"{self.label}\n"
            f"url_get: {self.url_get}\n"
            f"requests_number: {self.requests_number}\n"
            f"concurrent_requests: {self.concurrent_requests}\n"
            f"repeats: {self.repeats}\n"
            f"delay: {self.delay_s}s"
        )


class BenchmarkConfig(Model):
    """Complete benchmark document: an ordered sequence of tests."""

    tests: Sequence[Test] = Field(default_factory=list, description="Tests to run")
