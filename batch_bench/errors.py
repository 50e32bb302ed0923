"""Fatal conditions raised by the benchmark harness.

Every error here invalidates the whole run. Inner components raise them and
only the command line entry point turns them into a nonzero exit status.
"""


class BenchmarkError(Exception):
    """Base class for errors that abort a benchmark run."""


class ConfigError(BenchmarkError):
    """Raised when a benchmark config document is missing or malformed."""


class ConnectionFailureError(BenchmarkError):
    """Raised when a request could not be sent or its body could not be read."""

    def __init__(self, url: str) -> None:
        super().__init__(f"No connection to the server: {url}")
        self.url = url


class UnsuccessfulStatusError(BenchmarkError):
    """Raised when a completed exchange returned a non-2xx status."""

    def __init__(self, status: int, url: str) -> None:
        super().__init__(f"Unsuccessful status {status} from {url}")
        self.status = status
        self.url = url


class EmptySampleSetError(BenchmarkError):
    """Raised when a test produced no timing samples (zero repeats)."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Repeats equal zero for test '{label}'")
        self.label = label
