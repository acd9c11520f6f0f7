# ABOUTME: Shared interface and error type for the fetch/extract stages
# ABOUTME: Progress callback protocol used by the sequential fetch loop

from typing import Protocol


class ExtractionError(Exception):
    """Raised when a fetched body does not have the expected about.json shape."""

    pass


class ProgressCallback(Protocol):
    """Called after every request with (requests issued so far, requests planned)."""

    def __call__(self, done: int, total: int) -> None: ...
