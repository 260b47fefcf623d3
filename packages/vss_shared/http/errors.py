"""Typed errors for the shared HTTP client helpers."""

from __future__ import annotations

from dataclasses import dataclass


# Not frozen: raising through contextlib blocks assigns ``__traceback__``.
@dataclass(eq=False)
class HttpError(Exception):
    """Base error type for shared HTTP helper failures."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(eq=False)
class HttpClientError(HttpError):
    """Base error for outbound HTTP client call failures."""

    method: str
    url: str
    retryable: bool = False


@dataclass(eq=False)
class HttpRequestError(HttpClientError):
    """Failure before any HTTP response was received."""

    cause: Exception | None = None
