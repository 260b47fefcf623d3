"""Public shared HTTP API for VSS client packages."""

from .client import AsyncHttpClient, is_retryable_status
from .errors import HttpClientError, HttpError, HttpRequestError

__all__ = [
    "AsyncHttpClient",
    "HttpClientError",
    "HttpError",
    "HttpRequestError",
    "is_retryable_status",
]
