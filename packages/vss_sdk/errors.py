"""Error models and failure mapping for VSS SDK calls.

Every failure the SDK raises derives from ``VssSdkError`` and carries a
``kind`` tag, so callers can branch on one attribute instead of walking the
class hierarchy:

- ``"protocol"``: the server answered with a structured ``ErrorResponse`` (or
  a successful response violating the server contract).
- ``"transport"``: the server could not be reached, or replied with something
  that is neither the expected response nor a structured error.
- ``"crypto"``: a data protector could not protect or unprotect a value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

import httpx

from packages.vss_sdk import messages
from packages.vss_shared.http import HttpRequestError, is_retryable_status

ErrorKind = Literal["protocol", "transport", "crypto"]

GET_OBJECT_CONTRACT_VIOLATION = (
    "VSS Server API Violation, expected value in GetObjectResponse but found none."
)


# Not frozen: raising through contextlib blocks assigns ``__traceback__``.
@dataclass(eq=False)
class VssSdkError(Exception):
    """Base error type for VSS SDK failures."""

    kind: ClassVar[ErrorKind]

    message: str

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self.message


@dataclass(eq=False)
class VssClientError(VssSdkError):
    """Structured error reported by the VSS server."""

    kind: ClassVar[ErrorKind] = "protocol"

    operation: str
    error_code: int
    error_message: str

    @property
    def error_name(self) -> str:
        """Return the schema name of ``error_code``, tolerating unknown codes."""
        return error_code_name(self.error_code)


@dataclass(eq=False)
class VssTransportError(VssSdkError):
    """Transport-level failure or unintelligible server reply."""

    kind: ClassVar[ErrorKind] = "transport"

    operation: str
    status_code: int | None = None
    retryable: bool = False
    cause: Exception | None = None


@dataclass(eq=False)
class CryptoError(VssSdkError):
    """Data protector failure on malformed or foreign ciphertext."""

    kind: ClassVar[ErrorKind] = "crypto"

    cause: Exception | None = None


def error_code_name(code: int) -> str:
    """Map one numeric ``ErrorCode`` to its name; unknown codes stay visible."""
    try:
        return messages.ErrorCode.Name(code)
    except ValueError:
        return f"UNKNOWN({code})"


def client_error(*, operation: str, error: object) -> VssClientError:
    """Wrap one parsed ``ErrorResponse`` without reinterpreting its code."""
    code = int(getattr(error, "error_code", messages.UNKNOWN))
    detail = str(getattr(error, "message", ""))
    return VssClientError(
        message=f"{operation} failed: {error_code_name(code)} {detail}".rstrip(),
        operation=operation,
        error_code=code,
        error_message=detail,
    )


def contract_violation(*, operation: str) -> VssClientError:
    """Build the error raised when a get succeeds without a value."""
    return VssClientError(
        message=f"{operation} failed: NO_SUCH_KEY_EXCEPTION {GET_OBJECT_CONTRACT_VIOLATION}",
        operation=operation,
        error_code=messages.NO_SUCH_KEY_EXCEPTION,
        error_message=GET_OBJECT_CONTRACT_VIOLATION,
    )


def map_request_error(*, operation: str, error: HttpRequestError) -> VssTransportError:
    """Map one connection-level HTTP failure into a typed SDK transport error."""
    return VssTransportError(
        message=f"{operation} transport failure: {error.message}",
        operation=operation,
        retryable=error.retryable,
        cause=error.cause if error.cause is not None else error,
    )


def map_status_error(
    *,
    operation: str,
    response: httpx.Response,
    cause: Exception | None = None,
) -> VssTransportError:
    """Map one unintelligible HTTP reply into a typed SDK transport error."""
    status = response.status_code
    return VssTransportError(
        message=f"{operation} transport failure: HTTP {status} with unparseable body",
        operation=operation,
        status_code=status,
        retryable=is_retryable_status(status),
        cause=cause,
    )
