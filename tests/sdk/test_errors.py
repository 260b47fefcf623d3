"""Unit tests for VSS SDK error mapping."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import httpx
import pytest

from packages.vss_sdk import messages
from packages.vss_sdk.errors import (
    CryptoError,
    VssClientError,
    VssSdkError,
    VssTransportError,
    client_error,
    contract_violation,
    error_code_name,
    map_request_error,
    map_status_error,
)
from packages.vss_shared.http import HttpRequestError


def test_client_error_keeps_code_and_message_verbatim() -> None:
    """Structured errors should carry the server's code and message unchanged."""
    error = client_error(
        operation="putObjects",
        error=messages.ErrorResponse(
            error_code=messages.CONFLICT_EXCEPTION,
            message="version mismatch",
        ),
    )

    assert isinstance(error, VssSdkError)
    assert error.error_code == messages.CONFLICT_EXCEPTION
    assert error.error_message == "version mismatch"
    assert error.error_name == "CONFLICT_EXCEPTION"
    assert str(error) == "putObjects failed: CONFLICT_EXCEPTION version mismatch"


def test_contract_violation_is_no_such_key() -> None:
    """The get contract violation should look like a NO_SUCH_KEY error."""
    error = contract_violation(operation="getObject")

    assert error.error_code == messages.NO_SUCH_KEY_EXCEPTION
    assert error.error_message.startswith("VSS Server API Violation")


def test_error_code_name_tolerates_unknown_codes() -> None:
    """Unknown codes should render visibly rather than raise."""
    assert error_code_name(messages.AUTH_EXCEPTION) == "AUTH_EXCEPTION"
    assert error_code_name(99) == "UNKNOWN(99)"


def test_map_status_error_marks_retryable_statuses() -> None:
    """5xx and 429 replies should be flagged retryable; 4xx should not."""
    request = httpx.Request("POST", "https://vss.example.com/getObject")

    server = map_status_error(
        operation="getObject", response=httpx.Response(503, request=request)
    )
    client = map_status_error(
        operation="getObject", response=httpx.Response(400, request=request)
    )
    throttled = map_status_error(
        operation="getObject", response=httpx.Response(429, request=request)
    )

    assert server.status_code == 503 and server.retryable is True
    assert client.status_code == 400 and client.retryable is False
    assert throttled.retryable is True


def test_map_request_error_unwraps_original_cause() -> None:
    """Connection failures should expose the underlying httpx exception."""
    cause = httpx.ConnectError("refused")
    mapped = map_request_error(
        operation="listKeyVersions",
        error=HttpRequestError(
            message="HTTP request failed",
            method="POST",
            url="https://vss.example.com/listKeyVersions",
            retryable=True,
            cause=cause,
        ),
    )

    assert isinstance(mapped, VssTransportError)
    assert mapped.status_code is None
    assert mapped.cause is cause
    assert mapped.retryable is True


def test_error_kinds_are_distinct() -> None:
    """Each failure family should expose its own kind tag."""
    assert VssClientError.kind == "protocol"
    assert VssTransportError.kind == "transport"
    assert CryptoError.kind == "crypto"


@contextmanager
def _caller_scope() -> Iterator[None]:
    yield


@pytest.mark.parametrize(
    "error",
    [
        contract_violation(operation="getObject"),
        VssTransportError(message="down", operation="putObjects", status_code=503),
        CryptoError(message="bad tag"),
    ],
)
def test_errors_propagate_through_generator_context_managers(error: VssSdkError) -> None:
    """SDK errors should pass unchanged through a caller's contextmanager block."""
    with pytest.raises(type(error)) as exc_info:
        with _caller_scope():
            raise error

    assert exc_info.value is error
    assert exc_info.value.__traceback__ is not None
