"""Asynchronous HTTP transport client for the VSS storage API."""

from __future__ import annotations

from dataclasses import replace

import httpx
from google.protobuf.message import DecodeError

from packages.vss_sdk import messages
from packages.vss_sdk.api import Message
from packages.vss_sdk.config import VssSdkConfig, endpoint_base_url, resolve_endpoint
from packages.vss_sdk.errors import (
    VssSdkError,
    client_error,
    contract_violation,
    map_request_error,
    map_status_error,
)
from packages.vss_shared.config import VssSettings
from packages.vss_shared.http import AsyncHttpClient, HttpRequestError
from packages.vss_shared.logging import bind_context, get_logger, log_context
from packages.vss_shared.logging import fields

GET_OBJECT = "getObject"
PUT_OBJECTS = "putObjects"
DELETE_OBJECT = "deleteObject"
LIST_KEY_VERSIONS = "listKeyVersions"

CONTENT_TYPE = "application/octet-stream"

_LOGGER = get_logger(__name__)


class VssClient:
    """Thin protobuf-over-HTTP client for one VSS endpoint.

    Each call is exactly one POST. Nothing is retried or cached; failures are
    raised as ``VssClientError`` when the server sent a parseable
    ``ErrorResponse`` and as ``VssTransportError`` otherwise.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        *,
        config: VssSdkConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create one client with an injected or config-built HTTP client."""
        resolved = VssSdkConfig() if config is None else config
        if endpoint is not None or config is None:
            resolved = replace(resolved, endpoint=resolve_endpoint(endpoint))
        self._config = resolved
        self._base_url = endpoint_base_url(resolved.endpoint)
        self._http = AsyncHttpClient(
            timeout_seconds=resolved.timeout_seconds,
            headers=resolved.headers,
            follow_redirects=resolved.follow_redirects,
            transport=transport,
            client=http_client,
        )

    @classmethod
    def from_settings(
        cls,
        settings: VssSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> VssClient:
        """Create one client from validated runtime settings."""
        return cls(config=VssSdkConfig.from_settings(settings), transport=transport)

    @property
    def endpoint(self) -> str:
        """Base endpoint every operation path is resolved against."""
        return self._base_url

    async def aclose(self) -> None:
        """Close the HTTP client when this instance created it."""
        await self._http.aclose()

    async def __aenter__(self) -> VssClient:
        """Enter async context manager scope."""
        return self

    async def __aexit__(self, *_: object) -> None:
        """Exit async context manager scope and close owned resources."""
        await self.aclose()

    async def get_object(self, request: Message) -> Message:
        """Fetch one key; a success without a value is a ``NO_SUCH_KEY`` error."""
        response = await self._send(
            operation=GET_OBJECT,
            request=request,
            response_type=messages.GetObjectResponse,
        )
        if not response.HasField("value") or len(response.value.value) == 0:
            with log_context({fields.OPERATION: GET_OBJECT, fields.STORE_ID: request.store_id}):
                _LOGGER.warning("server returned success for get without a value")
            raise contract_violation(operation=GET_OBJECT)
        return response

    async def put_object(self, request: Message) -> Message:
        """Write one transaction of key-value items."""
        return await self._send(
            operation=PUT_OBJECTS,
            request=request,
            response_type=messages.PutObjectResponse,
        )

    async def delete_object(self, request: Message) -> Message:
        """Delete one key."""
        return await self._send(
            operation=DELETE_OBJECT,
            request=request,
            response_type=messages.DeleteObjectResponse,
        )

    async def list_key_versions(self, request: Message) -> Message:
        """Return one page of keys and versions."""
        return await self._send(
            operation=LIST_KEY_VERSIONS,
            request=request,
            response_type=messages.ListKeyVersionsResponse,
        )

    async def _send(
        self,
        *,
        operation: str,
        request: Message,
        response_type: type,
    ) -> Message:
        """POST one serialized request and parse the typed reply."""
        url = f"{self._base_url}{operation}"
        with log_context(
            {
                fields.OPERATION: operation,
                fields.STORE_ID: request.store_id,
                fields.URL: url,
            }
        ):
            parsed, failure, cause = await self._exchange(
                operation=operation,
                url=url,
                request=request,
                response_type=response_type,
            )
        if failure is not None:
            raise failure from cause
        return parsed

    async def _exchange(
        self,
        *,
        operation: str,
        url: str,
        request: Message,
        response_type: type,
    ) -> tuple[Message | None, VssSdkError | None, Exception | None]:
        """Run one HTTP exchange, returning ``(parsed, failure, cause)``."""
        try:
            response = await self._http.post(
                url,
                content=request.SerializeToString(),
                headers={"Content-Type": CONTENT_TYPE},
            )
        except HttpRequestError as exc:
            _LOGGER.warning("request failed before a response was received")
            return None, map_request_error(operation=operation, error=exc), exc

        bind_context(**{fields.STATUS_CODE: response.status_code})
        if not response.is_success:
            failure, cause = _error_from_response(operation=operation, response=response)
            return None, failure, cause

        try:
            parsed = response_type.FromString(response.content)
        except DecodeError as exc:
            _LOGGER.warning("successful response body did not parse")
            return None, map_status_error(operation=operation, response=response, cause=exc), exc

        _LOGGER.debug("request completed")
        return parsed, None, None


def _error_from_response(
    *, operation: str, response: httpx.Response
) -> tuple[VssSdkError, Exception | None]:
    """Return the structured error in ``response`` or a generic transport error."""
    try:
        error = messages.ErrorResponse.FromString(response.content)
    except DecodeError as exc:
        _LOGGER.warning("server returned an error status with an unparseable body")
        return map_status_error(operation=operation, response=response, cause=exc), exc

    mapped = client_error(operation=operation, error=error)
    bind_context(**{fields.ERROR_CODE: mapped.error_name})
    _LOGGER.warning("server returned a structured error")
    return mapped, None
