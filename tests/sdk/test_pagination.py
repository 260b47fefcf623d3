"""Unit tests for page-following list helpers."""

from __future__ import annotations

import asyncio

from packages.vss_sdk import messages
from packages.vss_sdk.pagination import iter_key_versions


class _PagedApi:
    """Fake ``VssApi`` serving key versions from pre-built pages."""

    def __init__(self, pages: dict[str, object]) -> None:
        self.requests: list[object] = []
        self._pages = pages

    async def list_key_versions(self, request: object) -> object:
        self.requests.append(request)
        token = request.page_token if request.HasField("page_token") else ""
        return self._pages[token]


def _collect(api: _PagedApi, **kwargs: object) -> list[str]:
    async def _go() -> list[str]:
        return [item.key async for item in iter_key_versions(api, "store", **kwargs)]

    return asyncio.run(_go())


def test_iter_key_versions_follows_tokens_until_absent() -> None:
    """Items from every page should be yielded in server order."""
    api = _PagedApi(
        {
            "": messages.ListKeyVersionsResponse(
                key_versions=[messages.KeyValue(key="a"), messages.KeyValue(key="b")],
                next_page_token="p2",
                global_version=5,
            ),
            "p2": messages.ListKeyVersionsResponse(
                key_versions=[messages.KeyValue(key="c")],
            ),
        }
    )

    keys = _collect(api, key_prefix="", page_size=2)

    assert keys == ["a", "b", "c"]
    assert len(api.requests) == 2
    first, second = api.requests
    assert first.HasField("key_prefix") and first.page_size == 2
    assert not first.HasField("page_token")
    assert second.page_token == "p2"


def test_iter_key_versions_stops_on_empty_token() -> None:
    """An empty next_page_token should end iteration."""
    api = _PagedApi(
        {
            "": messages.ListKeyVersionsResponse(
                key_versions=[messages.KeyValue(key="only")],
                next_page_token="",
            ),
        }
    )

    assert _collect(api) == ["only"]
    assert not api.requests[0].HasField("page_size")
