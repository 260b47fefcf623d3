"""Page-following helpers over any ``VssApi``."""

from __future__ import annotations

from typing import AsyncIterator

from packages.vss_sdk import messages
from packages.vss_sdk.api import Message, VssApi


async def iter_key_versions(
    api: VssApi,
    store_id: str,
    *,
    key_prefix: str | None = None,
    page_size: int | None = None,
) -> AsyncIterator[Message]:
    """Yield every ``KeyValue`` in ``store_id``, following page tokens.

    Iteration stops when the server omits ``next_page_token`` or sends an
    empty one. Items are yielded in server order.
    """
    page_token: str | None = None
    while True:
        request = messages.ListKeyVersionsRequest(store_id=store_id)
        if key_prefix is not None:
            request.key_prefix = key_prefix
        if page_size is not None:
            request.page_size = page_size
        if page_token is not None:
            request.page_token = page_token

        response = await api.list_key_versions(request)
        for item in response.key_versions:
            yield item

        if not response.HasField("next_page_token") or response.next_page_token == "":
            return
        page_token = response.next_page_token
