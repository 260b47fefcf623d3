"""Value-encrypting decorator over any ``VssApi`` implementation.

Only ``KeyValue.value`` bytes are transformed. Keys, versions, store ids and
delete requests pass through untouched, so the server still sees plaintext
keys and can enforce versioning.
"""

from __future__ import annotations

import asyncio

from packages.vss_sdk import messages
from packages.vss_sdk.api import DataProtector, Message, VssApi
from packages.vss_shared.logging import get_logger

_LOGGER = get_logger(__name__)


class VssEncryptingClient:
    """Protect values on the way out and unprotect them on the way back in.

    Protector failures and inner API failures propagate unchanged; responses
    are never returned partially transformed.
    """

    def __init__(self, api: VssApi, protector: DataProtector) -> None:
        """Wrap ``api`` so every value crosses it through ``protector``."""
        self._api = api
        self._protector = protector

    async def get_object(self, request: Message) -> Message:
        """Fetch one key and unprotect its value when one is present."""
        response = await self._api.get_object(request)
        if response.HasField("value") and len(response.value.value) > 0:
            response.value.value = self._protector.unprotect(response.value.value)
        return response

    async def put_object(self, request: Message) -> Message:
        """Protect every item value in a copy of ``request`` and forward it."""
        encrypted = messages.PutObjectRequest()
        encrypted.CopyFrom(request)
        for item in encrypted.transaction_items:
            item.value = self._protector.protect(item.value)
        _LOGGER.debug(
            "protected %d transaction items", len(encrypted.transaction_items)
        )
        return await self._api.put_object(encrypted)

    async def delete_object(self, request: Message) -> Message:
        """Forward unchanged; delete requests carry no values to protect."""
        return await self._api.delete_object(request)

    async def list_key_versions(self, request: Message) -> Message:
        """List one page and unprotect every returned value, or fail whole."""
        response = await self._api.list_key_versions(request)
        await self._unprotect_all_or_fail(response.key_versions)
        return response

    async def _unprotect_all_or_fail(self, items: Message) -> None:
        """Unprotect non-empty values in order, stopping at the first failure."""
        for item in items:
            if len(item.value) > 0:
                item.value = self._protector.unprotect(item.value)
            # Checkpoint so a cancelled caller stops the remaining work.
            await asyncio.sleep(0)
