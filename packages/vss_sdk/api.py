"""Capability protocols consumed and provided by the VSS SDK."""

from __future__ import annotations

from typing import Any, Protocol

# Protobuf message classes are built at runtime, so request/response types are
# annotated as ``Any`` at this seam.
Message = Any


class VssApi(Protocol):
    """The four VSS storage operations, over any transport."""

    async def get_object(self, request: Message) -> Message:
        """Return one ``GetObjectResponse`` for a ``GetObjectRequest``."""

    async def put_object(self, request: Message) -> Message:
        """Apply one ``PutObjectRequest`` transaction."""

    async def delete_object(self, request: Message) -> Message:
        """Delete the key named by one ``DeleteObjectRequest``."""

    async def list_key_versions(self, request: Message) -> Message:
        """Return one ``ListKeyVersionsResponse`` page."""


class DataProtector(Protocol):
    """Symmetric protect/unprotect capability for opaque value bytes."""

    def protect(self, plaintext: bytes) -> bytes:
        """Return ciphertext for ``plaintext``."""

    def unprotect(self, protected: bytes) -> bytes:
        """Return plaintext for ``protected`` or raise ``CryptoError``."""
