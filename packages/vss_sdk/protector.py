"""ChaCha20-Poly1305 data protector for VSS values."""

from __future__ import annotations

import binascii
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from packages.vss_sdk.errors import CryptoError

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16


def new_key() -> bytes:
    """Return a fresh random 256-bit key."""
    return os.urandom(KEY_SIZE)


def key_to_hex(key: bytes) -> str:
    """Encode ``key`` as lowercase hex for storage in config or secrets."""
    return binascii.hexlify(key).decode()


def key_from_hex(value: str) -> bytes:
    """Decode a hex key produced by ``key_to_hex``."""
    return binascii.unhexlify(value.strip())


class AeadDataProtector:
    """Seal values with ChaCha20-Poly1305.

    Blob layout is ``nonce (12 bytes) || ciphertext || tag (16 bytes)`` with a
    fresh random nonce per call. ``associated_data`` is bound into every tag,
    so values sealed for one store cannot be replayed into another protector
    configured with different associated data.
    """

    def __init__(self, key: bytes, *, associated_data: bytes = b"") -> None:
        if len(key) != KEY_SIZE:
            raise ValueError(f"ChaCha20-Poly1305 keys are {KEY_SIZE} bytes, got {len(key)}")
        self._aead = ChaCha20Poly1305(key)
        self._associated_data = associated_data

    def protect(self, plaintext: bytes) -> bytes:
        """Seal ``plaintext`` under a fresh nonce."""
        nonce = os.urandom(NONCE_SIZE)
        return nonce + self._aead.encrypt(nonce, plaintext, self._associated_data)

    def unprotect(self, protected: bytes) -> bytes:
        """Open one sealed blob, raising ``CryptoError`` if it is short or forged."""
        if len(protected) < NONCE_SIZE + TAG_SIZE:
            raise CryptoError(
                message=f"protected value is {len(protected)} bytes, shorter than nonce and tag"
            )
        nonce, ciphertext = protected[:NONCE_SIZE], protected[NONCE_SIZE:]
        try:
            return self._aead.decrypt(nonce, ciphertext, self._associated_data)
        except InvalidTag as exc:
            raise CryptoError(
                message="protected value failed authentication", cause=exc
            ) from exc
