"""Public VSS SDK interface: transport client, encryption layer and errors."""

from packages.vss_sdk import messages
from packages.vss_sdk.api import DataProtector, VssApi
from packages.vss_sdk.client import (
    DELETE_OBJECT,
    GET_OBJECT,
    LIST_KEY_VERSIONS,
    PUT_OBJECTS,
    VssClient,
)
from packages.vss_sdk.config import VssSdkConfig
from packages.vss_sdk.encryption import VssEncryptingClient
from packages.vss_sdk.errors import (
    CryptoError,
    VssClientError,
    VssSdkError,
    VssTransportError,
)
from packages.vss_sdk.pagination import iter_key_versions
from packages.vss_sdk.protector import AeadDataProtector

__all__ = [
    "AeadDataProtector",
    "CryptoError",
    "DELETE_OBJECT",
    "DataProtector",
    "GET_OBJECT",
    "LIST_KEY_VERSIONS",
    "PUT_OBJECTS",
    "VssApi",
    "VssClient",
    "VssClientError",
    "VssEncryptingClient",
    "VssSdkConfig",
    "VssSdkError",
    "VssTransportError",
    "iter_key_versions",
    "messages",
]
