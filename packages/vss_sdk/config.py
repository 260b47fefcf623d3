"""Runtime configuration primitives for VSS SDK clients."""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Mapping

from packages.vss_shared.config import VssSettings

DEFAULT_ENDPOINT = "http://127.0.0.1:8080/vss"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class VssSdkConfig:
    """Connection defaults for one VSS SDK client."""

    endpoint: str = DEFAULT_ENDPOINT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    headers: Mapping[str, str] = field(default_factory=dict)
    follow_redirects: bool = False

    @classmethod
    def from_settings(cls, settings: VssSettings) -> VssSdkConfig:
        """Build SDK config from validated runtime settings."""
        client = settings.client
        return cls(
            endpoint=client.endpoint,
            timeout_seconds=client.timeout_seconds,
            headers=dict(client.headers),
            follow_redirects=client.follow_redirects,
        )


def resolve_endpoint(value: str | None = None) -> str:
    """Resolve one base endpoint from explicit value or process environment."""
    if value is not None and value.strip() != "":
        return value.strip()
    env_value = os.getenv("VSS_CLIENT__ENDPOINT", "").strip()
    return env_value if env_value != "" else DEFAULT_ENDPOINT


def endpoint_base_url(endpoint: str) -> str:
    """Normalize ``endpoint`` so operation paths append below its path."""
    # Plain RFC 3986 resolution would replace the last path segment instead.
    return endpoint if endpoint.endswith("/") else f"{endpoint}/"
