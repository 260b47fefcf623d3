"""Typed configuration models for VSS client runtime settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "vss" / "vss.yaml"


class ClientSettings(BaseModel):
    """Connection settings for the VSS HTTP transport."""

    endpoint: str = "http://127.0.0.1:8080/vss"
    timeout_seconds: float = Field(default=30.0, gt=0)
    headers: dict[str, str] = Field(default_factory=dict)
    follow_redirects: bool = False

    @field_validator("endpoint")
    @classmethod
    def _require_http_endpoint(cls, value: str) -> str:
        """Reject blank or non-HTTP endpoints early."""
        stripped = value.strip()
        if not stripped.startswith(("http://", "https://")):
            raise ValueError(f"client.endpoint must be an http(s) URL: {value!r}")
        return stripped


class VssSettings(BaseModel):
    """Root runtime settings resolved from cli/env/yaml/defaults sources."""

    client: ClientSettings = Field(default_factory=ClientSettings)
