"""Public API for shared VSS configuration utilities."""

from .loader import load_config, load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ClientSettings,
    VssSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ClientSettings",
    "VssSettings",
    "load_config",
    "load_settings",
]
