"""Built-in default configuration values for VSS clients.

These defaults are the final fallback in the configuration cascade:
CLI params > ENV vars > config file > built-in defaults.
"""

from __future__ import annotations

from typing import Any

BUILTIN_DEFAULTS: dict[str, Any] = {
    "client": {
        "endpoint": "http://127.0.0.1:8080/vss",
        "timeout_seconds": 30.0,
        "headers": {},
        "follow_redirects": False,
    },
}
