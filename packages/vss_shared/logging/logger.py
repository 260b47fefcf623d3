"""Loggers that stamp bound correlation fields onto every record."""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

from .context import get_context


class ContextAdapter(logging.LoggerAdapter):
    """Copy the current log context into each record's ``extra`` attributes.

    Handlers and formatters configured by the embedding application can then
    read ``record.operation``, ``record.store_id`` and the other fields.
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = get_context()
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> ContextAdapter:
    """Return a context-aware adapter over ``logging.getLogger(name)``."""
    return ContextAdapter(logging.getLogger(name), {})
