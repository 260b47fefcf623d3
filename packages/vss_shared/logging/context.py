"""Per-request correlation fields for VSS client log lines.

Fields live in a ``ContextVar`` so each asyncio task sees its own copy and
concurrent calls never leak an operation name or store id into each other's
log lines.
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from types import TracebackType
from typing import Mapping

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar("vss_log_context", default={})


def get_context() -> dict[str, str]:
    """Return a shallow copy of the fields bound in this task."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind stringified values into the current context, skipping ``None``."""
    current = _LOG_CONTEXT.get().copy()
    current.update({key: str(value) for key, value in values.items() if value is not None})
    _LOG_CONTEXT.set(current)


class log_context:
    """Bind fields for the duration of a ``with`` block.

    Anything bound inside the block, including later ``bind_context`` calls,
    is discarded on exit. Exceptions leaving the block are not touched.
    """

    def __init__(self, values: Mapping[str, object]) -> None:
        self._values = dict(values)
        self._token: Token[dict[str, str]] | None = None

    def __enter__(self) -> None:
        self._token = _LOG_CONTEXT.set(_LOG_CONTEXT.get().copy())
        bind_context(**self._values)

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._token is not None:
            _LOG_CONTEXT.reset(self._token)
            self._token = None
