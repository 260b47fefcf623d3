"""Logging helpers shared by the VSS client packages.

Library code never configures handlers. It logs through ``get_logger`` so the
correlation fields bound with ``log_context`` ride along on each record.
"""

from .context import bind_context, get_context, log_context
from .logger import ContextAdapter, get_logger

__all__ = [
    "ContextAdapter",
    "bind_context",
    "get_context",
    "get_logger",
    "log_context",
]
