"""Pieces behind ``base.logging``: the JSON line formatter and the per-request
``LogContext`` carried by every stream lifecycle event."""

from .logging_context import LogContext
from .json_formatter import ISO, JsonFormatter

__all__ = ["LogContext", "JsonFormatter", "ISO"]
