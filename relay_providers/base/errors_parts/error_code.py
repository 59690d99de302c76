"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the OneAPI adapter and the
streaming pump when a failure is converted into an in-band ``error`` event.
Values are lowercase snake_case and prefix the error text carried by those
events (``"<code>:<message>"``).
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    UNSUPPORTED = "unsupported"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    PROTOCOL = "protocol"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
