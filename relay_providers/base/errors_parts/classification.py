"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, ``httpx`` transport error mapping,
status-to-code mapping, and message-based heuristics as a fallback.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional, Tuple

import httpx

from .error_code import ErrorCode
from .provider_error import ProviderError


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code`` (covers ``httpx.HTTPStatusError``)
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    # httpx.HTTPStatusError.response raises when unset on RequestError
    if isinstance(exc, httpx.RequestError):
        return None
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def _classify_transport(exc: Exception) -> Optional[ErrorCode]:
    """Map ``httpx`` transport exceptions raised before or during a body read."""
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCode.TIMEOUT
    if isinstance(exc, httpx.ConnectError):
        return ErrorCode.UNAVAILABLE
    if isinstance(exc, (httpx.ReadError, httpx.RemoteProtocolError, httpx.WriteError)):
        return ErrorCode.TRANSIENT
    if isinstance(exc, httpx.ProxyError):
        return ErrorCode.UNAVAILABLE
    if isinstance(exc, httpx.UnsupportedProtocol):
        return ErrorCode.VALIDATION
    return None


# Ordered: the first group whose substrings all occur in the message wins.
_MESSAGE_PATTERNS: Tuple[Tuple[ErrorCode, Tuple[str, ...]], ...] = (
    (ErrorCode.RATE_LIMIT, ("rate", "limit")),
    (ErrorCode.RATE_LIMIT, ("insufficient_quota",)),
    (ErrorCode.TIMEOUT, ("timeout",)),
    (ErrorCode.TIMEOUT, ("timed out",)),
    (ErrorCode.AUTH, ("api key",)),
    (ErrorCode.AUTH, ("unauthorized",)),
    (ErrorCode.AUTH, ("forbidden",)),
    (ErrorCode.UNSUPPORTED, ("unsupported",)),
    (ErrorCode.UNSUPPORTED, ("not supported",)),
    (ErrorCode.NOT_FOUND, ("model_not_found",)),
    (ErrorCode.NOT_FOUND, ("does not exist",)),
    (ErrorCode.UNAVAILABLE, ("unavailable",)),
    (ErrorCode.UNAVAILABLE, ("connection refused",)),
    (ErrorCode.UNAVAILABLE, ("name or service not known",)),
    (ErrorCode.VALIDATION, ("context_length_exceeded",)),
    (ErrorCode.VALIDATION, ("invalid",)),
    (ErrorCode.SERVER_ERROR, ("server error",)),
    (ErrorCode.SERVER_ERROR, ("bad gateway",)),
)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    """Substring heuristic mapping for exceptions without status or type info."""
    for code, patterns in _MESSAGE_PATTERNS:
        if all(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (sync/async).
        3. HTTP status mapping.
        4. ``httpx`` transport error types.
        5. Substring heuristics.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None and status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    code = _classify_transport(exc)
    if code is not None:
        return code
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


def error_event_text(exc: Exception) -> str:
    """Return the ``"<code>:<message>"`` text for a terminal error event."""
    if isinstance(exc, ProviderError):
        return exc.to_event_text()
    message = str(exc) or exc.__class__.__name__
    return f"{classify_exception(exc).value}:{message[:260]}"


__all__ = [
    "classify_exception",
    "error_event_text",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
