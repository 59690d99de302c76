"""
Structured provider error exception type.

Wraps transport or configuration failures with a normalized `ErrorCode` so the
adapter can render them into a single terminal ``error`` event.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"oneapi"``).
        model: Optional model name associated with the failure.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"

    def to_event_text(self) -> str:
        """Render the ``"<code>:<message>"`` text used by terminal error events."""
        return f"{self.code.value}:{self.message[:260]}"


__all__ = ["ProviderError"]
