"""Per-request logging context for the relay provider layer."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Fields shared by every log event of one chat request.

    ``stream_id`` identifies one ``EventStream`` instance so that the start,
    delta and finalize events of a single request can be correlated when many
    requests interleave on the same event loop.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    stream_id: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "provider": self.provider,
            "model": self.model,
            "stream_id": self.stream_id,
            "request_id": self.request_id,
        }
        data.update(self.extra)
        return {k: v for k, v in data.items() if v is not None}

    def bind(self, **extra: Any) -> "LogContext":
        """Return a copy with ``extra`` merged over the current extras."""
        return replace(self, extra={**self.extra, **extra})


__all__ = ["LogContext"]
