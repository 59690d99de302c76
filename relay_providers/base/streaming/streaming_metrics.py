"""Streaming metrics collected by the pump for one request."""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class StreamMetrics:
    """Counters and timings of one pumped stream.

    Attributes:
        frames: Frames produced by the splitter (blank frames excluded).
        emitted: ``message`` events written to the event stream.
        time_to_first_token_ms: Delay from pump start to the first message.
        total_duration_ms: Delay from pump start to termination.
    """

    frames: int = 0
    emitted: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["StreamMetrics"]
