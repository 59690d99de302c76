"""SupportsStreaming Protocol (single-class module).

Capability marker for providers that populate an ``EventStream``
incrementally.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import ChatRequest
from ..streaming import EventStream


@runtime_checkable
class SupportsStreaming(Protocol):
    """Capability marker for providers that stream normalized events.

    ``ask_stream`` returns once the pipeline is wired; events then arrive on
    ``stream`` as zero or more ``message`` events followed by exactly one
    terminal ``done`` or ``error`` event.
    """

    async def ask_stream(self, request: ChatRequest, stream: EventStream) -> None:  # pragma: no cover - interface
        """Populate ``stream`` with the normalized events of ``request``."""
        ...
