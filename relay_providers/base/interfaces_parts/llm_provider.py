"""ChatProvider Protocol (single-class module).

Defines the aggregate chat contract for provider adapters.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import ChatRequest, ChatResponse


@runtime_checkable
class ChatProvider(Protocol):
    """Minimal interface for chat providers.

    Implementations map ``ChatRequest`` to their wire format and return a
    normalized ``ChatResponse``. Provider failures are reported through
    ``ChatResponse.error``; exceptions are reserved for programmer errors.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"oneapi"``."""
        ...

    def support(self, model: str) -> int:
        """Return the prompt budget for ``model``; ``0`` when unsupported."""
        ...

    async def ask(self, request: ChatRequest) -> ChatResponse:
        """Execute a request and return the aggregated response."""
        ...
