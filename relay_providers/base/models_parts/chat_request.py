"""
ChatRequest DTO for provider-agnostic chat invocations.

The request carries the ordered message history and the target model. Sampling
parameters are fixed by the adapter rather than chosen per request.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .message import Message


@dataclass
class ChatRequest:
    """Normalized chat request handed to ``ask`` / ``ask_stream``.

    Attributes:
        model: Target model identifier.
        messages: Ordered list of chat `Message` instances.
    """

    model: str
    messages: List[Message] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the request."""
        return {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
        }


__all__ = [
    "ChatRequest",
]
