"""
ChatResponse DTO: the aggregate result of one chat request.

``content`` is the in-order concatenation of every streamed fragment seen
before termination. ``error`` is populated iff the stream terminated with an
error; the partial ``content`` is kept in that case.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ChatResponse:
    """Provider-agnostic aggregated response of a chat invocation."""

    content: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Return ``{content}`` or ``{content, error}``."""
        data: Dict[str, Any] = {"content": self.content}
        if self.error is not None:
            data["error"] = self.error
        return data


__all__ = [
    "ChatResponse",
]
