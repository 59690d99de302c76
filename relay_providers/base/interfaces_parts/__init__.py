"""Interfaces (Protocols) split into single-class modules."""

from .llm_provider import ChatProvider
from .supports_streaming import SupportsStreaming

__all__ = [
    "ChatProvider",
    "SupportsStreaming",
]
