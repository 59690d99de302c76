"""
Provider-agnostic interfaces (Protocols) for the relay provider layer.

Re-exports Protocols split into single-class modules under
``relay_providers.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import ChatProvider, SupportsStreaming

__all__ = [
    "ChatProvider",
    "SupportsStreaming",
]
