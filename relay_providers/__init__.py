"""relay_providers package

Adapter for an OpenAI-compatible ("OneAPI") chat-completions endpoint with a
streaming normalization layer.

Purpose:
    Provide a minimal, stable API for external consumption (packaging is
    configured via the repository root ``pyproject.toml``). Callers create a
    provider and either await ``ask`` for the aggregated reply or pass an
    ``EventStream`` to ``ask_stream`` and consume normalized events.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`
    - Provider: :class:`OneAPIProvider`, :func:`create`
    - Models: :class:`ChatRequest`, :class:`ChatResponse`, :class:`Message`,
      :class:`ModelType`
    - Streaming: :class:`EventStream`, :class:`EventKind`
"""

from .base.errors import (
    ProviderError,
    ErrorCode,
)
from .base.models import ChatRequest, ChatResponse, Message, ModelType
from .base.streaming import EventKind, EventStream
from .oneapi import OneAPIProvider

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ProviderError",
    "ErrorCode",
    # Provider
    "OneAPIProvider",
    "create",
    # Models
    "ChatRequest",
    "ChatResponse",
    "Message",
    "ModelType",
    # Streaming
    "EventStream",
    "EventKind",
]


def create(provider_name: str = "oneapi", **kwargs) -> OneAPIProvider:
    """Instantiate the adapter registered under ``provider_name``.

    Raises
    ------
    ProviderError
        If ``provider_name`` does not name a known provider.
    """
    if (provider_name or "").strip().lower() != "oneapi":
        raise ProviderError(
            code=ErrorCode.UNSUPPORTED,
            message=f"Unknown provider '{provider_name}'",
            provider=provider_name or "unknown",
        )
    return OneAPIProvider(**kwargs)
