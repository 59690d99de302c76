"""
Relay Base Package

Exports the provider-agnostic contracts, DTOs and the streaming normalization
layer used by the OneAPI adapter:
- Interfaces: normalized provider boundaries
- Models (DTOs): serialization-friendly request/response objects
- Streaming: frame splitting, frame mapping, event stream, aggregate fold
"""

from .interfaces import ChatProvider, SupportsStreaming
from .models import (
    ChatRequest,
    ChatResponse,
    Message,
    ModelType,
    Role,
)
from .timeouts import TimeoutConfig, get_timeout_config
from .streaming import (
    EventKind,
    EventStream,
    FrameSplitter,
    StreamMetrics,
    collect_response,
    finalize_stream,
    fold_events,
    map_frame,
    pump_stream,
)

__all__ = [
    # Models
    "Role",
    "Message",
    "ChatRequest",
    "ChatResponse",
    "ModelType",
    # Interfaces
    "ChatProvider",
    "SupportsStreaming",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
    # Streaming
    "EventKind",
    "EventStream",
    "FrameSplitter",
    "map_frame",
    "fold_events",
    "collect_response",
    "pump_stream",
    "StreamMetrics",
    "finalize_stream",
]
