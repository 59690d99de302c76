"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``relay_providers.base.models_parts``.
"""

from .models_parts.message import Message, Role
from .models_parts.chat_request import ChatRequest
from .models_parts.chat_response import ChatResponse
from .models_parts.model_type import ModelType

__all__ = [
    "Message",
    "Role",
    "ChatRequest",
    "ChatResponse",
    "ModelType",
]
