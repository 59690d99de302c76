"""Per-class modules backing ``relay_providers.base.models``."""

from .message import Message, Role
from .chat_request import ChatRequest
from .chat_response import ChatResponse
from .model_type import ModelType

__all__ = ["Message", "Role", "ChatRequest", "ChatResponse", "ModelType"]
