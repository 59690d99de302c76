"""DTO validation package for the relay service."""

from .chat import Role, MessageDTO, ChatRequestDTO

__all__ = [
    "Role",
    "MessageDTO",
    "ChatRequestDTO",
]
