"""
Pydantic DTOs and validators for inbound chat requests.

Purpose
-------
This module defines strict request DTOs using Pydantic to validate inbound
chat payloads before they reach the OneAPI adapter. It enforces roles and
content constraints to catch issues early.

External dependencies: Pydantic only (no network/CLI calls). No timeouts.

Fallback semantics: Not applicable. Validation either succeeds or raises a
`pydantic.ValidationError`. Callers should handle this at the controller edge
and return an appropriate 4xx response when used in an HTTP server context.

Design
------
- Keep DTOs minimal and framework-agnostic.
- Align with the dataclasses in `relay_providers.base.models` but add validation.
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, model_validator

from ..models import ChatRequest, Message


Role = Literal["system", "user", "assistant", "tool"]


class MessageDTO(BaseModel):
    """Represents one ``{role, content}`` chat turn.

    Rules:
        - `role` must be one of Role.
        - `user` messages must carry non-blank content; other roles may be
          empty (e.g. an assistant turn that produced no text).
    """

    role: Role
    content: str

    @model_validator(mode="after")
    def _validate_content(self) -> "MessageDTO":
        if self.role == "user" and not self.content.strip():
            raise ValueError("user message content must be non-empty")
        return self


class ChatRequestDTO(BaseModel):
    """Validated chat request.

    Parameters:
        model: Target model identifier (non-empty).
        messages: Ordered, non-empty list of MessageDTO.

    Raises:
        ValidationError: On invalid roles, blank user content or an empty
        message list.
    """

    model: str = Field(..., min_length=1)
    messages: List[MessageDTO] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _validate_sequence(self) -> "ChatRequestDTO":
        # Basic sanity: first message cannot be from assistant/tool.
        if self.messages and self.messages[0].role not in ("system", "user"):
            raise ValueError("first message must be from 'system' or 'user'")
        return self

    def to_request(self) -> ChatRequest:
        """Convert into the domain ``ChatRequest`` preserving message order."""
        return ChatRequest(
            model=self.model,
            messages=[Message(role=m.role, content=m.content) for m in self.messages],
        )


__all__ = [
    "Role",
    "MessageDTO",
    "ChatRequestDTO",
]
