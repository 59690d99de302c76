from __future__ import annotations

from typing import Any, Dict, List

from fastapi import HTTPException
from pydantic import BaseModel, ValidationError

from relay_providers.base.dto import ChatRequestDTO, MessageDTO
from relay_providers.base.models import ChatRequest
from relay_providers.oneapi import OneAPIProvider


class ChatMessageDTO(BaseModel):
    """Represents a single chat message with a role and content.

    Kept loose so that role/content problems surface as 400 responses from
    ``_validate_body_as_dto`` instead of FastAPI's generic 422.
    """

    role: str
    content: Any


class ChatBody(BaseModel):
    """Represents the body of a chat request."""

    model: str
    messages: List[ChatMessageDTO]


def get_provider_dep() -> OneAPIProvider:
    """FastAPI dependency returning a configured OneAPI provider."""
    return OneAPIProvider()


def _validate_body_as_dto(body: ChatBody) -> ChatRequestDTO:
    """Validate inbound chat body strictly into a DTO."""
    return ChatRequestDTO(
        model=body.model,
        messages=[MessageDTO(role=m.role, content=m.content) for m in body.messages],
    )


def build_chat_request(body: ChatBody) -> ChatRequest:
    """Validate ``body`` and convert it to a domain ``ChatRequest``.

    Raises:
        HTTPException: 400 with the pydantic error details on invalid input.
    """
    try:
        dto = _validate_body_as_dto(body)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors(include_url=False, include_context=False)) from e
    return dto.to_request()


async def _handle_chat(body: ChatBody, provider: OneAPIProvider) -> Dict[str, Any]:
    """Run an aggregate chat request.

    Provider failures are reported in-band (``ok: false`` plus ``error``)
    rather than as HTTP errors, matching the adapter's contract.
    """
    request = build_chat_request(body)
    try:
        response = await provider.ask(request)
    finally:
        await provider.aclose()
    return {"ok": response.ok, **response.to_dict()}


__all__ = [
    "ChatMessageDTO",
    "ChatBody",
    "get_provider_dep",
    "_validate_body_as_dto",
    "build_chat_request",
    "_handle_chat",
]
