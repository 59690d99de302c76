"""
FastAPI streaming chat route for the relay service.

Purpose
-------
Expose `/api/chat/stream` as an NDJSON streaming endpoint that reuses the
chat DTOs and the OneAPI adapter without duplicating their logic in the
service layer.

Fallback semantics
------------------
- Validation failures return HTTP 400 before any upstream call is made.
- Upstream failures arrive in-band as a terminal ``error`` line; the HTTP
  status of the streaming response stays 200.

Timeout strategy
----------------
This module does not enforce timeouts directly. The adapter applies the
shared timeout configuration to its HTTP client.
"""
from __future__ import annotations

import json
from typing import AsyncIterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from relay_providers.base.streaming import EventStream, event_to_dict
from relay_providers.oneapi import OneAPIProvider
from relay_providers.service.app_parts.app_core import ChatBody, build_chat_request, get_provider_dep

router = APIRouter()


@router.post("/api/chat/stream")
async def post_chat_stream(
    body: ChatBody,
    provider: OneAPIProvider = Depends(get_provider_dep),
) -> StreamingResponse:
    """Stream normalized chat events as NDJSON.

    Each line has the shape ``{"event": "message", "content": ...}``,
    ``{"event": "error", "error": ...}`` or ``{"event": "done"}`` plus a
    ``finish`` flag that is true only on the last line.
    """
    request = build_chat_request(body)
    stream = EventStream()
    await provider.ask_stream(request, stream)

    async def iter_ndjson() -> AsyncIterator[bytes]:
        finished = False
        try:
            async for kind, payload in stream:
                line = event_to_dict(kind, payload)
                line["finish"] = kind.is_terminal
                yield (json.dumps(line, ensure_ascii=False) + "\n").encode("utf-8")
            finished = True
        finally:
            if finished:
                await provider.aclose()
            else:
                # consumer gone early: stop reading upstream
                await provider.cancel()

    return StreamingResponse(iter_ndjson(), media_type="application/x-ndjson")


__all__ = ["router", "post_chat_stream"]
