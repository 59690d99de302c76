from __future__ import annotations

import os
from typing import Any, Dict

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from relay_providers.config.defaults import RELAY_SERVICE_CORS_DEFAULT_ORIGINS
from relay_providers.oneapi import OneAPIProvider

from .app_parts.app_core import ChatBody, _handle_chat, get_provider_dep
from .chat_stream import router as chat_stream_router


app = FastAPI(title="Relay Service", version="0.1.0")


# ---------------------------------------------------------------------------
# CORS configuration
# ---------------------------------------------------------------------------

cors_origins_env = os.getenv("RELAY_SERVICE_CORS_ORIGINS", RELAY_SERVICE_CORS_DEFAULT_ORIGINS)
allow_origins = [o.strip() for o in cors_origins_env.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Health endpoint
# ---------------------------------------------------------------------------


@app.get("/api/health")
def health() -> Dict[str, Any]:
    """Check the health status of the service."""
    return {"ok": True}


# ---------------------------------------------------------------------------
# Chat endpoints
# ---------------------------------------------------------------------------


@app.post("/api/chat")
async def post_chat(body: ChatBody, provider: OneAPIProvider = Depends(get_provider_dep)) -> Dict[str, Any]:
    """Process a chat request and return the aggregated response.

    Returns ``{"ok", "content"}`` plus ``"error"`` when the upstream stream
    terminated with an error.
    """
    return await _handle_chat(body, provider)


app.include_router(chat_stream_router)


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def get_app() -> FastAPI:
    """Return the FastAPI application instance."""
    return app
