"""Request builders for the OneAPI provider.

Purpose:
    Keep the wire shape of a chat-completions call (payload, headers, prompt
    budgets) out of the provider module so the I/O path stays compact.

Notes:
    ``OneAPICommonMixin`` assumes the consumer provides ``_api_key`` (the raw,
    possibly ``|``-separated key pool).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.models import ChatRequest, ModelType
from ..config.defaults import ONEAPI_DEFAULT_TEMPERATURE
from ..config.env import pick_api_key

# Prompt budget per model; unknown models are unsupported (0).
MODEL_BUDGETS: Dict[str, int] = {
    ModelType.GPT3P5_TURBO.value: 2000,
    ModelType.GPT3P5_TURBO_HAINING.value: 3000,
    ModelType.GPT3P5_TURBO_16K.value: 10000,
    ModelType.GPT4.value: 2000,
}

STREAM_HEADERS: Dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "text/event-stream",
    "Cache-Control": "no-cache",
    "Proxy-Connection": "keep-alive",
}


def model_budget(model: ModelType | str | None) -> int:
    if model is None:
        return 0
    key = model.value if isinstance(model, ModelType) else str(model)
    return MODEL_BUDGETS.get(key, 0)


class OneAPICommonMixin:
    """Payload and header builders for OpenAI-compatible chat completions."""

    def _build_payload(self, request: ChatRequest, model: str) -> Dict[str, Any]:
        """Assemble the streaming chat-completions body.

        Messages are forwarded unchanged and in order; temperature is fixed
        and streaming is always requested.
        """
        return {
            "messages": [m.to_dict() for m in request.messages],
            "temperature": ONEAPI_DEFAULT_TEMPERATURE,
            "model": model,
            "stream": True,
        }

    def _select_api_key(self) -> Optional[str]:
        """Pick one key of the configured pool for this request."""
        return pick_api_key(getattr(self, "_api_key", None))

    def _build_headers(self, api_key: str) -> Dict[str, str]:
        """Return the streaming headers plus the bearer ``Authorization``."""
        headers = dict(STREAM_HEADERS)
        headers["Authorization"] = f"Bearer {api_key}"
        return headers


__all__ = ["OneAPICommonMixin", "MODEL_BUDGETS", "STREAM_HEADERS", "model_budget"]
