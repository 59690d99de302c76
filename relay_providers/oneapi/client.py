"""OneAPI provider adapter (OpenAI-compatible chat completions over HTTP).

Summary:
- Every request is a streaming ``POST <base_url>/v1/chat/completions``.
- ``ask_stream`` returns once the response status line and headers arrived;
  the body is pumped into the caller's ``EventStream`` by a background task.
- ``ask`` is the aggregate form: it folds the same event stream into a
  ``ChatResponse``.

Errors & Observability:
- No exception escapes ``ask_stream``: establishment failures (connect, DNS,
  TLS, timeout, non-2xx status, missing key) become a single ``error`` event
  followed by ``end()``. Cancellation while connecting closes the
  connection, ends the stream and propagates.
- Emits a normalized ``stream.start`` event; the pump emits the finalize
  event with ``emitted_count``, ``time_to_first_token_ms`` and
  ``total_duration_ms``.

This module orchestrates I/O only; framing and mapping live in
``base.streaming``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional, Tuple

import httpx

from ..base.constants import MISSING_API_KEY_ERROR
from ..base.errors import ErrorCode, ProviderError, error_event_text
from ..base.http import create_async_client
from ..base.interfaces import ChatProvider, SupportsStreaming
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..base.models import ChatRequest, ChatResponse, ModelType
from ..base.streaming import ErrorData, EventKind, EventStream, collect_response, pump_stream
from ..config import get_provider_config
from ..config.defaults import (
    ONEAPI_CHAT_COMPLETIONS_PATH,
    ONEAPI_DEFAULT_BASE_URL,
    ONEAPI_DEFAULT_MODEL,
)
from .helpers import OneAPICommonMixin, model_budget


class OneAPIProvider(OneAPICommonMixin, ChatProvider, SupportsStreaming):
    """OneAPI chat provider.

    Parameters:
        api_key: Explicit API key (or ``|``-separated key pool); resolved from
            provider config when omitted.
        base_url: API base URL without the ``/v1/...`` path; resolved from
            provider config when omitted.
        proxy: Optional proxy URL applied to outbound requests.
        transport: Optional ``httpx`` transport, mainly ``httpx.MockTransport``
            in tests.

    Side effects:
        - Reads provider-level configuration via ``get_provider_config("oneapi")``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        proxy: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        model: Optional[str] = None,
    ) -> None:
        cfg = get_provider_config("oneapi")
        self._api_key = api_key or cfg.get("api_key")
        self._base_url = (base_url or cfg.get("base_url") or ONEAPI_DEFAULT_BASE_URL).rstrip("/")
        self._proxy = proxy or cfg.get("proxy") or None
        self._model = model or cfg.get("model", ONEAPI_DEFAULT_MODEL)
        self._transport = transport
        self._logger = get_logger("relay.oneapi")
        self._pumps: Dict["asyncio.Task[None]", Tuple[httpx.AsyncClient, httpx.Response, EventStream]] = {}

    @property
    def provider_name(self) -> str:
        return "oneapi"

    @property
    def base_url(self) -> str:
        return self._base_url

    def default_model(self) -> Optional[str]:
        return self._model

    def support(self, model: ModelType | str) -> int:
        """Return the prompt budget for ``model``; 0 means unsupported."""
        return model_budget(model)

    # ---- Aggregate ----
    async def ask(self, request: ChatRequest) -> ChatResponse:
        """Run one chat request and return the aggregated response.

        Never raises for transport or protocol failures; those are reported
        through ``ChatResponse.error`` with the partial content kept.
        """
        stream = EventStream()
        result = collect_response(stream)
        await self.ask_stream(request, stream)
        return await result

    # ---- Streaming ----
    async def ask_stream(self, request: ChatRequest, stream: EventStream) -> None:
        """Start one streaming request feeding ``stream``.

        Returns after connection establishment. Body consumption continues
        in a background task which ends the stream on every exit path.
        """
        model = request.model or self._model
        ctx = LogContext(provider=self.provider_name, model=model, stream_id=stream.stream_id)

        api_key = self._select_api_key()
        if not api_key:
            self._fail(
                stream,
                ctx,
                ProviderError(
                    code=ErrorCode.AUTH,
                    message=MISSING_API_KEY_ERROR,
                    provider=self.provider_name,
                    model=model,
                ),
            )
            return

        self._log_stream_start(ctx, request)
        client: Optional[httpx.AsyncClient] = None
        response: Optional[httpx.Response] = None
        try:
            client = create_async_client(
                self._base_url,
                headers=self._build_headers(api_key),
                proxy=self._proxy,
                transport=self._transport,
            )
            http_request = client.build_request(
                "POST",
                ONEAPI_CHAT_COMPLETIONS_PATH,
                json=self._build_payload(request, model),
            )
            response = await client.send(http_request, stream=True)
            response.raise_for_status()
        except Exception as exc:  # establishment failure → one error event
            if response is not None:
                await response.aclose()
            if client is not None:
                await client.aclose()
            self._fail(stream, ctx, exc)
            return
        except asyncio.CancelledError:
            if response is not None:
                await response.aclose()
            if client is not None:
                await client.aclose()
            log_event(self._logger, "stream.establish_cancelled", ctx, level=logging.INFO)
            stream.end()
            raise

        task = asyncio.create_task(self._pump(client, response, stream, ctx))
        self._pumps[task] = (client, response, stream)
        task.add_done_callback(lambda t: self._pumps.pop(t, None))

    async def _pump(
        self,
        client: httpx.AsyncClient,
        response: httpx.Response,
        stream: EventStream,
        ctx: LogContext,
    ) -> None:
        try:
            await pump_stream(response.aiter_bytes(), stream, logger=self._logger, ctx=ctx)
        finally:
            await response.aclose()
            await client.aclose()

    async def aclose(self) -> None:
        """Wait for in-flight body pumps to finish."""
        if self._pumps:
            await asyncio.gather(*list(self._pumps), return_exceptions=True)

    async def cancel(self) -> None:
        """Stop in-flight body pumps; each ends its stream and closes its response."""
        pending = list(self._pumps.items())
        for task, _ in pending:
            task.cancel()
        if not pending:
            return
        await asyncio.gather(*(task for task, _ in pending), return_exceptions=True)
        # a task cancelled before its first step never runs its own cleanup
        for _, (client, response, stream) in pending:
            await response.aclose()
            await client.aclose()
            stream.end()

    # ---- Logging helpers ----
    def _log_stream_start(self, ctx: LogContext, request: ChatRequest) -> None:
        normalized_log_event(
            self._logger,
            "stream.start",
            ctx,
            phase="start",
            attempt=None,
            emitted=None,
            tokens=None,
            messages=len(request.messages),
            base_url=self._base_url,
            proxied=bool(self._proxy),
        )

    def _fail(self, stream: EventStream, ctx: LogContext, exc: Exception) -> None:
        text = error_event_text(exc)
        log_event(self._logger, "stream.establish_error", ctx, level=logging.WARNING, error=text)
        stream.write(EventKind.ERROR, ErrorData(text))
        stream.end()


__all__ = ["OneAPIProvider"]
