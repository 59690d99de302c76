"""Shared builders for offline streaming tests."""

from __future__ import annotations

import json
from typing import AsyncIterator, Iterable, List, Optional

import httpx


def sse_frame(record: dict | str) -> bytes:
    """Encode one ``data: ...`` record followed by a blank line."""
    text = record if isinstance(record, str) else json.dumps(record)
    return f"data: {text}\n\n".encode("utf-8")


def delta(content: Optional[str], finish_reason: Optional[str] = None) -> dict:
    return {"choices": [{"delta": {} if content is None else {"content": content}, "finish_reason": finish_reason}]}


class ChunkedBody(httpx.AsyncByteStream):
    """Async response body yielding preset chunks, optionally failing afterwards."""

    def __init__(self, chunks: Iterable[bytes], error: Optional[Exception] = None) -> None:
        self._chunks = list(chunks)
        self._error = error
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error

    async def aclose(self) -> None:
        self.closed = True


async def aiter_chunks(chunks: Iterable[bytes]) -> AsyncIterator[bytes]:
    for chunk in chunks:
        yield chunk


def split_every(data: bytes, size: int) -> List[bytes]:
    return [data[i:i + size] for i in range(0, len(data), size)]


def streaming_transport(
    body: ChunkedBody,
    *,
    status_code: int = 200,
    seen: Optional[List[httpx.Request]] = None,
) -> httpx.MockTransport:
    """MockTransport answering every request with ``body``."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(
            status_code,
            headers={"Content-Type": "text/event-stream"},
            stream=body,
        )

    return httpx.MockTransport(handler)


def failing_transport(exc: Exception) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return httpx.MockTransport(handler)
