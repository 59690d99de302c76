"""Normalized event stream: single writer, single reader, strict write order.

One instance carries the events of one chat request. The producer (the
stream pump) calls :meth:`EventStream.write` for each event and
:meth:`EventStream.end` once it is finished; the consumer registers exactly
one reader with :meth:`EventStream.read`, or iterates the stream with
``async for``.

Delivery model
--------------
- Events written before a reader registers are buffered and flushed, in
  order, when it registers. Afterwards each write is dispatched synchronously
  to the reader callback; no locking is involved because the writer and the
  reader share one event loop.
- Exactly one terminal event (``done`` or ``error``) is delivered. Writes
  after it are ignored. ``end()`` without a prior terminal event writes
  ``done`` first.
- ``on_end`` runs once, right after the terminal event was handed to
  ``on_event``.
"""
from __future__ import annotations

import asyncio
import logging
import uuid
from collections import deque
from typing import AsyncIterator, Callable, Deque, Optional

from ..logging import LogContext, log_event
from .events import DoneData, ErrorData, Event, EventKind, EventPayload, MessageData

OnEvent = Callable[[EventKind, EventPayload], None]
OnEnd = Callable[[], None]

_logger = logging.getLogger("relay.stream")


def _default_payload(kind: EventKind) -> EventPayload:
    if kind is EventKind.MESSAGE:
        return MessageData()
    if kind is EventKind.ERROR:
        return ErrorData(error="")
    return DoneData()


class EventStream:
    """Ordered pub/sub primitive for the normalized events of one request."""

    def __init__(self, stream_id: Optional[str] = None) -> None:
        self.stream_id = stream_id or uuid.uuid4().hex[:12]
        self._pending: Deque[Event] = deque()
        self._on_event: Optional[OnEvent] = None
        self._on_end: Optional[OnEnd] = None
        self._terminated = False
        self._ended = False
        self._end_delivered = False
        self._draining = False

    # -- producer side -----------------------------------------------------
    @property
    def terminated(self) -> bool:
        """Whether a terminal event has been written."""
        return self._terminated

    @property
    def ended(self) -> bool:
        """Whether ``end()`` has been called."""
        return self._ended

    def write(self, kind: EventKind | str, payload: Optional[EventPayload] = None) -> None:
        """Append one event. Never blocks; ignored once the stream terminated."""
        kind = EventKind(kind)
        if self._terminated or self._ended:
            log_event(
                _logger,
                "stream.write_after_terminal",
                LogContext(stream_id=self.stream_id),
                level=logging.DEBUG,
                kind=kind.value,
            )
            return
        if kind.is_terminal:
            self._terminated = True
        self._pending.append((kind, payload if payload is not None else _default_payload(kind)))
        self._drain()

    def end(self) -> None:
        """Mark that no further writes will occur; idempotent."""
        if self._ended:
            return
        if not self._terminated:
            self.write(EventKind.DONE, DoneData())
        self._ended = True
        self._drain()

    # -- consumer side -----------------------------------------------------
    def read(self, on_event: OnEvent, on_end: OnEnd) -> None:
        """Register the single reader of this stream.

        Raises:
            RuntimeError: if a reader is already registered.
        """
        if self._on_event is not None:
            raise RuntimeError(f"EventStream {self.stream_id} already has a reader")
        self._on_event = on_event
        self._on_end = on_end
        self._drain()

    def __aiter__(self) -> AsyncIterator[Event]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[Event]:
        queue: "asyncio.Queue[Optional[Event]]" = asyncio.Queue()
        self.read(lambda kind, payload: queue.put_nowait((kind, payload)), lambda: queue.put_nowait(None))
        while True:
            item = await queue.get()
            if item is None:
                return
            yield item

    def _drain(self) -> None:
        if self._on_event is None or self._draining:
            return
        self._draining = True
        try:
            while self._pending:
                kind, payload = self._pending.popleft()
                self._on_event(kind, payload)
            if self._terminated and not self._end_delivered and self._on_end is not None:
                self._end_delivered = True
                self._on_end()
        finally:
            self._draining = False


__all__ = ["EventStream", "OnEvent", "OnEnd"]
