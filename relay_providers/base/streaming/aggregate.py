"""Aggregate consumption of an :class:`EventStream`.

``fold_events`` is the generic combinator: it registers a reader that folds
every event into an accumulator and resolves a future once the stream ends.
``collect_response`` is the fold that builds a :class:`ChatResponse`.
"""
from __future__ import annotations

import asyncio
from typing import Callable, TypeVar

from ..models import ChatResponse
from .event_stream import EventStream
from .events import ErrorData, EventKind, EventPayload, MessageData

T = TypeVar("T")

Reducer = Callable[[T, EventKind, EventPayload], T]


def fold_events(stream: EventStream, initial: T, reducer: Reducer) -> "asyncio.Future[T]":
    """Fold the events of ``stream`` into a single value.

    Must be called from a running event loop. The returned future resolves to
    the accumulator after the terminal event, or fails with the exception
    raised by ``reducer`` (later events are then ignored).
    """
    future: "asyncio.Future[T]" = asyncio.get_running_loop().create_future()
    acc = initial

    def on_event(kind: EventKind, payload: EventPayload) -> None:
        nonlocal acc
        if future.done():
            return
        try:
            acc = reducer(acc, kind, payload)
        except Exception as exc:  # surfaced to the awaiting caller
            future.set_exception(exc)

    def on_end() -> None:
        if not future.done():
            future.set_result(acc)

    stream.read(on_event, on_end)
    return future


def accumulate_response(response: ChatResponse, kind: EventKind, payload: EventPayload) -> ChatResponse:
    """Reducer appending message content and recording the error text."""
    if kind is EventKind.MESSAGE and isinstance(payload, MessageData):
        response.content += payload.content or ""
    elif kind is EventKind.ERROR and isinstance(payload, ErrorData):
        response.error = payload.error
    return response


def collect_response(stream: EventStream) -> "asyncio.Future[ChatResponse]":
    """Resolve to the aggregated :class:`ChatResponse` of ``stream``."""
    return fold_events(stream, ChatResponse(), accumulate_response)


__all__ = ["fold_events", "accumulate_response", "collect_response", "Reducer"]
