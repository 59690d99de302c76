"""Normalized event vocabulary shared by the pump, the event stream and readers.

Every event is a ``(EventKind, payload)`` pair: ``message`` carries a content
fragment, ``error`` a terminal failure description, ``done`` nothing.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class EventKind(str, Enum):
    """Tag of a normalized event."""

    MESSAGE = "message"
    ERROR = "error"
    DONE = "done"

    @property
    def is_terminal(self) -> bool:
        return self is not EventKind.MESSAGE


@dataclass(frozen=True)
class MessageData:
    """Incremental content fragment."""

    content: str = ""


@dataclass(frozen=True)
class ErrorData:
    """Terminal failure description."""

    error: str


@dataclass(frozen=True)
class DoneData:
    """Stream completion marker."""


EventPayload = Union[MessageData, ErrorData, DoneData]
Event = Tuple[EventKind, EventPayload]


def event_to_dict(kind: EventKind, payload: EventPayload) -> dict:
    """Render an event as ``{"event": kind, ...payload fields}``."""
    if isinstance(payload, MessageData):
        return {"event": kind.value, "content": payload.content}
    if isinstance(payload, ErrorData):
        return {"event": kind.value, "error": payload.error}
    return {"event": kind.value}


__all__ = [
    "EventKind",
    "MessageData",
    "ErrorData",
    "DoneData",
    "EventPayload",
    "Event",
    "event_to_dict",
]
