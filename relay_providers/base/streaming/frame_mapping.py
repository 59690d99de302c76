"""Pure mapping from one provider frame to at most one normalized event.

Rules, applied in order:

1. Surrounding whitespace and a leading ``data:`` field prefix are stripped.
2. A blank frame and the ``[DONE]`` sentinel produce nothing. The sentinel is
   advisory: completion is signalled by the close of the byte stream.
3. The text is decoded as JSON; undecodable text degrades to ``{}``.
4. A record without a non-empty ``choices`` list yields a terminal
   ``error("not found data.choices")``.
5. ``choices[0].finish_reason == "stop"`` produces nothing.
6. Otherwise ``message(choices[0].delta.content or "")``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..constants import (
    DATA_PREFIX,
    DONE_SENTINEL,
    FINISH_REASON_STOP,
    MISSING_CHOICES_ERROR,
)
from ..utils import parse_json
from .events import ErrorData, Event, EventKind, MessageData


@dataclass(frozen=True)
class FrameOutcome:
    """Result of mapping one frame.

    Attributes:
        event: Event to publish, or ``None`` when the frame is discarded.
        terminal: True when no further frame may be processed.
        reason: Short tag describing a discard or failure, for logging.
    """

    event: Optional[Event] = None
    terminal: bool = False
    reason: Optional[str] = None


_SKIP_EMPTY = FrameOutcome(reason="empty")
_SKIP_SENTINEL = FrameOutcome(reason="done_sentinel")
_SKIP_STOP = FrameOutcome(reason="finish_stop")


def strip_frame(frame: str) -> str:
    """Return the frame payload without whitespace and ``data:`` prefix."""
    text = frame.strip()
    if text.startswith(DATA_PREFIX):
        text = text[len(DATA_PREFIX):].strip()
    return text


def _first_choice(record: Any) -> Optional[dict]:
    choices = record.get("choices") if isinstance(record, dict) else None
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    return first if isinstance(first, dict) else {}


def map_frame(frame: str) -> FrameOutcome:
    """Map a raw frame to a :class:`FrameOutcome`."""
    text = strip_frame(frame)
    if not text:
        return _SKIP_EMPTY
    if text == DONE_SENTINEL:
        return _SKIP_SENTINEL

    record = parse_json(text, {})
    choice = _first_choice(record)
    if choice is None:
        reason = "missing_choices" if isinstance(record, dict) and record else "decode_error"
        return FrameOutcome(
            event=(EventKind.ERROR, ErrorData(MISSING_CHOICES_ERROR)),
            terminal=True,
            reason=reason,
        )
    if choice.get("finish_reason") == FINISH_REASON_STOP:
        return _SKIP_STOP

    delta = choice.get("delta")
    content = delta.get("content") if isinstance(delta, dict) else None
    return FrameOutcome(event=(EventKind.MESSAGE, MessageData(content if isinstance(content, str) else "")))


__all__ = ["FrameOutcome", "map_frame", "strip_frame"]
