"""Streaming normalization package.

Frame splitting, frame → event mapping, the normalized event stream, the
aggregate fold and the pump that glues them to a live HTTP body.
"""

from .events import DoneData, ErrorData, Event, EventKind, EventPayload, MessageData, event_to_dict
from .frame_splitter import FrameSplitter, SplitterState, iter_frames
from .frame_mapping import FrameOutcome, map_frame
from .event_stream import EventStream
from .aggregate import accumulate_response, collect_response, fold_events
from .streaming_metrics import StreamMetrics
from .streaming_finalize import finalize_stream
from .pump import pump_stream

__all__ = [
    "EventKind",
    "MessageData",
    "ErrorData",
    "DoneData",
    "Event",
    "EventPayload",
    "event_to_dict",
    "FrameSplitter",
    "SplitterState",
    "iter_frames",
    "FrameOutcome",
    "map_frame",
    "EventStream",
    "fold_events",
    "accumulate_response",
    "collect_response",
    "StreamMetrics",
    "finalize_stream",
    "pump_stream",
]
