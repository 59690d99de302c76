"""Stream pump: raw body chunks → frames → normalized events.

The pump is the only producer of an :class:`EventStream`. It feeds body
chunks through a :class:`FrameSplitter`, maps each frame with
:func:`map_frame` and writes the resulting events in order.

Termination
-----------
- A terminal frame outcome (malformed record) writes its ``error`` event and
  stops consumption immediately; remaining frames and chunks are discarded.
- Exhaustion of the byte source is the authoritative completion signal: the
  trailing frame is flushed and ``done`` is written. The ``[DONE]`` sentinel
  never completes the stream on its own.
- A transport failure while reading the body becomes a classified ``error``
  event after whatever messages were already delivered.
- Task cancellation closes the stream with ``done`` and re-raises.

In every case ``stream.end()`` runs and a finalize log event is emitted.
"""
from __future__ import annotations

import logging
import time
from typing import AsyncIterable, Iterable, Optional

from ..errors import error_event_text
from ..logging import LogContext, log_event
from .event_stream import EventStream
from .events import ErrorData, EventKind
from .frame_mapping import map_frame
from .frame_splitter import FrameSplitter
from .streaming_finalize import finalize_stream
from .streaming_metrics import StreamMetrics


class _Pump:
    """Per-request pump state: splitter, metrics and timing."""

    def __init__(self, stream: EventStream, logger: logging.Logger, ctx: LogContext) -> None:
        self.stream = stream
        self.logger = logger
        self.ctx = ctx
        self.splitter = FrameSplitter()
        self.metrics = StreamMetrics()
        self.error: Optional[str] = None
        self._t0 = time.perf_counter()

    def _elapsed_ms(self) -> float:
        return (time.perf_counter() - self._t0) * 1000.0

    def dispatch(self, frames: Iterable[str]) -> bool:
        """Publish the events of ``frames``; return True once terminated."""
        for frame in frames:
            self.metrics.frames += 1
            outcome = map_frame(frame)
            if outcome.event is not None:
                kind, payload = outcome.event
                if kind is EventKind.MESSAGE:
                    self._record_message(len(payload.content))
                elif kind is EventKind.ERROR:
                    self.error = payload.error
                    log_event(
                        self.logger,
                        "stream.protocol_error",
                        self.ctx,
                        level=logging.WARNING,
                        reason=outcome.reason,
                        frame=frame[:200],
                    )
                self.stream.write(kind, payload)
            if outcome.terminal:
                return True
        return False

    def fail(self, exc: Exception) -> None:
        self.error = error_event_text(exc)
        self.stream.write(EventKind.ERROR, ErrorData(self.error))

    def finish(self) -> StreamMetrics:
        self.stream.end()
        self.metrics.total_duration_ms = self._elapsed_ms()
        finalize_stream(logger=self.logger, ctx=self.ctx, metrics=self.metrics, error=self.error)
        return self.metrics

    def _record_message(self, delta_len: int) -> None:
        if self.metrics.emitted == 0:
            self.metrics.time_to_first_token_ms = self._elapsed_ms()
        self.metrics.emitted += 1
        log_event(self.logger, "stream.delta", self.ctx, level=logging.DEBUG, delta_len=delta_len)


async def pump_stream(
    chunks: AsyncIterable[bytes],
    stream: EventStream,
    *,
    logger: logging.Logger,
    ctx: Optional[LogContext] = None,
) -> StreamMetrics:
    """Drive ``chunks`` into ``stream`` until termination.

    Never raises for transport or decode failures; those become the single
    terminal ``error`` event. Returns the collected :class:`StreamMetrics`.
    """
    pump = _Pump(stream, logger, ctx or LogContext(stream_id=stream.stream_id))
    try:
        terminated = False
        async for chunk in chunks:
            if pump.dispatch(pump.splitter.feed(chunk)):
                terminated = True
                break
        if not terminated:
            pump.dispatch(pump.splitter.close())
    except Exception as exc:  # converted to the in-band terminal error
        if not stream.terminated:
            pump.fail(exc)
    finally:
        metrics = pump.finish()
    return metrics


__all__ = ["pump_stream"]
