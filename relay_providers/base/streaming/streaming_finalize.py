"""Finalize helper: consolidated structured logging of a finished stream."""
from __future__ import annotations

import logging
from typing import Optional

from ..logging import LogContext, normalized_log_event
from .streaming_metrics import StreamMetrics


def finalize_stream(
    *,
    logger: logging.Logger,
    ctx: LogContext,
    metrics: StreamMetrics,
    error: Optional[str] = None,
) -> None:
    """Emit the ``stream.adapter.end`` / ``stream.adapter.error`` event."""
    error_code: Optional[str] = None
    if error and ":" in error:
        error_code = error.split(":", 1)[0].strip() or None
    elif error:
        error_code = "protocol"

    normalized_log_event(
        logger,
        "stream.adapter.end" if error is None else "stream.adapter.error",
        ctx,
        phase="finalize",
        attempt=None,
        emitted=metrics.emitted > 0,
        tokens=None,
        error_code=error_code,
        level=logging.INFO if error is None else logging.WARNING,
        emitted_count=metrics.emitted,
        frames=metrics.frames,
        time_to_first_token_ms=metrics.time_to_first_token_ms,
        total_duration_ms=metrics.total_duration_ms,
        error=error,
    )


__all__ = ["finalize_stream"]
