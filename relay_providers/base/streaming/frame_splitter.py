"""Frame splitter for the incremental-completion wire format.

Turns an unbounded sequence of raw byte chunks into delimiter-bounded frames.
The delimiter is a blank line tolerant of CRLF or LF (``\\r?\\n\\r?\\n``).

State machine
-------------
``AWAITING_DELIMITER``
    Bytes accumulate in the tail buffer; each complete delimiter match turns
    the bytes before it into a frame.
``TERMINATED``
    Reached through :meth:`FrameSplitter.close`. The undelimited tail is
    emitted as a last frame (unless blank) and further input is rejected.

Splitting happens on bytes and each frame is decoded on its own, so a
multi-byte UTF-8 sequence cut by a chunk boundary is never corrupted. The
buffer only ever holds the undelimited tail; frames are handed out as soon as
their delimiter arrives, never read ahead of the transport.
"""
from __future__ import annotations

from enum import Enum
from typing import AsyncIterable, AsyncIterator, List, Pattern

from ..constants import FRAME_DELIMITER


class SplitterState(str, Enum):
    AWAITING_DELIMITER = "awaiting_delimiter"
    TERMINATED = "terminated"


class FrameSplitter:
    """Incremental splitter holding only the undelimited tail of the input."""

    def __init__(self, delimiter: Pattern[bytes] = FRAME_DELIMITER, encoding: str = "utf-8") -> None:
        self._delimiter = delimiter
        self._encoding = encoding
        self._buffer = b""
        self._state = SplitterState.AWAITING_DELIMITER

    @property
    def state(self) -> SplitterState:
        return self._state

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet followed by a delimiter."""
        return len(self._buffer)

    def feed(self, chunk: bytes) -> List[str]:
        """Append ``chunk`` and return every frame completed by it, in order.

        Raises:
            ValueError: if the splitter was already closed.
        """
        if self._state is SplitterState.TERMINATED:
            raise ValueError("cannot feed a closed FrameSplitter")
        if not chunk:
            return []
        self._buffer += chunk
        frames: List[str] = []
        start = 0
        for match in self._delimiter.finditer(self._buffer):
            self._append_frame(frames, self._buffer[start:match.start()])
            start = match.end()
        if start:
            self._buffer = self._buffer[start:]
        return frames

    def close(self) -> List[str]:
        """Signal end-of-stream and return the trailing frame, if any."""
        if self._state is SplitterState.TERMINATED:
            return []
        frames: List[str] = []
        self._append_frame(frames, self._buffer)
        self._buffer = b""
        self._state = SplitterState.TERMINATED
        return frames

    def _append_frame(self, frames: List[str], raw: bytes) -> None:
        text = raw.decode(self._encoding, errors="replace")
        if text.strip():
            frames.append(text)


async def iter_frames(chunks: AsyncIterable[bytes], splitter: FrameSplitter | None = None) -> AsyncIterator[str]:
    """Lazily yield frames from an async byte-chunk source.

    The trailing undelimited frame is yielded once the source is exhausted.
    """
    splitter = splitter or FrameSplitter()
    async for chunk in chunks:
        for frame in splitter.feed(chunk):
            yield frame
    for frame in splitter.close():
        yield frame


__all__ = ["FrameSplitter", "SplitterState", "iter_frames"]
