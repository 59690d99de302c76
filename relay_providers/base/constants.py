"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings across the streaming
normalization layer and the adapters built on top of it.

Security
--------
This module contains only generic sentinel strings. There are no credentials
or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

import re

# Record delimiter of the incremental-completion wire format: a blank line,
# tolerant of CRLF or LF line endings.
FRAME_DELIMITER = re.compile(rb"\r?\n\r?\n")

# Field prefix carried by each event-stream record; the space after the
# colon is optional on the wire and stripped with the rest of the padding.
DATA_PREFIX = "data:"

# Advisory terminator record. Completion is driven by stream close, not by it.
DONE_SENTINEL = "[DONE]"

# finish_reason value whose frame is suppressed.
FINISH_REASON_STOP = "stop"

# Diagnostic for a decoded record without a usable ``choices`` array.
MISSING_CHOICES_ERROR = "not found data.choices"

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

__all__ = [
    "FRAME_DELIMITER",
    "DATA_PREFIX",
    "DONE_SENTINEL",
    "FINISH_REASON_STOP",
    "MISSING_CHOICES_ERROR",
    "MISSING_API_KEY_ERROR",
]
