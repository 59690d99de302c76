"""Lenient JSON decoding for provider frames."""
from __future__ import annotations

import json
from typing import Any, TypeVar

T = TypeVar("T")


def parse_json(text: str | bytes, default: T) -> Any | T:
    """Return ``json.loads(text)`` or ``default`` when ``text`` is not valid JSON.

    Only decoding failures are absorbed; the caller decides whether the
    default shape is acceptable.
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return default


__all__ = ["parse_json"]
