"""
Model identifiers known to the OneAPI adapter.

Values are the exact ``model`` strings sent on the wire.
"""
from __future__ import annotations

from enum import Enum


class ModelType(str, Enum):
    """Chat models with a known prompt budget."""

    GPT3P5_TURBO = "gpt-3.5-turbo"
    GPT3P5_TURBO_HAINING = "gpt-3.5-turbo-haining"
    GPT3P5_TURBO_16K = "gpt-3.5-turbo-16k"
    GPT4 = "gpt-4"


__all__ = ["ModelType"]
