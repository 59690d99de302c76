"""relay_providers.config.env
==========================

Environment variable mapping and helpers for provider credentials.

Purpose
-------
- Single source of truth mapping provider identifiers to their credential
  environment variable names (canonical first, then aliases).
- Helpers to resolve a key from the environment and to pick one key out of
  a ``|``-separated key pool.

Failure Modes
-------------
- Functions return ``None`` when a provider is unknown or no value is present.
- Helpers never raise on missing providers or unset variables; callers decide
  how to proceed.
"""

from __future__ import annotations

import os
import random
from typing import Dict, Iterable, List, Optional, Tuple

from .defaults import API_KEY_POOL_SEPARATOR

# Canonical provider → env var mapping
ENV_MAP: Dict[str, str] = {
    "oneapi": "ONEAPI_API_KEY",
}


# Provider → ordered tuple of acceptable env var names (canonical first).
# OPENAI_KEY is the historical name of the OneAPI key pool.
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "oneapi": ("ONEAPI_API_KEY", "OPENAI_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical environment variable name for a provider."""
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable environment variable names for a provider, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for a provider from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-empty candidate, or
        ``(None, None)`` when nothing is set.
    """
    for name in get_env_var_candidates(provider):
        if val := os.environ.get(name):
            return val, name
    return None, None


def split_key_pool(value: Optional[str]) -> List[str]:
    """Split a ``|``-separated key pool, dropping blanks and placeholders."""
    if not value:
        return []
    keys = (k.strip() for k in value.split(API_KEY_POOL_SEPARATOR))
    return [k for k in keys if k and not is_placeholder(k)]


def pick_api_key(value: Optional[str], rng: Optional[random.Random] = None) -> Optional[str]:
    """Return one key of the pool chosen uniformly at random, or ``None``."""
    keys = split_key_pool(value)
    if not keys:
        return None
    return (rng or random).choice(keys)


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
    "split_key_pool",
    "pick_api_key",
]
