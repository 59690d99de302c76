"""Unified configuration layer for relay providers.

Goals
-----
* Centralize defaults (model, base URL).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by RELAY_CONFIG_FILE
    3. Environment variables (e.g. ONEAPI_BASE_URL, ONEAPI_API_KEY, ONEAPI_PROXY)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_provider_config(provider: str)``.

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_API_KEY, <PROVIDER>_BASE_URL, <PROVIDER>_PROXY,
e.g. ONEAPI_BASE_URL. The API key additionally falls back to the aliases in
``config.env.ENV_ALIASES``. A ``.env`` file (path from DOTENV_FILE, default
``.env``) is loaded once before the environment is read.

External Config File
--------------------
```
oneapi:
  base_url: https://oneapi.internal.example
  api_key: key-a|key-b
  proxy: http://127.0.0.1:7890
```
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

import yaml

from .env import is_placeholder, resolve_provider_key
from .defaults import ONEAPI_DEFAULT_BASE_URL, ONEAPI_DEFAULT_MODEL


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "oneapi": {"model": ONEAPI_DEFAULT_MODEL, "base_url": ONEAPI_DEFAULT_BASE_URL},
}


ENV_FIELD_MAP = {
    "model": "MODEL",
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "proxy": "PROXY",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Existing
    environment variables win unless their current value is a placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    try:
        if not os.path.isfile(path):
            return
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    """Load and cache the RELAY_CONFIG_FILE document (JSON first, then YAML)."""
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("RELAY_CONFIG_FILE")
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text) or {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the cached config file and .env state (tests, reloads)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None:
            out[field] = val
    if "api_key" not in out:
        key, _ = resolve_provider_key(provider)
        if key:
            out["api_key"] = key
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]
