"""relay_providers.config.defaults
===============================

Central place for small, stable default values used across the
relay_providers package and its service layer. These defaults can be
overridden via environment variables or an external config file.

This module intentionally avoids importing from other packages to prevent
circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Service / HTTP layer ----

# Comma-separated list of allowed origins for the dev server.
RELAY_SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"
RELAY_SERVICE_DEFAULT_HOST = "127.0.0.1"
RELAY_SERVICE_DEFAULT_PORT = 8091


# ---- OneAPI (OpenAI-compatible) provider ----
ONEAPI_DEFAULT_BASE_URL = "https://api.openai.com"
ONEAPI_DEFAULT_MODEL = "gpt-3.5-turbo"
# Fixed path appended to the configured base URL.
ONEAPI_CHAT_COMPLETIONS_PATH = "/v1/chat/completions"
# Sampling temperature sent with every request.
ONEAPI_DEFAULT_TEMPERATURE = 1.0
# Separator of a multi-key API key pool ("key-a|key-b").
API_KEY_POOL_SEPARATOR = "|"


__all__ = [
    "RELAY_SERVICE_CORS_DEFAULT_ORIGINS",
    "RELAY_SERVICE_DEFAULT_HOST",
    "RELAY_SERVICE_DEFAULT_PORT",
    "ONEAPI_DEFAULT_BASE_URL",
    "ONEAPI_DEFAULT_MODEL",
    "ONEAPI_CHAT_COMPLETIONS_PATH",
    "ONEAPI_DEFAULT_TEMPERATURE",
    "API_KEY_POOL_SEPARATOR",
]
