from __future__ import annotations

import os
import uvicorn

from relay_providers.config.defaults import RELAY_SERVICE_DEFAULT_HOST, RELAY_SERVICE_DEFAULT_PORT


def _parse_port(value: str | None, default: int) -> int:
    """Best-effort parse of a port from string, falling back to a sane default."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def main() -> None:
    """Start the development server for the relay FastAPI app.

    - RELAY_SERVICE_HOST: interface to bind (default "127.0.0.1")
    - RELAY_SERVICE_PORT: port to bind (default 8091)
    - RELAY_SERVICE_RELOAD: "true"/"false" to toggle auto-reload (default True)
    """
    host = os.getenv("RELAY_SERVICE_HOST", RELAY_SERVICE_DEFAULT_HOST)
    port = _parse_port(os.getenv("RELAY_SERVICE_PORT"), RELAY_SERVICE_DEFAULT_PORT)

    reload_env = os.getenv("RELAY_SERVICE_RELOAD")
    reload_enabled = True if reload_env is None else reload_env.lower() == "true"

    uvicorn.run(
        "relay_providers.service.app:app",
        host=host,
        port=port,
        reload=reload_enabled,
    )


if __name__ == "__main__":
    main()
