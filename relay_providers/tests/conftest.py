"""Pytest configuration for the relay test suite.

Keeps every test hermetic: provider env vars are cleared and the config/.env
caches are reset around each test. Upstream HTTP is served by
``httpx.MockTransport`` (see ``helpers.py``).
"""

from __future__ import annotations

import json
import logging
from typing import Iterator, List

import pytest

from relay_providers.base.logging import BASE_LOGGER_NAME, get_logger
from relay_providers.config import reset_config_cache

_PROVIDER_ENV = (
    "ONEAPI_API_KEY",
    "ONEAPI_BASE_URL",
    "ONEAPI_PROXY",
    "ONEAPI_MODEL",
    "OPENAI_KEY",
    "RELAY_CONFIG_FILE",
    "RELAY_LOG_LEVEL",
    "RELAY_TIMEOUT_START_SECONDS",
    "RELAY_TIMEOUT_STREAM_SECONDS",
    "RELAY_TIMEOUT_HTTP_SECONDS",
)


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear provider env vars and point DOTENV_FILE at a missing file."""

    for name in _PROVIDER_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


class ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self) -> List[dict]:
        """Return the decoded ``log_event`` payloads captured so far."""
        out = []
        for r in self.records:
            try:
                out.append(json.loads(r.getMessage()))
            except ValueError:
                continue
        return out


@pytest.fixture()
def log_capture() -> Iterator[ListHandler]:
    """Capture every record of the ``relay`` logger hierarchy at DEBUG."""

    base = get_logger(BASE_LOGGER_NAME)
    handler = ListHandler()
    previous = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)
    try:
        yield handler
    finally:
        base.removeHandler(handler)
        base.setLevel(previous)
