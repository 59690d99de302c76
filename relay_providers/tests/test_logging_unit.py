"""Unit coverage for structured logging utilities and helpers."""

from __future__ import annotations

import io
import json
import logging

from relay_providers.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    LogContext,
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)
from relay_providers.base.log_support import JsonFormatter


def _attach_stream(json_mode: bool = False) -> io.StringIO:
    base_logger = logging.getLogger("relay")
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter() if json_mode else logging.Formatter("%(message)s"))
    setattr(handler, "_relay_console_handler", True)
    handler.setLevel(logging.DEBUG)
    base_logger.handlers[:] = [handler]
    return stream


def test_env_overrides_level(monkeypatch):
    monkeypatch.setenv("RELAY_LOG_LEVEL", "ERROR")
    get_logger(name="relay.test.env", json_mode=True, level=logging.DEBUG)
    assert logging.getLogger("relay").level == logging.ERROR  # nosec B101 - asserts are appropriate in unit tests
    monkeypatch.delenv("RELAY_LOG_LEVEL")
    configure_logger(level="INFO")


def test_log_event_drops_none_fields():
    logger = get_logger(name="relay.test.event", json_mode=False)
    configure_logger(level=logging.INFO)
    stream = _attach_stream()
    log_event(logger, "stream.start", LogContext(provider="oneapi", model="m"), phase="start", attempt=None)
    payload = json.loads(stream.getvalue().strip())
    assert payload == {"event": "stream.start", "provider": "oneapi", "model": "m", "phase": "start"}  # nosec B101


def test_normalized_log_event_includes_required_keys():
    logger = get_logger(name="relay.test.normalized", json_mode=False)
    configure_logger(level=logging.INFO)
    stream = _attach_stream()
    normalized_log_event(
        logger,
        "stream.adapter.end",
        LogContext(provider="p", model="m", request_id="r1"),
        phase="finalize",
        attempt=1,
        error_code=None,
        emitted=True,
        tokens={"prompt": 1, "completion": 2},
        extra_field=123,
    )
    payload = json.loads(stream.getvalue().strip())
    for k in REQUIRED_NORMALIZED_KEYS:
        if k == "error_code":
            continue
        assert k in payload  # nosec B101 - asserts are fine in tests
    assert "error_code" not in payload  # nosec B101 - asserts are fine in tests
    assert payload["extra_field"] == 123  # nosec B101 - asserts are fine in tests
    assert payload["request_id"] == "r1"  # nosec B101


def test_json_formatter_hoists_json_message() -> None:
    """Ensure the formatter hoists JSON message keys without double escaping."""

    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="relay.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"provider": "oneapi", "event": "stream.start"}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(formatter.format(record))
    assert payload["provider"] == "oneapi"  # nosec B101 - validates hoisting
    assert payload["level"] == "INFO"  # nosec B101
    assert "msg" not in payload  # nosec B101


def test_json_formatter_keeps_plain_message() -> None:
    record = logging.LogRecord("relay.x", logging.WARNING, __file__, 0, "plain %s", ("text",), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "plain text"  # nosec B101


def test_child_logger_uses_parent_handler_without_duplicates() -> None:
    """Verify child loggers propagate to the base handler without duplicate lines."""

    logger = get_logger(name="relay.test.child", json_mode=False)
    configure_logger(level=logging.INFO)
    stream = _attach_stream()
    logger.info("alpha")
    lines = [ln for ln in stream.getvalue().splitlines() if ln]
    assert lines == ["alpha"]  # nosec B101 - ensures single emission


def test_child_logger_respects_warning_level() -> None:
    """Validate that INFO logs are suppressed when the base level is WARNING."""

    logger = get_logger(name="relay.test.levels", json_mode=False)
    stream = _attach_stream()
    configure_logger(level=logging.WARNING)
    try:
        logger.info("hidden")
        assert stream.getvalue() == ""  # nosec B101 - INFO suppressed
        logger.error("visible")
        lines = [ln for ln in stream.getvalue().splitlines() if ln]
        assert lines == ["visible"]  # nosec B101 - ERROR allowed
    finally:
        configure_logger(level=logging.INFO)


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "relay.log"
    logger = configure_logger(level="INFO", file_path=str(path))
    try:
        log_event(logger, "file.check", flag=True)
        for h in logger.handlers:
            h.flush()
        line = path.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["event"] == "file.check"  # nosec B101
    finally:
        configure_logger(file_path=None)
    assert not any(getattr(h, "_relay_file_handler", False) for h in logger.handlers)  # nosec B101
