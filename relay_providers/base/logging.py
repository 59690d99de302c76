"""Base structured logging utilities for the relay provider layer.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid sprinkling ad-hoc logger setup across the adapter and stream pump.

Normalization:
``normalized_log_event`` wraps ``log_event`` and injects canonical structured
keys on every streaming lifecycle event: ``structured`` (bool), ``phase``
(str), ``attempt`` (int|None), ``error_code`` (str|None), ``emitted``
(bool|None) and ``tokens`` (mapping|None placeholder).
"""
from __future__ import annotations

import logging
import json
import sys
import os
import contextlib
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext


BASE_LOGGER_NAME = "relay"
LOG_LEVEL_ENV = "RELAY_LOG_LEVEL"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_BASE_LOGGER_ATTR = "_relay_logger_initialized"
_CHILD_LOGGER_ATTR = "_relay_child_configured"
_CONSOLE_HANDLER_ATTR = "_relay_console_handler"
_FILE_HANDLER_ATTR = "_relay_file_handler"


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``relay`` logger."""

    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                # pytest capture swaps and closes stderr between tests
                logger.removeHandler(existing)
                with contextlib.suppress(Exception):
                    existing.close()
                replacement = logging.StreamHandler(sys.stderr)
                replacement.setLevel(desired_level)
                replacement.setFormatter(_make_formatter(json_mode))
                setattr(replacement, _CONSOLE_HANDLER_ATTR, True)
                logger.addHandler(replacement)
                continue
            existing.setLevel(desired_level)
            if hasattr(existing, "setStream"):
                with contextlib.suppress(Exception):
                    existing.setStream(sys.stderr)
            if json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_make_formatter(json_mode))
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a logger attached to the shared ``relay`` hierarchy.

    Child loggers (``relay.oneapi``, ``relay.stream``) carry no console handler
    of their own and propagate to the base logger, so each record is emitted
    once.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger

    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            with contextlib.suppress(Exception):
                handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    setattr(logger, _CHILD_LOGGER_ATTR, True)
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
    logger_name: str = BASE_LOGGER_NAME,
) -> logging.Logger:
    """Reconfigure the shared relay logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler is attached writing JSON or
        plain logs to ``file_path``. When ``None``, any previously attached
        file handler managed by this module is removed.
    json_mode: bool
        Whether to use the JSON formatter or a plain text formatter for the
        added handler.
    logger_name: str
        Name of the logger to configure. Defaults to the shared "relay" logger.

    Returns
    -------
    logging.Logger
        The configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    if not getattr(logger, _BASE_LOGGER_ATTR, False) and not getattr(logger, _CHILD_LOGGER_ATTR, False):
        logger = get_logger(logger_name, json_mode=json_mode)

    if level is not None:
        if isinstance(level, str):
            logger.setLevel(_parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed_handlers = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed_handlers:
            logger.removeHandler(h)
            with contextlib.suppress(Exception):  # pragma: no cover - defensive
                h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed_handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == abs_path:
            existing = h
        else:
            logger.removeHandler(h)
            with contextlib.suppress(Exception):  # pragma: no cover - defensive
                h.close()

    if existing is None:
        # 10MB x 5 backups
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        fh.setLevel(logger.level)
        fh.setFormatter(_make_formatter(json_mode))
        logger.addHandler(fh)
    else:
        existing.setFormatter(_make_formatter(json_mode))
        existing.setLevel(logger.level)

    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON message.

    Keys whose values are ``None`` are dropped unless ``keep_none`` is set,
    which ``normalized_log_event`` uses to guarantee presence of the
    required schema keys.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


# ---------------------- Normalization Layer ---------------------------------
REQUIRED_NORMALIZED_KEYS = (
    "structured",
    "phase",
    "attempt",
    "error_code",
    "emitted",
    "tokens",
)


def _coerce_tokens(tokens: Any) -> Any:
    """Coerce token usage info into a stable JSON-friendly form."""
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    return {"value": repr(tokens)}


def normalized_log_event(  # noqa: PLR0913
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: bool | None = None,
    tokens: Any = None,
    structured: bool = True,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a normalized structured log event with required keys.

    Notes
    -----
    - Required keys are always present; ``error_code`` is omitted when
      ``None`` to reflect "no error".
    - ``extra_fields`` never overwrite explicitly provided normalized values.
    """
    base_fields: Dict[str, Any] = {
        "structured": structured,
        "phase": phase,
        "attempt": attempt,
        "error_code": error_code,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is None:
        base_fields.pop("error_code", None)
    for k, v in extra_fields.items():
        if v is None:
            continue
        if k in base_fields and base_fields[k] is not None:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
    "BASE_LOGGER_NAME",
]
