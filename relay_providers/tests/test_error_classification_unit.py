from __future__ import annotations

import asyncio
import types

import httpx

from relay_providers.base.errors import (
    ErrorCode,
    ProviderError,
    classify_exception,
    error_event_text,
)


def test_classify_provider_error_passthrough():
    e = ProviderError(code=ErrorCode.AUTH, message="nope", provider="oneapi")
    assert classify_exception(e) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests


def test_classify_http_status_mapping():
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101 - assert is appropriate in unit tests
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests


def test_classify_httpx_status_error():
    request = httpx.Request("POST", "https://oneapi.test/v1/chat/completions")
    response = httpx.Response(429, request=request)
    exc = httpx.HTTPStatusError("too many", request=request, response=response)
    assert classify_exception(exc) is ErrorCode.RATE_LIMIT  # nosec B101


def test_classify_httpx_transport_errors():
    assert classify_exception(httpx.ReadTimeout("slow")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused")) is ErrorCode.UNAVAILABLE  # nosec B101
    assert classify_exception(httpx.RemoteProtocolError("eof")) is ErrorCode.TRANSIENT  # nosec B101
    assert classify_exception(asyncio.TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("unsupported parameter")) is ErrorCode.UNSUPPORTED  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests


def test_error_event_text_format():
    assert error_event_text(httpx.ConnectError("refused")) == "unavailable:refused"  # nosec B101
    assert error_event_text(RuntimeError()) == "unknown:RuntimeError"  # nosec B101
    err = ProviderError(code=ErrorCode.AUTH, message="missing_api_key", provider="oneapi")
    assert error_event_text(err) == "auth:missing_api_key"  # nosec B101
    assert len(error_event_text(ValueError("x" * 1000))) == len("unknown:") + 260  # nosec B101
