"""Per-request async HTTP client construction.

Purpose:
    Build the ``httpx.AsyncClient`` that carries one streaming chat request.
    Timeouts derive exclusively from :func:`get_timeout_config`; no numeric
    literals are introduced here.

Lifecycle & cleanup:
    A client is scoped to one request: the caller owns it and must close it
    (``await client.aclose()``) on every exit path, together with the
    streaming response it produced. Clients are not pooled because an
    ``AsyncClient`` is bound to the event loop it first ran on.

Testing:
    ``transport`` accepts any ``httpx.AsyncBaseTransport`` (typically
    ``httpx.MockTransport``) so the whole pipeline runs offline.
"""

from __future__ import annotations

from typing import Mapping, Optional

import httpx

from ..timeouts import to_httpx_timeout


def create_async_client(
    base_url: Optional[str],
    *,
    headers: Optional[Mapping[str, str]] = None,
    proxy: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` for one streaming request.

    Parameters:
        base_url: API base URL; relative request paths resolve against it.
        headers: Default headers sent with every request of this client.
        proxy: Optional proxy URL (``http://``, ``https://`` or ``socks5://``).
            Ignored when an explicit ``transport`` is supplied.
        transport: Optional transport override, mainly for tests.
    """
    kwargs = {
        "timeout": to_httpx_timeout(),
        "headers": dict(headers or {}),
    }
    if base_url:
        kwargs["base_url"] = base_url.strip()
    if transport is not None:
        kwargs["transport"] = transport
    elif proxy:
        kwargs["proxy"] = proxy
    return httpx.AsyncClient(**kwargs)


__all__ = ["create_async_client"]
