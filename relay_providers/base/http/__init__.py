"""HTTP utilities package for the relay provider layer.

Exposes the per-request async httpx client factory.
"""

from .client import create_async_client

__all__ = ["create_async_client"]
