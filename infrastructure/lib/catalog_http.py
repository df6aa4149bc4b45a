"""Helpers shared by the HTTP adapters talking to the catalog host.

The catalog host reports errors as JSON with either an ``error`` or a
``message`` field, depending on the route.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx


def error_message(response: httpx.Response, default: str) -> str:
    """Extract the machine-readable error text from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or default
    if isinstance(body, dict):
        for key in ("error", "message", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return default


class CatalogHttpClient:
    """Base for adapters that either own short-lived clients or borrow one."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._shared_client = client

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._shared_client is not None:
            yield self._shared_client
            return
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            yield client
