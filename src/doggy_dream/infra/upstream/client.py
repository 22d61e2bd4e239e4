from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from doggy_dream.infra.upstream.config import upstream_base_url, upstream_timeout_seconds


def build_async_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """
    Create an AsyncClient pointed at the catalog/search service.

    - base_url/timeout come from the environment (see config.py)
    - JSON in both directions
    - transport can be swapped for httpx.MockTransport in tests
    """
    return httpx.AsyncClient(
        base_url=upstream_base_url(),
        timeout=httpx.Timeout(upstream_timeout_seconds()),
        headers={"Content-Type": "application/json", "Accept": "application/json"},
        transport=transport,
    )


@asynccontextmanager
async def get_client() -> AsyncIterator[httpx.AsyncClient]:
    """Get an upstream client that is closed when the block exits."""
    client = build_async_client()

    try:
        yield client
    finally:
        await client.aclose()
