"""
Unit tests for FastAPI dependency injection functions.

- get_http_client() yields a client and closes it when the request ends
- use case factories wire a fresh gateway per request
- get_session_context() forwards the Cookie header verbatim
"""

from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest
from fastapi import Request

from doggy_dream.adapters.http_dog_catalog_gateway import HttpDogCatalogGateway
from doggy_dream.entrypoints.http.dependencies import (
    get_apply_filter_selection_use_case,
    get_dog_catalog_gateway,
    get_http_client,
    get_login_use_case,
    get_search_dogs_use_case,
    get_search_query,
    get_session_context,
)
from doggy_dream.use_cases.apply_filter_selection import ApplyFilterSelection
from doggy_dream.use_cases.login import Login
from doggy_dream.use_cases.search_dogs import SearchDogs


def _request(query_string: bytes = b"", cookie: bytes | None = None) -> Request:
    headers = [(b"cookie", cookie)] if cookie is not None else []
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/search",
            "query_string": query_string,
            "headers": headers,
        }
    )


@pytest.mark.asyncio
async def test_get_http_client_closes_client_after_request() -> None:
    generator = get_http_client()
    client = await generator.__anext__()

    assert isinstance(client, httpx.AsyncClient)
    assert not client.is_closed

    with pytest.raises(StopAsyncIteration):
        await generator.__anext__()

    assert client.is_closed


def test_get_dog_catalog_gateway_wraps_client() -> None:
    gateway = get_dog_catalog_gateway(client=Mock(spec=httpx.AsyncClient))

    assert isinstance(gateway, HttpDogCatalogGateway)


def test_use_case_factories_return_fresh_instances() -> None:
    gateway = Mock()

    first = get_search_dogs_use_case(gateway=gateway)
    second = get_search_dogs_use_case(gateway=gateway)

    assert isinstance(first, SearchDogs)
    assert first is not second
    assert isinstance(get_login_use_case(gateway=gateway), Login)
    assert isinstance(get_apply_filter_selection_use_case(), ApplyFilterSelection)


def test_get_session_context_reads_cookie_verbatim() -> None:
    request = _request(cookie=b"fetch-access-token=abc; other=1")

    assert get_session_context(request).cookie == "fetch-access-token=abc; other=1"


def test_get_session_context_without_cookie() -> None:
    assert get_session_context(_request()).cookie == ""


def test_get_search_query_merges_breed_notations() -> None:
    request = _request(query_string=b"breeds%5B0%5D=Pug&breeds=Beagle&breeds%5B1%5D=Akita")

    query = get_search_query(request, sort=None, size=20, offset=0)

    assert query.breeds == ["Pug", "Akita", "Beagle"]
