"""
Dependency injection for FastAPI routes.

Key principle: upstream HTTP clients are per-request, not cached, so no
connection state or credential leaks between requests.
"""

from __future__ import annotations

from typing import AsyncIterator

import httpx
from fastapi import Depends, Query, Request

from doggy_dream.adapters.http_dog_catalog_gateway import HttpDogCatalogGateway
from doggy_dream.domain.dog import DEFAULT_SIZE, MAX_SIZE, SessionContext
from doggy_dream.entrypoints.http.dtos.search import SearchQueryDTO
from doggy_dream.entrypoints.http.mappers.search_mapper import SearchMapper
from doggy_dream.infra.upstream.client import get_client
from doggy_dream.ports.dog_catalog_gateway import DogCatalogGateway
from doggy_dream.use_cases.apply_filter_selection import ApplyFilterSelection
from doggy_dream.use_cases.login import Login
from doggy_dream.use_cases.search_dogs import SearchDogs


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """
    Provides an upstream HTTP client for a single request.

    The client is closed when the request ends, including when the request
    is cancelled mid-flight.

    Yields:
        httpx.AsyncClient: Client bound to the upstream base URL (per-request)
    """
    async with get_client() as client:
        yield client


def get_dog_catalog_gateway(
    client: httpx.AsyncClient = Depends(get_http_client),
) -> DogCatalogGateway:
    return HttpDogCatalogGateway(client=client)


def get_session_context(request: Request) -> SessionContext:
    """Read the upstream credential from the inbound Cookie header, verbatim."""
    return SessionContext(cookie=request.headers.get("cookie", ""))


def get_search_query(
    request: Request,
    sort: str | None = Query(default=None, examples=["breed:asc"]),
    size: int = Query(default=DEFAULT_SIZE, ge=1, le=MAX_SIZE),
    offset: int = Query(default=0, ge=0, alias="from"),
) -> SearchQueryDTO:
    """
    Parse search query parameters.

    `breeds` is read from the raw query string because it may arrive both as
    a repeated parameter and with indexed keys (`breeds[0]`, `breeds[1]`, ...).
    """
    return SearchQueryDTO(
        sort=sort,
        size=size,
        offset=offset,
        breeds=SearchMapper.collect_breeds(request.query_params.multi_items()),
    )


def get_search_dogs_use_case(
    gateway: DogCatalogGateway = Depends(get_dog_catalog_gateway),
) -> SearchDogs:
    """
    Factory function that returns a configured SearchDogs use case.

    Called per-request, so every request gets a fresh gateway and client.
    """
    return SearchDogs(gateway=gateway)


def get_login_use_case(
    gateway: DogCatalogGateway = Depends(get_dog_catalog_gateway),
) -> Login:
    return Login(gateway=gateway)


def get_apply_filter_selection_use_case() -> ApplyFilterSelection:
    return ApplyFilterSelection()
