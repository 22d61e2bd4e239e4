"""httpx implementation of DogCatalogGateway."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import ValidationError as PayloadValidationError

from doggy_dream.domain.dog import BreedCatalog, Dog, SearchPage, SessionContext
from doggy_dream.domain.errors import (
    AuthenticationFailed,
    HydrationFailed,
    SearchFailed,
    UpstreamError,
    UpstreamUnavailable,
)
from doggy_dream.domain.search_query import strip_cursor
from doggy_dream.infra.upstream.payloads import (
    BreedsPayload,
    DogPayload,
    DogsPayload,
    SearchPayload,
)
from doggy_dream.ports.dog_catalog_gateway import DogCatalogGateway

logger = logging.getLogger(__name__)

BREEDS_PATH = "/dogs/breeds"
SEARCH_PATH = "/dogs/search"
HYDRATE_PATH = "/dogs"
LOGIN_PATH = "/auth/login"


class HttpDogCatalogGateway(DogCatalogGateway):
    """
    DogCatalogGateway backed by the remote service over HTTP.

    - One request per call, no retries
    - Forwards the session cookie verbatim
    - Transport errors and malformed payloads are reported as the
      calling stage's UpstreamError
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """
        Initialize gateway with an HTTP client.

        Args:
            client: AsyncClient configured with the upstream base_url
        """
        self._client = client

    async def fetch_breeds(self, session: SessionContext) -> BreedCatalog:
        response = await self._send(
            UpstreamUnavailable, "GET", BREEDS_PATH, session=session
        )
        breeds = self._parse(UpstreamUnavailable, response, BreedsPayload.validate_python)
        return BreedCatalog(breeds=tuple(breeds))

    async def search(self, query: str, session: SessionContext) -> SearchPage:
        url = f"{SEARCH_PATH}?{query}" if query else SEARCH_PATH
        response = await self._send(SearchFailed, "GET", url, session=session)
        payload = self._parse(SearchFailed, response, SearchPayload.model_validate)

        return SearchPage(
            total=payload.total,
            result_ids=tuple(payload.result_ids),
            next=strip_cursor(payload.next),
            prev=strip_cursor(payload.prev),
        )

    async def hydrate(self, ids: Sequence[str], session: SessionContext) -> tuple[Dog, ...]:
        # The upstream rejects an empty body, and there is nothing to fetch anyway
        if not ids:
            return ()

        response = await self._send(
            HydrationFailed, "POST", HYDRATE_PATH, session=session, json=list(ids)
        )
        payloads = self._parse(HydrationFailed, response, DogsPayload.validate_python)
        return tuple(self._to_domain(payload) for payload in payloads)

    async def login(self, name: str, email: str) -> tuple[str, ...]:
        response = await self._send(
            AuthenticationFailed, "POST", LOGIN_PATH, json={"name": name, "email": email}
        )
        return tuple(response.headers.get_list("set-cookie"))

    async def _send(
        self,
        error_class: type[UpstreamError],
        method: str,
        url: str,
        session: SessionContext | None = None,
        json: Any = None,
    ) -> httpx.Response:
        headers = {}
        if session is not None and session.cookie:
            headers["Cookie"] = session.cookie

        try:
            response = await self._client.request(method, url, headers=headers, json=json)
        except httpx.TransportError as exc:
            logger.warning(
                "Upstream request did not complete",
                extra={"method": method, "url": url, "error_type": type(exc).__name__},
            )
            raise error_class(message=f"{error_class.default_message}: {exc}") from exc

        if not response.is_success:
            logger.warning(
                "Upstream request failed",
                extra={"method": method, "url": url, "status": response.status_code},
            )
            raise error_class(status=response.status_code)

        return response

    @staticmethod
    def _parse(error_class: type[UpstreamError], response: httpx.Response, parser: Any) -> Any:
        try:
            return parser(response.json())
        except (ValueError, PayloadValidationError) as exc:
            raise error_class(
                status=response.status_code,
                message=f"{error_class.default_message}: malformed response",
            ) from exc

    @staticmethod
    def _to_domain(payload: DogPayload) -> Dog:
        return Dog(
            id=payload.id,
            img=payload.img,
            name=payload.name,
            age=payload.age,
            breed=payload.breed,
            zip_code=payload.zip_code,
        )
