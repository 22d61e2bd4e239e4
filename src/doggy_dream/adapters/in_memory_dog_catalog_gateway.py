from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import parse_qs, urlencode

from doggy_dream.domain.dog import (
    DEFAULT_SIZE,
    DEFAULT_SORT,
    BreedCatalog,
    Dog,
    SearchPage,
    SessionContext,
)
from doggy_dream.domain.errors import (
    AuthenticationFailed,
    HydrationFailed,
    SearchFailed,
    UpstreamUnavailable,
)
from doggy_dream.domain.pipeline import PipelineStage
from doggy_dream.domain.search_query import strip_cursor
from doggy_dream.ports.dog_catalog_gateway import DogCatalogGateway

SESSION_COOKIE = "fetch-access-token=in-memory"


class InMemoryDogCatalogGateway(DogCatalogGateway):
    """
    Canonical contract implementation for tests.

    - Breeds are served in insertion order
    - Search filters by exact breed, sorts, then pages
    - Cursors carry the same "/dogs" prefix the real service sends
    - fail_at makes one stage answer with the given status
    - Every call is recorded in `calls` as (stage, argument)
    """

    def __init__(
        self,
        dogs: list[Dog],
        breeds: list[str] | None = None,
        fail_at: dict[PipelineStage, int] | None = None,
    ) -> None:
        self._dogs = dogs
        self._breeds = breeds if breeds is not None else sorted({dog.breed for dog in dogs})
        self._fail_at = fail_at or {}
        self.calls: list[tuple[PipelineStage, object]] = []

    async def fetch_breeds(self, session: SessionContext) -> BreedCatalog:
        self.calls.append((PipelineStage.FETCHING_CATALOG, session))
        if PipelineStage.FETCHING_CATALOG in self._fail_at:
            raise UpstreamUnavailable(status=self._fail_at[PipelineStage.FETCHING_CATALOG])
        return BreedCatalog(breeds=tuple(self._breeds))

    async def search(self, query: str, session: SessionContext) -> SearchPage:
        self.calls.append((PipelineStage.FETCHING_SEARCH, query))
        if PipelineStage.FETCHING_SEARCH in self._fail_at:
            raise SearchFailed(status=self._fail_at[PipelineStage.FETCHING_SEARCH])

        params = parse_qs(query)
        sort = params.get("sort", [DEFAULT_SORT])[0]
        size = int(params.get("size", [DEFAULT_SIZE])[0])
        offset = int(params.get("from", [0])[0])
        breeds = set(params.get("breeds", []))

        matches = [dog for dog in self._dogs if not breeds or dog.breed in breeds]
        sort_field, _, direction = sort.partition(":")
        matches.sort(key=lambda dog: getattr(dog, sort_field), reverse=direction == "desc")
        total = len(matches)  # Count BEFORE paging

        page = matches[offset : offset + size]

        return SearchPage(
            total=total,
            result_ids=tuple(dog.id for dog in page),
            next=strip_cursor(self._cursor(params, offset + size)) if offset + size < total else None,
            prev=strip_cursor(self._cursor(params, max(offset - size, 0))) if offset > 0 else None,
        )

    async def hydrate(self, ids: Sequence[str], session: SessionContext) -> tuple[Dog, ...]:
        self.calls.append((PipelineStage.HYDRATING_RESULTS, tuple(ids)))
        if PipelineStage.HYDRATING_RESULTS in self._fail_at:
            raise HydrationFailed(status=self._fail_at[PipelineStage.HYDRATING_RESULTS])

        by_id = {dog.id: dog for dog in self._dogs}
        return tuple(by_id[dog_id] for dog_id in ids if dog_id in by_id)

    async def login(self, name: str, email: str) -> tuple[str, ...]:
        if "@" not in email:
            raise AuthenticationFailed(status=401)
        return (f"{SESSION_COOKIE}; Path=/; HttpOnly",)

    @staticmethod
    def _cursor(params: dict[str, list[str]], offset: int) -> str:
        pairs = [(key, value) for key, values in params.items() if key != "from" for value in values]
        if offset:
            pairs.append(("from", str(offset)))
        return f"/dogs/search?{urlencode(pairs)}"
