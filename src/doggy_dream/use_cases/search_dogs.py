from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from doggy_dream.domain.dog import (
    BreedCatalog,
    Dog,
    FilterSelection,
    SearchPage,
    SearchViewModel,
    SessionContext,
)
from doggy_dream.domain.pipeline import PipelineStage
from doggy_dream.domain.search_query import encode_search_query, normalize_breeds
from doggy_dream.ports.dog_catalog_gateway import DogCatalogGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchDogsRequest:
    selection: FilterSelection
    session: SessionContext


def order_by_ids(dogs: Iterable[Dog], ids: Sequence[str]) -> tuple[Dog, ...]:
    """
    Arrange hydrated records in search order.

    The hydration endpoint does not promise to answer in request order, so
    records are matched back to the search ids. Records for ids that were not
    requested are dropped.
    """
    by_id = {dog.id: dog for dog in dogs}
    return tuple(by_id[dog_id] for dog_id in ids if dog_id in by_id)


def compose_view_model(
    catalog: BreedCatalog,
    selection: FilterSelection,
    applied_breeds: tuple[str, ...],
    page: SearchPage,
    dogs: tuple[Dog, ...],
) -> SearchViewModel:
    return SearchViewModel(
        catalog=catalog,
        selection=selection,
        applied_breeds=applied_breeds,
        total=page.total,
        next=page.next,
        prev=page.prev,
        dogs=dogs,
    )


class SearchDogs:
    """
    Search pipeline: catalog -> normalize -> search -> hydrate -> compose.

    The upstream calls run strictly one after another because each needs the
    previous result. The first failure propagates as-is (it already names its
    stage and upstream status) and no view model is produced.
    """

    def __init__(self, gateway: DogCatalogGateway) -> None:
        self._gateway = gateway

    async def execute(self, request: SearchDogsRequest) -> SearchViewModel:
        """
        Execute the search pipeline.

        Args:
            request: Filter selection and session credential

        Returns:
            Fully hydrated view model for one page

        Raises:
            PagingValidationError: If size or offset are invalid
            FilterValidationError: If sort is invalid
            UpstreamUnavailable: If the breed catalog cannot be loaded
            SearchFailed: If the search call fails
            HydrationFailed: If the record hydration fails
        """
        selection = request.selection
        selection.validate()

        logger.debug("Search pipeline stage", extra={"stage": PipelineStage.FETCHING_CATALOG.value})
        catalog = await self._gateway.fetch_breeds(request.session)

        applied_breeds = normalize_breeds(selection.breeds, catalog)
        query = encode_search_query(
            sort=selection.sort,
            size=selection.size,
            offset=selection.offset,
            breeds=applied_breeds,
        )

        logger.debug(
            "Search pipeline stage",
            extra={"stage": PipelineStage.FETCHING_SEARCH.value, "query": query},
        )
        page = await self._gateway.search(query, request.session)

        dogs: tuple[Dog, ...] = ()
        if page.result_ids:
            logger.debug(
                "Search pipeline stage",
                extra={
                    "stage": PipelineStage.HYDRATING_RESULTS.value,
                    "result_count": len(page.result_ids),
                },
            )
            hydrated = await self._gateway.hydrate(page.result_ids, request.session)
            dogs = order_by_ids(hydrated, page.result_ids)

        logger.debug("Search pipeline stage", extra={"stage": PipelineStage.COMPOSED.value})
        return compose_view_model(catalog, selection, applied_breeds, page, dogs)
