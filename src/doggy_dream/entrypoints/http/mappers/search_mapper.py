from __future__ import annotations

import re
from collections.abc import Iterable

from doggy_dream.domain.dog import DEFAULT_SORT, Dog, FilterSelection, SearchViewModel
from doggy_dream.entrypoints.http.dtos.search import (
    DogResponseDTO,
    PaginationDTO,
    SearchParamsDTO,
    SearchQueryDTO,
    SearchResponseDTO,
)

INDEXED_BREEDS_PARAM = re.compile(r"^breeds\[\d+\]$")


class SearchMapper:
    """Maps between REST DTOs and domain models for dog search."""

    @staticmethod
    def collect_breeds(params: Iterable[tuple[str, str]]) -> list[str]:
        """
        Gather breed filters from both query notations.

        Accepts `breeds[0]=A&breeds[1]=B` and `breeds=A&breeds=B`; indexed
        values come first, then the plain ones, each in URL order.

        Args:
            params: Query string key/value pairs, repeated keys included

        Returns:
            Raw breed tokens, unvalidated
        """
        pairs = list(params)
        indexed = [value for key, value in pairs if INDEXED_BREEDS_PARAM.match(key)]
        simple = [value for key, value in pairs if key == "breeds"]
        return indexed + simple

    @staticmethod
    def to_domain_selection(dto: SearchQueryDTO) -> FilterSelection:
        return FilterSelection(
            sort=dto.sort or DEFAULT_SORT,
            size=dto.size,
            offset=dto.offset,
            breeds=tuple(dto.breeds),
        )

    @staticmethod
    def to_dog_response(dog: Dog) -> DogResponseDTO:
        return DogResponseDTO(
            id=dog.id,
            img=dog.img,
            name=dog.name,
            age=dog.age,
            breed=dog.breed,
            zip_code=dog.zip_code,
        )

    @staticmethod
    def to_response(view_model: SearchViewModel) -> SearchResponseDTO:
        """
        Converts the composed view model to the REST response.

        Cursors are passed through untouched; a missing cursor stays None so
        it can be left out of the JSON instead of becoming an empty link.
        """
        selection = view_model.selection
        return SearchResponseDTO(
            breeds=list(view_model.catalog.breeds),
            applied_breeds=list(view_model.applied_breeds),
            search=PaginationDTO(
                total=view_model.total,
                next=view_model.next,
                prev=view_model.prev,
                first_position=view_model.first_position,
                last_position=view_model.last_position,
            ),
            dogs=[SearchMapper.to_dog_response(dog) for dog in view_model.dogs],
            params=SearchParamsDTO(
                sort=selection.sort,
                size=selection.size,
                offset=selection.offset,
                selected_breeds=list(selection.breeds),
            ),
        )
