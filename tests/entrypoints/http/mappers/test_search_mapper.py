"""
Test suite for SearchMapper.

- Collects breed filters from both query notations
- Converts query DTO to domain selection
- Converts the composed view model to the REST response
"""

from __future__ import annotations

from doggy_dream.domain.dog import BreedCatalog, Dog, FilterSelection, SearchViewModel
from doggy_dream.entrypoints.http.dtos.search import SearchQueryDTO, SearchResponseDTO
from doggy_dream.entrypoints.http.mappers.search_mapper import SearchMapper


# ==============================================================================
# collect_breeds()
# ==============================================================================


def test_collect_breeds_simple_notation() -> None:
    params = [("breeds", "Basset"), ("breeds", "Cairn"), ("size", "10")]

    assert SearchMapper.collect_breeds(params) == ["Basset", "Cairn"]


def test_collect_breeds_indexed_notation() -> None:
    params = [("breeds[0]", "Basset"), ("breeds[1]", "Cairn")]

    assert SearchMapper.collect_breeds(params) == ["Basset", "Cairn"]


def test_collect_breeds_merges_both_notations() -> None:
    params = [("breeds", "Pug"), ("breeds[0]", "Basset")]

    assert SearchMapper.collect_breeds(params) == ["Basset", "Pug"]


def test_collect_breeds_ignores_lookalike_keys() -> None:
    params = [("breeds[]", "A"), ("breeds[x]", "B"), ("mybreeds", "C"), ("breed", "D")]

    assert SearchMapper.collect_breeds(params) == []


# ==============================================================================
# to_domain_selection()
# ==============================================================================


def test_to_domain_selection_maps_fields() -> None:
    dto = SearchQueryDTO(sort="age:desc", size=5, offset=10, breeds=["pug"])

    selection = SearchMapper.to_domain_selection(dto)

    assert selection == FilterSelection(sort="age:desc", size=5, offset=10, breeds=("pug",))


def test_to_domain_selection_defaults_missing_sort() -> None:
    selection = SearchMapper.to_domain_selection(SearchQueryDTO())

    assert selection.sort == "breed:asc"


# ==============================================================================
# to_response()
# ==============================================================================


def test_to_response_maps_view_model() -> None:
    dog = Dog(id="d1", img="https://img/d1.jpg", name="Emory", age=10, breed="Beagle", zip_code="48333")
    view_model = SearchViewModel(
        catalog=BreedCatalog(breeds=("Beagle", "Pug")),
        selection=FilterSelection(size=1, offset=3, breeds=("beagle", "nope")),
        applied_breeds=("Beagle",),
        total=9,
        next="/search?size=1&from=4",
        prev="/search?size=1&from=2",
        dogs=(dog,),
    )

    response = SearchMapper.to_response(view_model)

    assert isinstance(response, SearchResponseDTO)
    assert response.breeds == ["Beagle", "Pug"]
    assert response.applied_breeds == ["Beagle"]
    assert response.search.total == 9
    assert response.search.next == "/search?size=1&from=4"
    assert response.search.prev == "/search?size=1&from=2"
    assert response.search.first_position == 4
    assert response.search.last_position == 4
    assert response.dogs[0].name == "Emory"
    assert response.params.offset == 3
    assert response.params.selected_breeds == ["beagle", "nope"]
    assert response.params.model_dump(by_alias=True)["from"] == 3


def test_to_response_keeps_missing_cursors_missing() -> None:
    view_model = SearchViewModel(
        catalog=BreedCatalog(),
        selection=FilterSelection(),
        applied_breeds=(),
        total=0,
    )

    response = SearchMapper.to_response(view_model)

    assert response.search.next is None
    assert response.search.prev is None
    assert "next" not in response.search.model_dump(exclude_none=True)
