from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from doggy_dream.domain.dog import SessionContext
from doggy_dream.entrypoints.http.dependencies import (
    get_apply_filter_selection_use_case,
    get_search_dogs_use_case,
    get_search_query,
    get_session_context,
)
from doggy_dream.entrypoints.http.dtos.search import SearchQueryDTO, SearchResponseDTO
from doggy_dream.entrypoints.http.error_responses import ErrorResponse
from doggy_dream.entrypoints.http.mappers.search_mapper import SearchMapper
from doggy_dream.use_cases.apply_filter_selection import (
    ApplyFilterSelection,
    ApplyFilterSelectionRequest,
)
from doggy_dream.use_cases.search_dogs import SearchDogs, SearchDogsRequest


router = APIRouter(tags=["Search"])


@router.get(
    "/search",
    response_model=SearchResponseDTO,
    response_model_exclude_none=True,
    summary="Search adoptable dogs",
    description="""
    Search the dog catalog with breed filters, sorting and pagination.

    ## Filters
    - `breeds=<name>` (repeatable) and `breeds[0]=<name>` notations are merged
    - Breed names are matched case-insensitively against the breed catalog
    - Unknown breeds are ignored, not rejected

    ## Pagination
    - Default size: 20, max size: 100
    - Use `from` as the offset
    - `search.next` / `search.prev` are ready-to-use paths, absent at the boundaries

    ## Example
    ```
    GET /search?breeds=beagle&sort=name:desc&size=10
    ```
    """,
    responses={
        401: {"model": ErrorResponse, "description": "Upstream session missing or expired"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        502: {"model": ErrorResponse, "description": "Upstream catalog/search service failed"},
    },
)
async def search_dogs(
    query: SearchQueryDTO = Depends(get_search_query),
    session: SessionContext = Depends(get_session_context),
    use_case: SearchDogs = Depends(get_search_dogs_use_case),
) -> SearchResponseDTO:
    """Search dogs endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = SearchDogsRequest(
        selection=SearchMapper.to_domain_selection(query),
        session=session,
    )

    # 2. Execute use case
    view_model = await use_case.execute(request)

    # 3. Map to response
    return SearchMapper.to_response(view_model)


@router.post(
    "/search",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Apply breed filter form",
    description="""
    Accepts the breed filter form and redirects to the matching search URL.

    - Checkbox field names are breed names with spaces replaced by `_`
    - `intent=submit` applies the checked breeds
    - `intent=delete` clears every filter and returns to the first page
    """,
)
async def apply_filter_selection(
    request: Request,
    use_case: ApplyFilterSelection = Depends(get_apply_filter_selection_use_case),
) -> RedirectResponse:
    form = await request.form()
    intent = form.get("intent")

    result = use_case.execute(
        ApplyFilterSelectionRequest(
            field_names=[key for key, _ in form.multi_items()],
            intent=intent if isinstance(intent, str) else None,
        )
    )

    return RedirectResponse(url=result.location, status_code=status.HTTP_303_SEE_OTHER)
