"""Apply filter selection use case."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from doggy_dream.domain.search_query import encode_filter_submission

SEARCH_PATH = "/search"
INTENT_SUBMIT = "submit"
INTENT_DELETE = "delete"


@dataclass(frozen=True, slots=True)
class ApplyFilterSelectionRequest:
    """Submitted filter form: every field name plus the intent button value."""

    field_names: Sequence[str]
    intent: str | None = None


@dataclass(frozen=True, slots=True)
class ApplyFilterSelectionResponse:
    location: str


class ApplyFilterSelection:
    """
    Turn a filter form submission into the search URL to redirect to.

    - intent=delete resets to the unfiltered first page
    - anything else encodes the checked breeds into the query
    """

    def execute(self, request: ApplyFilterSelectionRequest) -> ApplyFilterSelectionResponse:
        if request.intent == INTENT_DELETE:
            return ApplyFilterSelectionResponse(location=SEARCH_PATH)

        query = encode_filter_submission(request.field_names)
        if not query:
            return ApplyFilterSelectionResponse(location=SEARCH_PATH)

        return ApplyFilterSelectionResponse(location=f"{SEARCH_PATH}?{query}")
