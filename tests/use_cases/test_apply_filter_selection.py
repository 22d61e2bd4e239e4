from __future__ import annotations

from doggy_dream.use_cases.apply_filter_selection import (
    ApplyFilterSelection,
    ApplyFilterSelectionRequest,
)


def test_submit_redirects_to_filtered_search() -> None:
    """Checked Beagle plus the intent button yields breeds=Beagle only."""
    use_case = ApplyFilterSelection()

    result = use_case.execute(
        ApplyFilterSelectionRequest(field_names=["Beagle", "intent"], intent="submit")
    )

    assert result.location == "/search?breeds=Beagle"


def test_submit_decodes_multi_word_breeds() -> None:
    use_case = ApplyFilterSelection()

    result = use_case.execute(
        ApplyFilterSelectionRequest(field_names=["Cairn_Terrier", "intent"], intent="submit")
    )

    assert result.location == "/search?breeds=Cairn%20Terrier"


def test_delete_bypasses_filters() -> None:
    """intent=delete goes back to the bare search path whatever was checked."""
    use_case = ApplyFilterSelection()

    result = use_case.execute(
        ApplyFilterSelectionRequest(field_names=["Beagle", "Pug", "intent"], intent="delete")
    )

    assert result.location == "/search"


def test_submit_without_selection_redirects_to_bare_search() -> None:
    use_case = ApplyFilterSelection()

    result = use_case.execute(ApplyFilterSelectionRequest(field_names=["intent"], intent="submit"))

    assert result.location == "/search"


def test_missing_intent_is_treated_as_submit() -> None:
    use_case = ApplyFilterSelection()

    result = use_case.execute(ApplyFilterSelectionRequest(field_names=["Pug"]))

    assert result.location == "/search?breeds=Pug"
