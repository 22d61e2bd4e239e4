from __future__ import annotations

from enum import Enum


class PipelineStage(str, Enum):
    """States of one search request, in the order they are entered.

    Any of the first three may end the request early with the stage's
    upstream error; COMPOSED is only reached when all of them succeed.
    """

    FETCHING_CATALOG = "catalog"
    FETCHING_SEARCH = "search"
    HYDRATING_RESULTS = "hydrate"
    COMPOSED = "composed"
