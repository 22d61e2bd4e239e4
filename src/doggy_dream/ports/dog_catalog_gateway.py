from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from doggy_dream.domain.dog import BreedCatalog, Dog, SearchPage, SessionContext


class DogCatalogGateway(ABC):
    """
    Port for the remote catalog/search service.

    Every call forwards the session credential unchanged and makes exactly one
    attempt. Failures are reported with the stage-specific UpstreamError
    subclass carrying the upstream status code.

    Contract (Preconditions):
        - search() receives a query already built by encode_search_query()
        - hydrate() receives a non-empty id list; callers short-circuit empty pages
    """

    @abstractmethod
    async def fetch_breeds(self, session: SessionContext) -> BreedCatalog:
        """
        Load the full breed catalog.

        Raises:
            UpstreamUnavailable: If the upstream call fails
        """
        ...

    @abstractmethod
    async def search(self, query: str, session: SessionContext) -> SearchPage:
        """
        Run one filtered search.

        Returns:
            SearchPage with cursors already stripped of their transport prefix

        Raises:
            SearchFailed: If the upstream call fails
        """
        ...

    @abstractmethod
    async def hydrate(self, ids: Sequence[str], session: SessionContext) -> tuple[Dog, ...]:
        """
        Resolve result ids into full records with one bulk call.

        Raises:
            HydrationFailed: If the upstream call fails
        """
        ...

    @abstractmethod
    async def login(self, name: str, email: str) -> tuple[str, ...]:
        """
        Authenticate against the upstream service.

        Returns:
            The raw Set-Cookie header values to hand back to the browser

        Raises:
            AuthenticationFailed: If the upstream refuses the login
        """
        ...
