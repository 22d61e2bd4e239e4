from __future__ import annotations

from dataclasses import dataclass, field

from doggy_dream.domain.errors import FilterValidationError, PagingValidationError

DEFAULT_SORT = "breed:asc"
DEFAULT_SIZE = 20
MAX_SIZE = 100
SORT_FIELDS = frozenset({"breed", "name", "age"})
SORT_DIRECTIONS = frozenset({"asc", "desc"})


@dataclass(frozen=True, slots=True)
class Dog:
    id: str
    img: str
    name: str
    age: int
    breed: str
    zip_code: str


@dataclass(frozen=True, slots=True)
class SessionContext:
    """Opaque upstream credential, forwarded verbatim as the Cookie header."""

    cookie: str = ""


@dataclass(frozen=True, slots=True)
class BreedCatalog:
    breeds: tuple[str, ...] = ()

    def lookup(self) -> dict[str, str]:
        """
        Map lowercase breed name to its canonical spelling.

        If two catalog entries differ only by case, the later one wins.
        """
        return {breed.lower(): breed for breed in self.breeds}


@dataclass(frozen=True, slots=True)
class FilterSelection:
    """What the user asked for; breeds are kept exactly as received."""

    sort: str = DEFAULT_SORT
    size: int = DEFAULT_SIZE
    offset: int = 0
    breeds: tuple[str, ...] = ()

    def validate(self) -> None:
        """
        Validate paging and sort parameters.

        Raises:
            PagingValidationError: If size or offset are out of range
            FilterValidationError: If sort is not `field:direction`
        """
        if self.size < 1:
            raise PagingValidationError("size must be >= 1")
        if self.size > MAX_SIZE:
            raise PagingValidationError(f"size must be <= {MAX_SIZE}")
        if self.offset < 0:
            raise PagingValidationError("from must be >= 0")

        sort_field, _, direction = self.sort.partition(":")
        if sort_field not in SORT_FIELDS or direction not in SORT_DIRECTIONS:
            raise FilterValidationError(
                f"sort must be one of {sorted(SORT_FIELDS)} followed by ':asc' or ':desc'"
            )


@dataclass(frozen=True, slots=True)
class SearchPage:
    total: int
    result_ids: tuple[str, ...] = ()
    next: str | None = None  # Already stripped of the transport prefix; None at the last page
    prev: str | None = None  # None at the first page


@dataclass(frozen=True, slots=True)
class SearchViewModel:
    catalog: BreedCatalog
    selection: FilterSelection
    applied_breeds: tuple[str, ...]
    total: int
    next: str | None = None
    prev: str | None = None
    dogs: tuple[Dog, ...] = field(default_factory=tuple)

    @property
    def first_position(self) -> int:
        """1-based position of the first dog on this page (0 when empty)."""
        if not self.dogs:
            return 0
        return self.selection.offset + 1

    @property
    def last_position(self) -> int:
        if not self.dogs:
            return 0
        return min(self.selection.offset + self.selection.size, self.total)
