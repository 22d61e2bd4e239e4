"""Breed filter normalization and canonical query encoding.

Everything here is pure: the same inputs always produce the same output,
so the encoded query can be used as a stable navigation URL.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from urllib.parse import quote, unquote

from doggy_dream.domain.dog import DEFAULT_SIZE, DEFAULT_SORT, BreedCatalog

logger = logging.getLogger(__name__)

# Upstream cursors look like "/dogs/search?size=20&from=20"; the first five
# characters are its mount prefix and are not part of our own routes.
CURSOR_PREFIX_LENGTH = 5

# Form field names cannot contain spaces, so breed checkboxes are named with
# spaces replaced by this character.
FIELD_TOKEN_JOINER = "_"

# Name of the submit button on the filter form; never a breed.
INTENT_FIELD = "intent"


def normalize_breeds(tokens: Iterable[str], catalog: BreedCatalog) -> tuple[str, ...]:
    """
    Map raw breed tokens to canonical catalog names.

    Tokens are percent-decoded and matched case-insensitively. Tokens with no
    catalog entry are dropped, since the UI may still submit breeds that were
    renamed or removed upstream.

    Returns:
        Canonical names, duplicate-free and sorted
    """
    lookup = catalog.lookup()
    valid: set[str] = set()

    for token in tokens:
        canonical = lookup.get(unquote(token).strip().lower())
        if canonical is None:
            logger.debug("Dropping unknown breed filter", extra={"token": token})
            continue
        valid.add(canonical)

    return tuple(sorted(valid))


def _encode_value(value: str) -> str:
    return quote(value, safe=":")


def encode_search_query(
    sort: str | None = None,
    size: int | None = None,
    offset: int | None = None,
    breeds: Iterable[str] = (),
) -> str:
    """
    Build the canonical search query string.

    `sort` falls back to breed:asc and `size` to 20. `from` is only included
    for a non-zero offset, so the first page always has a single URL.
    """
    components = [
        f"sort={_encode_value(sort or DEFAULT_SORT)}",
        f"size={size or DEFAULT_SIZE}",
    ]
    if offset:
        components.append(f"from={offset}")
    components.extend(f"breeds={_encode_value(breed)}" for breed in sorted(set(breeds)))

    return "&".join(components)


def encode_field_token(breed: str) -> str:
    return breed.replace(" ", FIELD_TOKEN_JOINER)


def decode_field_token(token: str) -> str:
    return token.replace(FIELD_TOKEN_JOINER, " ")


def encode_filter_submission(field_names: Iterable[str]) -> str:
    """
    Turn submitted checkbox field names into `breeds=` query pairs.

    The intent field is skipped. Repeated fields collapse into one pair and
    submission order is otherwise kept.
    """
    breeds = [
        decode_field_token(name) for name in field_names if name and name != INTENT_FIELD
    ]
    return "&".join(f"breeds={_encode_value(breed)}" for breed in dict.fromkeys(breeds))


def strip_cursor(cursor: str | None) -> str | None:
    """
    Remove the upstream mount prefix from a pagination cursor.

    A missing cursor means there is no such page and stays None. A cursor with
    nothing left after the prefix is treated the same way rather than turned
    into an empty link.
    """
    if cursor is None:
        return None
    stripped = cursor[CURSOR_PREFIX_LENGTH:]
    return stripped or None
