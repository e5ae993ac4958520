"""Filter / sort / paginate engine for candidate listings.

Every store answers ``query`` through this module, and the match counter and
reports reuse its predicate pieces, so all of them agree on what a filter
means.  All functions are pure: they never mutate their inputs.
"""

from __future__ import annotations

import math
import unicodedata
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime
from typing import Any, NamedTuple

from app.core.constants import FOLLOWER_RANGE_BOUNDS
from app.models.candidate import Candidate
from app.models.enums import FollowerRange, SortOrder
from app.models.filters import FilterSpec


class QueryResult(NamedTuple):
    """One page of matching candidates plus the pre-pagination match count."""
    candidates: list[Candidate]
    total: int


# ---------------------------------------------------------------------------
# Predicate
# ---------------------------------------------------------------------------

def in_follower_range(follower_count: int, follower_range: FollowerRange) -> bool:
    """Return True if *follower_count* falls in the half-open bucket."""
    low, high = FOLLOWER_RANGE_BOUNDS[follower_range]
    if follower_count < low:
        return False
    return high is None or follower_count < high


def follower_range_of(follower_count: int) -> FollowerRange | None:
    """Return the bucket containing *follower_count* (None if negative)."""
    for follower_range in FOLLOWER_RANGE_BOUNDS:
        if in_follower_range(follower_count, follower_range):
            return follower_range
    return None


def matches_search(candidate: Candidate, search: str) -> bool:
    """Case-insensitive substring match on name, handle or description."""
    term = search.lower()
    return (
        term in candidate.name.lower()
        or term in candidate.social_handle.lower()
        or term in candidate.description.lower()
    )


def matches_filter(candidate: Candidate, spec: FilterSpec) -> bool:
    """Return True if *candidate* satisfies every constraint set in *spec*."""
    if spec.platform is not None and candidate.platform != spec.platform:
        return False
    if spec.region is not None and candidate.region != spec.region:
        return False
    if spec.topic is not None and spec.topic not in candidate.topics:
        return False
    if spec.follower_range is not None and not in_follower_range(
        candidate.follower_count, spec.follower_range
    ):
        return False
    if spec.search is not None and not matches_search(candidate, spec.search):
        return False
    return True


def filter_candidates(
    candidates: Iterable[Candidate], spec: FilterSpec
) -> list[Candidate]:
    """Keep the candidates matching *spec*, preserving input order."""
    return [c for c in candidates if matches_filter(c, spec)]


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------

def _collation_key(name: str) -> tuple[str, str, str]:
    # Accents and case only break ties between otherwise equal names
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), name.casefold(), name)


def _created_at_key(candidate: Candidate) -> datetime:
    return datetime.fromisoformat(candidate.created_at.replace("Z", "+00:00"))


_SORT_KEYS: dict[SortOrder, tuple[Callable[[Candidate], Any], bool]] = {
    SortOrder.followers_desc: (lambda c: c.follower_count, True),
    SortOrder.followers_asc: (lambda c: c.follower_count, False),
    SortOrder.name_asc: (lambda c: _collation_key(c.name), False),
    SortOrder.name_desc: (lambda c: _collation_key(c.name), True),
    SortOrder.date_added: (_created_at_key, True),
}


def sort_candidates(
    candidates: Iterable[Candidate], order: SortOrder
) -> list[Candidate]:
    """Return *candidates* ordered by *order*.

    ``sorted`` is stable in both directions, so candidates with equal keys
    keep the store's natural order (insertion / primary key).
    """
    key, descending = _SORT_KEYS[order]
    return sorted(candidates, key=key, reverse=descending)


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------

def paginate(candidates: Sequence[Candidate], page: int, limit: int) -> list[Candidate]:
    """Slice out 1-indexed *page*; pages past the end are empty."""
    start = (page - 1) * limit
    return list(candidates[start:start + limit])


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show *total* rows at *limit* per page."""
    return math.ceil(total / limit)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def select_candidates(
    candidates: Iterable[Candidate], spec: FilterSpec
) -> list[Candidate]:
    """Filter and sort, without pagination."""
    return sort_candidates(filter_candidates(candidates, spec), spec.sort)


def run_query(candidates: Iterable[Candidate], spec: FilterSpec) -> QueryResult:
    """Apply predicate, then sort, then pagination."""
    selected = select_candidates(candidates, spec)
    return QueryResult(
        candidates=paginate(selected, spec.page, spec.limit),
        total=len(selected),
    )
