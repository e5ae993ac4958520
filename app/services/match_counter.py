"""Match counting for saved filter definitions.

Counts how many candidates of an already-loaded collection a filter would
match, without sorting or pagination.  Bucket and search semantics come from
``query_engine`` so the preview always agrees with the listing total.
"""

from __future__ import annotations

from collections.abc import Iterable

from app.models.candidate import Candidate
from app.models.filters import FilterSpec, SavedFilterCriteria
from app.services.query_engine import in_follower_range, matches_search


def matches_criteria(candidate: Candidate, criteria: SavedFilterCriteria) -> bool:
    """Return True if *candidate* satisfies every dimension of *criteria*."""
    if criteria.platforms and candidate.platform not in criteria.platforms:
        return False
    if criteria.regions and candidate.region not in criteria.regions:
        return False
    if criteria.topics and not any(t in criteria.topics for t in candidate.topics):
        return False
    if criteria.follower_ranges and not any(
        in_follower_range(candidate.follower_count, r)
        for r in criteria.follower_ranges
    ):
        return False
    if criteria.favorite and not candidate.is_favorite:
        return False
    if criteria.recommended and not candidate.is_recommended:
        return False
    if criteria.search is not None and not matches_search(candidate, criteria.search):
        return False
    return True


def count_matches(
    candidates: Iterable[Candidate],
    criteria: SavedFilterCriteria | FilterSpec,
) -> int:
    """Count the candidates matching *criteria*.

    A ``FilterSpec`` is accepted as well; its sort and page window are
    ignored.
    """
    if isinstance(criteria, FilterSpec):
        criteria = SavedFilterCriteria.from_filter_spec(criteria)
    return sum(1 for c in candidates if matches_criteria(c, criteria))
