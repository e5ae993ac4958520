"""Saved-filter preview endpoint.

Saved filters themselves stay client-side; the server only answers how many
candidates a definition currently matches.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.models.filters import MatchCountResponse, SavedFilterCriteria
from app.routers.deps import get_store
from app.services.match_counter import count_matches
from app.stores.base import CandidateStore

router = APIRouter()


@router.post("/match-count", response_model=MatchCountResponse)
async def match_count(
    criteria: SavedFilterCriteria,
    store: CandidateStore = Depends(get_store),
) -> MatchCountResponse:
    """Return the number of candidates matching *criteria*."""
    return MatchCountResponse(matches=count_matches(store.all(), criteria))
