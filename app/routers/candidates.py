"""Candidate CRUD, listing and export endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from app.core.constants import CSV_EXPORT_FILENAME
from app.core.exceptions import CandidateNotFoundError
from app.models.candidate import Candidate, CandidateCreate, CandidateUpdate
from app.models.filters import FilterSpec
from app.models.responses import CandidatePage, MessageResponse, PageMeta
from app.routers.deps import get_filter_spec, get_store
from app.services.query_engine import total_pages
from app.services.reports import export_csv
from app.stores.base import CandidateStore

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# GET /api/candidates
# ---------------------------------------------------------------------------

@router.get("", response_model=CandidatePage)
async def list_candidates(
    spec: FilterSpec = Depends(get_filter_spec),
    store: CandidateStore = Depends(get_store),
) -> CandidatePage:
    """Return one page of candidates matching the filter parameters."""
    result = store.query(spec)
    return CandidatePage(
        data=result.candidates,
        meta=PageMeta(
            total=result.total,
            page=spec.page,
            limit=spec.limit,
            total_pages=total_pages(result.total, spec.limit),
        ),
    )


# ---------------------------------------------------------------------------
# GET /api/candidates/export
# ---------------------------------------------------------------------------

@router.get("/export")
async def export_candidates(
    spec: FilterSpec = Depends(get_filter_spec),
    store: CandidateStore = Depends(get_store),
) -> Response:
    """Download every candidate matching the filters as CSV (no paging)."""
    content = export_csv(store.select(spec))
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{CSV_EXPORT_FILENAME}"'},
    )


# ---------------------------------------------------------------------------
# Single-candidate operations
# ---------------------------------------------------------------------------

@router.get("/{candidate_id}", response_model=Candidate)
async def get_candidate(
    candidate_id: int,
    store: CandidateStore = Depends(get_store),
) -> Candidate:
    return store.get_by_id(candidate_id)


@router.post("", response_model=Candidate, status_code=201)
async def create_candidate(
    payload: CandidateCreate,
    store: CandidateStore = Depends(get_store),
) -> Candidate:
    candidate = store.insert(payload)
    logger.info("candidate_created", extra={"candidate_id": candidate.id})
    return candidate


@router.patch("/{candidate_id}", response_model=Candidate)
async def update_candidate(
    candidate_id: int,
    payload: CandidateUpdate,
    store: CandidateStore = Depends(get_store),
) -> Candidate:
    """Apply a partial update; fields not sent are left unchanged."""
    candidate = store.update(candidate_id, payload)
    logger.info(
        "candidate_updated",
        extra={"candidate_id": candidate_id, "fields": sorted(payload.model_fields_set)},
    )
    return candidate


@router.delete("/{candidate_id}", response_model=MessageResponse)
async def delete_candidate(
    candidate_id: int,
    store: CandidateStore = Depends(get_store),
) -> MessageResponse:
    if not store.delete(candidate_id):
        raise CandidateNotFoundError(candidate_id)
    logger.info("candidate_deleted", extra={"candidate_id": candidate_id})
    return MessageResponse(message="Candidate deleted successfully")


@router.post("/{candidate_id}/toggle-favorite", response_model=Candidate)
async def toggle_favorite(
    candidate_id: int,
    store: CandidateStore = Depends(get_store),
) -> Candidate:
    return store.toggle_favorite(candidate_id)
