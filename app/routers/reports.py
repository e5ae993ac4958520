"""Dashboard / report data endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.models.reports import ReportSummary
from app.routers.deps import get_store
from app.services.reports import build_summary
from app.stores.base import CandidateStore

router = APIRouter()


@router.get("/summary", response_model=ReportSummary)
async def report_summary(
    store: CandidateStore = Depends(get_store),
) -> ReportSummary:
    """Return totals, platform / region / bucket distributions and top topics."""
    return build_summary(store.all())
