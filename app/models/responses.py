"""API-layer response envelopes shared by the candidate endpoints."""

from app.models.candidate import Candidate, CamelModel


class PageMeta(CamelModel):
    """Pagination metadata returned alongside a candidate page."""
    total: int
    page: int
    limit: int
    total_pages: int


class CandidatePage(CamelModel):
    """Full response for GET /api/candidates."""
    data: list[Candidate] = []
    meta: PageMeta


class MessageResponse(CamelModel):
    """Plain confirmation or error message."""
    message: str


class ErrorResponse(CamelModel):
    """Validation failure: short message plus detailed reason."""
    message: str
    error: str | None = None
