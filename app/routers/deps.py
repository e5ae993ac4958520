"""Shared FastAPI dependencies for the candidate routers."""

from __future__ import annotations

from fastapi import Query, Request
from pydantic import ValidationError

from app.core.config import settings
from app.core.exceptions import CandidateValidationError, format_validation_errors
from app.models.filters import FilterSpec
from app.stores.base import CandidateStore


def get_store(request: Request) -> CandidateStore:
    """Return the store created during application startup."""
    return request.app.state.store


def get_filter_spec(
    platform: str = Query(default="", description="Platform (empty = any)"),
    follower_range: str = Query(
        default="",
        alias="followerRange",
        description="Follower bucket: 0-5k, 5k-10k, 10k-50k, 50k-100k, 100k+",
    ),
    region: str = Query(default="", description="Region (empty = any)"),
    topic: str = Query(default="", description="Topic the candidate covers"),
    search: str = Query(default="", description="Substring of name, handle or description"),
    sort: str = Query(default="followers-desc", description="Sort order"),
    page: int = Query(default=1, ge=1, description="1-indexed page"),
    limit: int = Query(
        default=settings.DEFAULT_PAGE_LIMIT,
        ge=1,
        description="Results per page",
    ),
) -> FilterSpec:
    """Parse listing query parameters into a ``FilterSpec``.

    Enum values are checked here rather than by FastAPI so unknown values
    surface as a 400 "Invalid filter parameters" response.
    """
    try:
        return FilterSpec(
            platform=platform,
            follower_range=follower_range,
            region=region,
            topic=topic,
            search=search,
            sort=sort,
            page=page,
            limit=limit,
        )
    except ValidationError as exc:
        raise CandidateValidationError(
            "Invalid filter parameters",
            format_validation_errors(exc.errors()),
        ) from exc
