"""Supabase-backed candidate store.

Maps the store interface onto the ``candidates`` table through the
PostgREST query builder.  Predicates that are exact in SQL (platform,
region, topic containment, follower bounds) narrow the scan server-side;
search, ordering and pagination always run in the shared query engine so
results match the in-memory store row for row.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from supabase import Client

from app.core.constants import FOLLOWER_RANGE_BOUNDS
from app.core.exceptions import CandidateNotFoundError
from app.models.candidate import Candidate, CandidateCreate, CandidateUpdate
from app.models.filters import FilterSpec
from app.stores.base import CandidateStore, utc_timestamp

logger = logging.getLogger(__name__)

# PostgREST caps responses (1000 rows by default); scans page through it.
FETCH_CHUNK_SIZE = 1000

# Compare-and-set attempts for toggle_favorite before giving up.
TOGGLE_ATTEMPTS = 3


def _narrow(request: Any, spec: FilterSpec) -> Any:
    """Add the SQL-exact parts of *spec* to a select request."""
    if spec.platform is not None:
        request = request.eq("platform", spec.platform.value)
    if spec.region is not None:
        request = request.eq("region", spec.region.value)
    if spec.topic is not None:
        request = request.contains("topics", [spec.topic.value])
    if spec.follower_range is not None:
        low, high = FOLLOWER_RANGE_BOUNDS[spec.follower_range]
        request = request.gte("follower_count", low)
        if high is not None:
            request = request.lt("follower_count", high)
    return request


class SupabaseCandidateStore(CandidateStore):
    """Store backed by a relational ``candidates`` table."""

    def __init__(
        self,
        client: Client,
        table: str = "candidates",
        clock: Callable[[], str] = utc_timestamp,
    ) -> None:
        self._client = client
        self._table_name = table
        self._clock = clock

    def _table(self) -> Any:
        return self._client.table(self._table_name)

    def _fetch(self, spec: FilterSpec | None = None) -> list[Candidate]:
        rows: list[dict[str, Any]] = []
        start = 0
        while True:
            request = self._table().select("*")
            if spec is not None:
                request = _narrow(request, spec)
            result = (
                request.order("id")
                .range(start, start + FETCH_CHUNK_SIZE - 1)
                .execute()
            )
            batch = result.data or []
            rows.extend(batch)
            if len(batch) < FETCH_CHUNK_SIZE:
                break
            start += FETCH_CHUNK_SIZE
        return [Candidate.model_validate(row) for row in rows]

    def insert(self, data: CandidateCreate) -> Candidate:
        row = data.model_dump(mode="json")
        row["created_at"] = self._clock()
        result = self._table().insert(row).execute()
        candidate = Candidate.model_validate(result.data[0])
        logger.debug(
            "supabase_candidate_inserted",
            extra={"candidate_id": candidate.id},
        )
        return candidate

    def update(self, candidate_id: int, data: CandidateUpdate) -> Candidate:
        changes = data.model_dump(mode="json", exclude_unset=True)
        if not changes:
            return self.get_by_id(candidate_id)
        result = self._table().update(changes).eq("id", candidate_id).execute()
        if not result.data:
            raise CandidateNotFoundError(candidate_id)
        return Candidate.model_validate(result.data[0])

    def delete(self, candidate_id: int) -> bool:
        result = self._table().delete().eq("id", candidate_id).execute()
        return bool(result.data)

    def get_by_id(self, candidate_id: int) -> Candidate:
        result = (
            self._table()
            .select("*")
            .eq("id", candidate_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            raise CandidateNotFoundError(candidate_id)
        return Candidate.model_validate(result.data[0])

    def toggle_favorite(self, candidate_id: int) -> Candidate:
        """Flip ``is_favorite`` with a conditional update.

        The write only lands if the flag still holds the value just read;
        otherwise the row is re-read and the flip is attempted again.
        """
        for _ in range(TOGGLE_ATTEMPTS):
            current = self.get_by_id(candidate_id)
            result = (
                self._table()
                .update({"is_favorite": not current.is_favorite})
                .eq("id", candidate_id)
                .eq("is_favorite", current.is_favorite)
                .execute()
            )
            if result.data:
                return Candidate.model_validate(result.data[0])
            logger.warning(
                "toggle_favorite_conflict",
                extra={"candidate_id": candidate_id},
            )
        raise RuntimeError(
            f"Could not toggle favorite for candidate {candidate_id}: "
            "concurrent updates"
        )

    def all(self) -> list[Candidate]:
        return self._fetch()

    def scan(self, spec: FilterSpec) -> list[Candidate]:
        return self._fetch(spec)

    def ping(self) -> bool:
        self._table().select("id").limit(1).execute()
        return True
