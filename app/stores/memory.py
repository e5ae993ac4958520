"""In-memory candidate store.

Records live in an insertion-ordered dict keyed by id.  A lock serializes
mutations so ``toggle_favorite`` cannot interleave with another write.
Callers always receive copies; the dict holds the only authoritative
records.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from app.core.exceptions import CandidateNotFoundError
from app.models.candidate import Candidate, CandidateCreate, CandidateUpdate
from app.stores.base import CandidateStore, utc_timestamp

logger = logging.getLogger(__name__)


def _detached(candidate: Candidate) -> Candidate:
    # Deep copy so list fields cannot be mutated through the returned object
    return candidate.model_copy(deep=True)


class MemoryCandidateStore(CandidateStore):
    """Process-local store; each instance starts empty with id 1."""

    def __init__(self, clock: Callable[[], str] = utc_timestamp) -> None:
        self._candidates: dict[int, Candidate] = {}
        self._next_id = 1
        self._clock = clock
        self._lock = threading.Lock()

    def insert(self, data: CandidateCreate) -> Candidate:
        with self._lock:
            candidate = Candidate(
                id=self._next_id,
                created_at=self._clock(),
                **data.model_dump(),
            )
            self._candidates[candidate.id] = candidate
            self._next_id += 1
        logger.debug("memory_candidate_inserted", extra={"candidate_id": candidate.id})
        return _detached(candidate)

    def update(self, candidate_id: int, data: CandidateUpdate) -> Candidate:
        with self._lock:
            existing = self._candidates.get(candidate_id)
            if existing is None:
                raise CandidateNotFoundError(candidate_id)
            updated = existing.model_copy(update=data.changes(), deep=True)
            self._candidates[candidate_id] = updated
        return _detached(updated)

    def delete(self, candidate_id: int) -> bool:
        with self._lock:
            removed = self._candidates.pop(candidate_id, None) is not None
        if removed:
            logger.debug("memory_candidate_deleted", extra={"candidate_id": candidate_id})
        return removed

    def get_by_id(self, candidate_id: int) -> Candidate:
        candidate = self._candidates.get(candidate_id)
        if candidate is None:
            raise CandidateNotFoundError(candidate_id)
        return _detached(candidate)

    def toggle_favorite(self, candidate_id: int) -> Candidate:
        with self._lock:
            existing = self._candidates.get(candidate_id)
            if existing is None:
                raise CandidateNotFoundError(candidate_id)
            updated = existing.model_copy(
                update={"is_favorite": not existing.is_favorite}
            )
            self._candidates[candidate_id] = updated
        return _detached(updated)

    def all(self) -> list[Candidate]:
        with self._lock:
            return [_detached(c) for c in self._candidates.values()]
