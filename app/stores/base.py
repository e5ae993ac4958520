"""Record store interface for candidates.

Concrete stores only implement persistence primitives.  Querying is shared:
``scan`` yields candidates in natural order and the query engine does the
rest, so every backend returns the same pages for the same data.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone

from app.models.candidate import Candidate, CandidateCreate, CandidateUpdate
from app.models.filters import FilterSpec
from app.services.query_engine import QueryResult, run_query, select_candidates


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return now.replace("+00:00", "Z")


class CandidateStore(ABC):
    """Authoritative holder of candidate records, keyed by integer id."""

    @abstractmethod
    def insert(self, data: CandidateCreate) -> Candidate:
        """Assign the next id and creation timestamp, store and return."""

    @abstractmethod
    def update(self, candidate_id: int, data: CandidateUpdate) -> Candidate:
        """Merge the fields present in *data*.

        Raises ``CandidateNotFoundError`` if the id does not exist.
        """

    @abstractmethod
    def delete(self, candidate_id: int) -> bool:
        """Remove a candidate; return whether one existed."""

    @abstractmethod
    def get_by_id(self, candidate_id: int) -> Candidate:
        """Raises ``CandidateNotFoundError`` if the id does not exist."""

    @abstractmethod
    def toggle_favorite(self, candidate_id: int) -> Candidate:
        """Flip ``is_favorite`` as one read-then-write step."""

    @abstractmethod
    def all(self) -> list[Candidate]:
        """Every candidate in natural order (insertion / primary key)."""

    def scan(self, spec: FilterSpec) -> list[Candidate]:
        """Candidates that may match *spec*, in natural order.

        Backends may narrow the result, but never drop a true match.
        """
        return self.all()

    def select(self, spec: FilterSpec) -> list[Candidate]:
        """All candidates matching *spec*, sorted, without pagination."""
        return select_candidates(self.scan(spec), spec)

    def query(self, spec: FilterSpec) -> QueryResult:
        """One page of matching candidates plus the total match count."""
        return run_query(self.scan(spec), spec)

    def ping(self) -> bool:
        """Return True if the backend is reachable; may raise."""
        return True
