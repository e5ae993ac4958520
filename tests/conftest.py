"""Shared test fixtures.

Provides a deterministic clock, a candidate payload factory, an empty
in-memory store, and a FastAPI ``test_client`` backed by a fresh store.
"""

from collections.abc import Callable, Generator
from datetime import datetime, timedelta, timezone
from itertools import count
from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.models.candidate import CandidateCreate
from app.stores.memory import MemoryCandidateStore

START = datetime(2026, 1, 1, tzinfo=timezone.utc)


def sequential_clock() -> Callable[[], str]:
    """Return a clock that advances one minute per call."""
    ticks = count()

    def clock() -> str:
        moment = START + timedelta(minutes=next(ticks))
        return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    return clock


@pytest.fixture()
def make_clock() -> Callable[[], Callable[[], str]]:
    """Factory for independent sequential clocks."""
    return sequential_clock


@pytest.fixture()
def clock() -> Callable[[], str]:
    return sequential_clock()


@pytest.fixture()
def candidate_payload() -> Callable[..., CandidateCreate]:
    """Factory for valid ``CandidateCreate`` payloads with overrides."""

    def _make(**overrides: Any) -> CandidateCreate:
        data: dict[str, Any] = {
            "name": "Ada Lovelace",
            "social_handle": "@ada",
            "platform": "tiktok",
            "additional_platforms": [],
            "follower_count": 1000,
            "region": "us",
            "topics": ["wellness"],
            "description": "Talks about wellness and personal growth.",
        }
        data.update(overrides)
        return CandidateCreate(**data)

    return _make


@pytest.fixture()
def store(clock: Callable[[], str]) -> MemoryCandidateStore:
    """An empty in-memory store with a deterministic clock."""
    return MemoryCandidateStore(clock=clock)


@pytest.fixture()
def api_payload() -> dict[str, Any]:
    """A valid camelCase JSON body for POST /api/candidates."""
    return {
        "name": "Grace Hopper",
        "socialHandle": "@grace",
        "platform": "youtube",
        "additionalPlatforms": ["podcast"],
        "followerCount": 42000,
        "region": "uk",
        "topics": ["confidence", "life-coaching"],
        "description": "Coaches founders on confident public speaking.",
        "imageUrl": "https://example.com/grace.png",
    }


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient; each one starts with an empty store."""
    from app.main import app

    with TestClient(app) as client:
        yield client
