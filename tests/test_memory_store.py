"""Unit tests for the in-memory candidate store."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest
from pydantic import ValidationError

from app.core.exceptions import CandidateNotFoundError
from app.models.candidate import CandidateCreate, CandidateUpdate
from app.models.enums import Platform, Topic
from app.stores.memory import MemoryCandidateStore


class TestInsertAndLookup:
    """Insert assigns id / timestamp; lookup returns the stored record."""

    def test_insert_then_get_round_trip(
        self, store: MemoryCandidateStore, candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        payload = candidate_payload(image_url="https://example.com/a.png")
        created = store.insert(payload)

        assert created.id == 1
        assert created.created_at == "2026-01-01T00:00:00.000Z"
        fetched = store.get_by_id(created.id)
        assert fetched == created
        assert fetched.model_dump(exclude={"id", "created_at"}) == payload.model_dump()

    def test_ids_increase_and_are_never_reused(
        self, store: MemoryCandidateStore, candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        first = store.insert(candidate_payload())
        second = store.insert(candidate_payload())
        store.delete(second.id)
        third = store.insert(candidate_payload())
        assert (first.id, second.id, third.id) == (1, 2, 3)

    def test_returned_record_cannot_alter_store(
        self, store: MemoryCandidateStore, candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        """Given a returned record, neither assignment nor list mutation reaches the store."""
        created = store.insert(candidate_payload(topics=["dating"]))
        with pytest.raises(ValidationError):
            created.name = "mutated"
        created.topics.append(Topic.wellness)
        store.all()[0].additional_platforms.append(Platform.youtube)

        stored = store.get_by_id(created.id)
        assert stored.name == "Ada Lovelace"
        assert stored.topics == [Topic.dating]
        assert stored.additional_platforms == []

    def test_insert_and_delete_are_logged(
        self,
        store: MemoryCandidateStore,
        candidate_payload: Callable[..., CandidateCreate],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="app.stores.memory"):
            created = store.insert(candidate_payload())
            store.delete(created.id)
        messages = [r.getMessage() for r in caplog.records]
        assert "memory_candidate_inserted" in messages
        assert "memory_candidate_deleted" in messages

    def test_get_missing_raises(self, store: MemoryCandidateStore) -> None:
        with pytest.raises(CandidateNotFoundError):
            store.get_by_id(99)

    def test_separate_stores_are_independent(
        self, clock: Callable[[], str], candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        one = MemoryCandidateStore(clock=clock)
        two = MemoryCandidateStore(clock=clock)
        one.insert(candidate_payload())
        assert two.all() == []
        assert two.insert(candidate_payload()).id == 1


class TestUpdate:
    """Partial update merges only the given fields."""

    def test_update_merges_given_fields(
        self, store: MemoryCandidateStore, candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        created = store.insert(candidate_payload())
        updated = store.update(
            created.id, CandidateUpdate(follower_count=9000, platform="youtube")
        )
        assert updated.follower_count == 9000
        assert updated.platform == Platform.youtube
        assert updated.name == created.name
        assert updated.topics == created.topics
        assert updated.created_at == created.created_at
        assert store.get_by_id(created.id) == updated

    def test_empty_update_is_noop(
        self, store: MemoryCandidateStore, candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        created = store.insert(candidate_payload())
        assert store.update(created.id, CandidateUpdate()) == created

    def test_update_can_clear_image_url(
        self, store: MemoryCandidateStore, candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        created = store.insert(candidate_payload(image_url="https://example.com/x.png"))
        updated = store.update(created.id, CandidateUpdate(image_url=None))
        assert updated.image_url is None

    def test_update_missing_raises(self, store: MemoryCandidateStore) -> None:
        with pytest.raises(CandidateNotFoundError):
            store.update(5, CandidateUpdate(name="Nobody"))

    def test_update_keeps_natural_order(
        self, store: MemoryCandidateStore, candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        for idx in range(3):
            store.insert(candidate_payload(name=f"n{idx}"))
        store.update(1, CandidateUpdate(name="renamed"))
        assert [c.id for c in store.all()] == [1, 2, 3]

    def test_explicit_null_rejected_for_required_field(self) -> None:
        with pytest.raises(ValidationError):
            CandidateUpdate(name=None)


class TestDelete:
    """Delete reports whether a record existed."""

    def test_delete_then_get_not_found(
        self, store: MemoryCandidateStore, candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        created = store.insert(candidate_payload())
        assert store.delete(created.id) is True
        with pytest.raises(CandidateNotFoundError):
            store.get_by_id(created.id)

    def test_delete_missing_returns_false(self, store: MemoryCandidateStore) -> None:
        assert store.delete(1) is False


class TestToggleFavorite:
    """Toggle flips once; a double toggle restores the original state."""

    def test_single_toggle_flips(
        self, store: MemoryCandidateStore, candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        created = store.insert(candidate_payload())
        toggled = store.toggle_favorite(created.id)
        assert toggled.is_favorite is True
        assert store.get_by_id(created.id).is_favorite is True

    def test_double_toggle_restores(
        self, store: MemoryCandidateStore, candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        created = store.insert(candidate_payload(is_favorite=True))
        store.toggle_favorite(created.id)
        restored = store.toggle_favorite(created.id)
        assert restored == created

    def test_toggle_missing_raises(self, store: MemoryCandidateStore) -> None:
        with pytest.raises(CandidateNotFoundError):
            store.toggle_favorite(3)


class TestCreateValidation:
    """Input boundary rules on ``CandidateCreate``."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": ""},
            {"social_handle": ""},
            {"platform": "myspace"},
            {"region": "fr"},
            {"follower_count": -1},
            {"topics": []},
            {"topics": ["dating", "wellness", "confidence", "mindfulness"]},
            {"topics": ["cooking"]},
            {"description": "too short"},
            {"additional_platforms": ["fax"]},
        ],
    )
    def test_invalid_payloads_rejected(
        self, overrides: dict, candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        with pytest.raises(ValidationError):
            candidate_payload(**overrides)

    def test_defaults_and_duplicate_platforms(
        self, candidate_payload: Callable[..., CandidateCreate]
    ) -> None:
        payload = candidate_payload(additional_platforms=["youtube", "youtube"])
        assert payload.additional_platforms == [Platform.youtube, Platform.youtube]
        assert payload.is_favorite is False
        assert payload.is_recommended is False
        assert payload.image_url is None

    def test_accepts_camel_case_keys(self) -> None:
        payload = CandidateCreate.model_validate({
            "name": "Zed",
            "socialHandle": "@zed",
            "platform": "podcast",
            "followerCount": "1500",
            "region": "au",
            "topics": ["podcasting"],
            "description": "Hosts a long running show.",
        })
        assert payload.social_handle == "@zed"
        assert payload.follower_count == 1500
