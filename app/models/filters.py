"""Filter models for candidate listings and saved-filter match counts.

An empty string in any single-value filter means "no filter", mirroring how
the listing endpoint receives unset query parameters.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.models.candidate import CamelModel
from app.models.enums import FollowerRange, Platform, Region, SortOrder, Topic


def _blank_search(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


class FilterSpec(CamelModel):
    """Constraints, ordering and page window for a candidate query."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    platform: Platform | None = None
    region: Region | None = None
    topic: Topic | None = None
    follower_range: FollowerRange | None = None
    search: str | None = None
    sort: SortOrder = SortOrder.followers_desc
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)

    @field_validator("platform", "region", "topic", "follower_range", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Any:
        return None if value == "" else value

    @field_validator("search", mode="before")
    @classmethod
    def _blank_search_is_unset(cls, value: Any) -> Any:
        return _blank_search(value)

    @field_validator("sort", mode="before")
    @classmethod
    def _blank_sort_is_default(cls, value: Any) -> Any:
        return SortOrder.followers_desc if value in ("", None) else value


class SavedFilterCriteria(CamelModel):
    """Multi-valued filter definition used to preview match counts.

    Values inside one list are alternatives; the lists themselves, and the
    ``favorite`` / ``recommended`` flags, must all hold.  The bucket list is
    also accepted under the saved-filter key ``followerRange``; unknown keys
    are rejected.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    platforms: list[Platform] = Field(default_factory=list)
    regions: list[Region] = Field(default_factory=list)
    topics: list[Topic] = Field(default_factory=list)
    follower_ranges: list[FollowerRange] = Field(
        default_factory=list,
        validation_alias=AliasChoices("followerRange", "followerRanges", "follower_ranges"),
    )
    favorite: bool = False
    recommended: bool = False
    search: str | None = None

    @field_validator("search", mode="before")
    @classmethod
    def _blank_search_is_unset(cls, value: Any) -> Any:
        return _blank_search(value)

    @classmethod
    def from_filter_spec(cls, spec: FilterSpec) -> SavedFilterCriteria:
        """Lift a single-valued ``FilterSpec`` into equivalent criteria."""
        return cls(
            platforms=[spec.platform] if spec.platform else [],
            regions=[spec.region] if spec.region else [],
            topics=[spec.topic] if spec.topic else [],
            follower_ranges=[spec.follower_range] if spec.follower_range else [],
            search=spec.search,
        )


class MatchCountResponse(CamelModel):
    """Response for POST /api/filters/match-count."""
    matches: int
