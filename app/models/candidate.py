"""Pydantic models for the ``candidates`` table.

Attributes are snake_case (matching the table columns) and serialize to
camelCase on the wire.  ``id`` and ``created_at`` are assigned by the store,
so they are absent from the create / update payloads.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.core.constants import MAX_TOPICS, MIN_DESCRIPTION_LENGTH, MIN_TOPICS
from app.models.enums import Platform, Region, Topic


class CamelModel(BaseModel):
    """Base model accepting both snake_case and camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CandidateCreate(CamelModel):
    """Payload for creating a candidate (insert)."""
    name: str = Field(min_length=1)
    social_handle: str = Field(min_length=1)
    platform: Platform
    additional_platforms: list[Platform] = Field(default_factory=list)
    follower_count: int = Field(ge=0)
    region: Region
    topics: list[Topic] = Field(min_length=MIN_TOPICS, max_length=MAX_TOPICS)
    description: str = Field(min_length=MIN_DESCRIPTION_LENGTH)
    image_url: str | None = None
    is_recommended: bool = False
    is_favorite: bool = False


class CandidateUpdate(CamelModel):
    """Partial payload for updating a candidate.

    Only the fields present in the request are applied.  Sending ``null``
    is allowed for ``image_url`` alone.
    """
    name: str | None = Field(default=None, min_length=1)
    social_handle: str | None = Field(default=None, min_length=1)
    platform: Platform | None = None
    additional_platforms: list[Platform] | None = None
    follower_count: int | None = Field(default=None, ge=0)
    region: Region | None = None
    topics: list[Topic] | None = Field(
        default=None, min_length=MIN_TOPICS, max_length=MAX_TOPICS
    )
    description: str | None = Field(default=None, min_length=MIN_DESCRIPTION_LENGTH)
    image_url: str | None = None
    is_recommended: bool | None = None
    is_favorite: bool | None = None

    @model_validator(mode="after")
    def _reject_explicit_nulls(self) -> "CandidateUpdate":
        nulled = sorted(
            name
            for name in self.model_fields_set
            if name != "image_url" and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class Candidate(CamelModel):
    """Full candidate record returned from the store.

    Frozen: changes go through the store, which replaces the record.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )

    id: int
    name: str
    social_handle: str
    platform: Platform
    additional_platforms: list[Platform] = Field(default_factory=list)
    follower_count: int
    region: Region
    topics: list[Topic] = Field(default_factory=list)
    description: str
    image_url: str | None = None
    is_recommended: bool = False
    is_favorite: bool = False
    created_at: str

    @field_validator("additional_platforms", "topics", mode="before")
    @classmethod
    def _null_array_is_empty(cls, value: Any) -> Any:
        # text[] columns are nullable in the table
        return [] if value is None else value

    @field_validator("is_recommended", "is_favorite", mode="before")
    @classmethod
    def _null_flag_is_false(cls, value: Any) -> Any:
        return False if value is None else value
