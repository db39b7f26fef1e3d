# 📄 File: favorites_tracker/modules/favorites/domain/models/base.py
# 🧭 Purpose (Layman Explanation):
# The shared rules every stored record follows: it has an id, it knows when it was made and
# last changed, and "last changed" can never come before "made".
# 🧪 Purpose (Technical Summary):
# Pydantic base model enforcing non-empty ids and created_at <= updated_at, UTC timestamp
# normalisation, whole-record replacement helper, and the structural capability protocols
# (Entity, Favoritable, Taggable).
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid
# 🔄 Connected Modules / Calls From:
# user.py, profile.py, collection.py, item.py, template.py, repository implementations

import uuid
from datetime import datetime, timezone
from typing import List, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Mint a globally unique entity id."""
    return str(uuid.uuid4())


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# =============================================================================
# STRUCTURAL CAPABILITIES
# =============================================================================

@runtime_checkable
class Entity(Protocol):
    """Anything with a stable identity and lifecycle timestamps."""
    id: str
    created_at: datetime
    updated_at: datetime


@runtime_checkable
class Favoritable(Protocol):
    """Records exposing a mutable favorite flag."""
    is_favorite: bool


@runtime_checkable
class Taggable(Protocol):
    """Records exposing a mutable ordered tag list."""
    tags: List[str]


# =============================================================================
# BASE MODEL
# =============================================================================

class DomainModel(BaseModel):
    """
    Base for persisted entities.

    Identity and timestamps are frozen; subclasses freeze their other immutable
    fields the same way. Assignment to the remaining fields is validated.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(min_length=1, frozen=True)
    created_at: datetime = Field(frozen=True)
    updated_at: datetime = Field(frozen=True)

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        return as_utc(v)

    @model_validator(mode="after")
    def check_timestamps(self):
        if self.created_at > self.updated_at:
            raise ValueError("created_at must not be later than updated_at")
        return self

    def updated(self, **changes):
        """
        Return a replacement record with the given fields changed.

        ``updated_at`` is bumped to now unless passed explicitly. The original
        record is left untouched.
        """
        data = self.model_dump()
        data.update(changes)
        if "updated_at" not in changes:
            data["updated_at"] = max(utc_now(), self.created_at)
        return self.__class__.model_validate(data)
