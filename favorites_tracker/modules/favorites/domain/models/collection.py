# 📄 File: favorites_tracker/modules/favorites/domain/models/collection.py
# 🧭 Purpose (Layman Explanation):
# A collection is a named group of favorite things a user keeps together, like "Coffee Mugs"
# or "Board Games", optionally started from a template.
# 🧪 Purpose (Technical Summary):
# Collection entity (Favoritable, Taggable) with a cached, non-authoritative item count and
# a weak template reference used only for lookup.
# 🔗 Dependencies:
# pydantic, typing, models.base
# 🔄 Connected Modules / Calls From:
# CollectionRepository implementations, domain/validation.py

from typing import List, Optional

from pydantic import Field

from .base import DomainModel, new_id, utc_now


class Collection(DomainModel):
    """Group of items owned by one user."""

    user_id: str = Field(min_length=1, frozen=True)
    name: str = Field(frozen=True)
    description: Optional[str] = Field(None, frozen=True)
    template_id: Optional[str] = Field(None, frozen=True)  # weak reference, lookup only
    item_count: int = Field(0, frozen=True)                 # cached, not authoritative
    cover_image_url: Optional[str] = Field(None, frozen=True)
    is_favorite: bool = False
    tags: List[str] = Field(default_factory=list)
    is_public: bool = Field(False, frozen=True)

    @classmethod
    def create_new(
        cls,
        user_id: str,
        name: str,
        template_id: Optional[str] = None,
        description: Optional[str] = None
    ) -> "Collection":
        """New collections start empty, private, unfavorited and untagged."""
        now = utc_now()
        return cls(
            id=new_id(),
            user_id=user_id,
            name=name,
            description=description,
            template_id=template_id,
            item_count=0,
            is_favorite=False,
            tags=[],
            is_public=False,
            created_at=now,
            updated_at=now,
        )
