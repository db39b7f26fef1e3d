# 📄 File: favorites_tracker/modules/favorites/domain/models/item.py
# 🧭 Purpose (Layman Explanation):
# An item is one favorite thing inside a collection, with photos, custom details,
# an optional place and a star rating.
# 🧪 Purpose (Technical Summary):
# Item entity (Favoritable, Taggable) owned by a Collection, carrying image URLs, a
# key -> CustomFieldValue mapping, optional Location and rating.
# 🔗 Dependencies:
# pydantic, typing, models.base, models.fields
# 🔄 Connected Modules / Calls From:
# ItemRepository implementations, domain/validation.py

from typing import Dict, List, Optional

from pydantic import Field

from .base import DomainModel, new_id, utc_now
from .fields import CustomFieldValue, Location


class Item(DomainModel):
    """Single trackable item inside a collection."""

    user_id: str = Field(min_length=1, frozen=True)
    collection_id: str = Field(min_length=1, frozen=True)
    name: str = Field(frozen=True)
    description: Optional[str] = Field(None, frozen=True)
    image_urls: List[str] = Field(default_factory=list, frozen=True)
    custom_fields: Dict[str, CustomFieldValue] = Field(default_factory=dict, frozen=True)
    is_favorite: bool = False
    tags: List[str] = Field(default_factory=list)
    location: Optional[Location] = Field(None, frozen=True)
    rating: Optional[float] = Field(None, frozen=True)

    @classmethod
    def create_new(cls, user_id: str, collection_id: str, name: str) -> "Item":
        """Create an item with no images, fields, tags, location or rating."""
        now = utc_now()
        return cls(
            id=new_id(),
            user_id=user_id,
            collection_id=collection_id,
            name=name,
            created_at=now,
            updated_at=now,
        )

    def custom_field_strings(self) -> Dict[str, str]:
        """Canonical string projection of every custom field."""
        return {key: value.string_value for key, value in self.custom_fields.items()}
