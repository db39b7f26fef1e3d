# 📄 File: favorites_tracker/modules/favorites/domain/models/template.py
# 🧭 Purpose (Layman Explanation):
# A template is a reusable recipe for a collection: it lists the form fields every item
# should have, and can be shared publicly so others can download it.
# 🧪 Purpose (Technical Summary):
# Template entity (Favoritable, Taggable) with ordered ComponentDefinitions, public and
# premium flags and a download counter used for featured ordering.
# 🔗 Dependencies:
# pydantic, typing, models.base, models.fields
# 🔄 Connected Modules / Calls From:
# TemplateRepository implementations, domain/validation.py

from typing import List, Optional

from pydantic import Field

from .base import DomainModel, new_id, utc_now
from .fields import ComponentDefinition


class Template(DomainModel):
    """Reusable collection blueprint."""

    creator_id: str = Field(min_length=1, frozen=True)
    name: str = Field(frozen=True)
    description: str = Field(frozen=True)
    category: str = Field(frozen=True)
    components: List[ComponentDefinition] = Field(default_factory=list, frozen=True)
    preview_image_url: Optional[str] = Field(None, frozen=True)
    is_favorite: bool = False
    tags: List[str] = Field(default_factory=list)
    is_public: bool = Field(False, frozen=True)
    is_premium: bool = Field(False, frozen=True)
    download_count: int = Field(0, ge=0, frozen=True)
    rating: Optional[float] = Field(None, frozen=True)

    @classmethod
    def create_new(cls, creator_id: str, name: str, description: str, category: str) -> "Template":
        """New templates start private, non-premium, with no components or downloads."""
        now = utc_now()
        return cls(
            id=new_id(),
            creator_id=creator_id,
            name=name,
            description=description,
            category=category,
            created_at=now,
            updated_at=now,
        )
