"""
Row mappers between domain entities and Supabase (PostgREST) table rows.

Entities are written with ``model_dump(mode="json")`` plus a derived ``search_terms``
column, and read back with ``model_validate``. Columns the entity does not declare
(``search_terms`` and anything the database adds) are ignored on read.
"""

from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ...domain.models.collection import Collection
from ...domain.models.item import Item
from ...domain.models.profile import UserProfile
from ...domain.models.template import Template
from ...domain.models.user import User

# Table names
USERS_TABLE = "users"
USER_PROFILES_TABLE = "user_profiles"
COLLECTIONS_TABLE = "collections"
ITEMS_TABLE = "items"
TEMPLATES_TABLE = "templates"

SEARCH_TERMS_COLUMN = "search_terms"

M = TypeVar("M", bound=BaseModel)


def build_search_terms(name: str, tags: Iterable[str] = (), category: Optional[str] = None) -> List[str]:
    """Lower-cased name words, tags and category, de-duplicated in order."""
    terms: List[str] = []
    candidates = name.lower().split() + [tag.lower() for tag in tags]
    if category:
        candidates.append(category.lower())
    for term in candidates:
        if term and term not in terms:
            terms.append(term)
    return terms


def model_to_row(model: BaseModel) -> Dict[str, Any]:
    return model.model_dump(mode="json")


def row_to_model(model_cls: Type[M], row: Dict[str, Any]) -> M:
    known = {key: value for key, value in row.items() if key in model_cls.model_fields}
    return model_cls.model_validate(known)


# =============================================================================
# ENTITY MAPPERS
# =============================================================================

def user_to_row(user: User) -> Dict[str, Any]:
    return model_to_row(user)


def row_to_user(row: Dict[str, Any]) -> User:
    return row_to_model(User, row)


def profile_to_row(profile: UserProfile) -> Dict[str, Any]:
    return model_to_row(profile)


def row_to_profile(row: Dict[str, Any]) -> UserProfile:
    return row_to_model(UserProfile, row)


def collection_to_row(collection: Collection) -> Dict[str, Any]:
    row = model_to_row(collection)
    row[SEARCH_TERMS_COLUMN] = build_search_terms(collection.name, collection.tags)
    return row


def row_to_collection(row: Dict[str, Any]) -> Collection:
    return row_to_model(Collection, row)


def item_to_row(item: Item) -> Dict[str, Any]:
    row = model_to_row(item)
    row[SEARCH_TERMS_COLUMN] = build_search_terms(item.name, item.tags)
    return row


def row_to_item(row: Dict[str, Any]) -> Item:
    return row_to_model(Item, row)


def template_to_row(template: Template) -> Dict[str, Any]:
    row = model_to_row(template)
    row[SEARCH_TERMS_COLUMN] = build_search_terms(template.name, template.tags, template.category)
    return row


def row_to_template(row: Dict[str, Any]) -> Template:
    return row_to_model(Template, row)
