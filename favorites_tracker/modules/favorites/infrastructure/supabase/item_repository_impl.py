# 📄 File: favorites_tracker/modules/favorites/infrastructure/supabase/item_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves, finds, changes, deletes and searches items in the Supabase database.
#
# 🧪 Purpose (Technical Summary):
# Concrete ItemRepository over the PostgREST "items" table with write-time validation,
# case-insensitive name search (ilike) and exact per-collection counts.
#
# 🔗 Dependencies:
# - supabase (via SupabaseManager)
# - domain models, repository contract, validation
# - supabase/mappers.py, supabase/base.py
#
# 🔄 Connected Modules / Calls From:
# - RepositoryProvider.item_repository
# - Service container (ItemRepository factory binding)

"""
Item Repository Implementation

Rows are ordered by created_at so list and search results are stable.
Updating a missing item raises NotFoundError; deleting one is a no-op.
"""

from typing import List, Optional

from favorites_tracker.shared.core.exceptions import NotFoundError

from ...domain.models.item import Item
from ...domain.repositories.item_repository import ItemRepository
from ...domain.validation import validate_item
from .base import SupabaseRepository, ilike_pattern
from .mappers import ITEMS_TABLE, item_to_row, row_to_item


class SupabaseItemRepository(SupabaseRepository, ItemRepository):
    """Supabase implementation of the ItemRepository interface."""

    repository_name = "SupabaseItemRepository"
    table_name = ITEMS_TABLE
    resource_type = "item"

    async def get_items(self, user_id: str) -> List[Item]:
        with self._call("get_items"):
            response = self._table().select("*").eq("user_id", user_id).order("created_at").execute()
        return [row_to_item(row) for row in self._rows(response)]

    async def get_item(self, item_id: str) -> Optional[Item]:
        with self._call("get_item"):
            response = self._table().select("*").eq("id", item_id).limit(1).execute()
        row = self._first(response)
        return row_to_item(row) if row else None

    async def get_item_count(self, collection_id: str) -> int:
        with self._call("get_item_count"):
            response = (
                self._table()
                .select("id", count="exact")
                .eq("collection_id", collection_id)
                .execute()
            )
        if response.count is not None:
            return response.count
        return len(self._rows(response))

    async def create_item(self, item: Item) -> Item:
        validate_item(item)
        with self._call("create_item"):
            response = self._table().insert(item_to_row(item)).execute()
        row = self._first(response)
        return row_to_item(row) if row else item

    async def update_item(self, item: Item) -> Item:
        validate_item(item)
        with self._call("update_item"):
            response = self._table().update(item_to_row(item)).eq("id", item.id).execute()
            row = self._first(response)
            if row is None:
                raise NotFoundError(
                    message=f"Item {item.id} not found",
                    resource_type=self.resource_type,
                    resource_id=item.id,
                    operation="update_item"
                )
        return row_to_item(row)

    async def delete_item(self, item_id: str) -> None:
        with self._call("delete_item"):
            self._table().delete().eq("id", item_id).execute()

    async def search_items(self, query: str, user_id: str) -> List[Item]:
        with self._call("search_items"):
            response = (
                self._table()
                .select("*")
                .eq("user_id", user_id)
                .ilike("name", ilike_pattern(query))
                .order("created_at")
                .execute()
            )
        return [row_to_item(row) for row in self._rows(response)]
