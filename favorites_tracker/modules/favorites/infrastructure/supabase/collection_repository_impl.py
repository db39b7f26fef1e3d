# 📄 File: favorites_tracker/modules/favorites/infrastructure/supabase/collection_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves, finds, changes and deletes collections in the Supabase database.
# 🧪 Purpose (Technical Summary):
# Concrete CollectionRepository over the PostgREST "collections" table.
# 🔗 Dependencies:
# supabase (via SupabaseManager), domain models, validation, mappers
# 🔄 Connected Modules / Calls From:
# RepositoryProvider.collection_repository

from typing import List, Optional

from favorites_tracker.shared.core.exceptions import NotFoundError

from ...domain.models.collection import Collection
from ...domain.repositories.collection_repository import CollectionRepository
from ...domain.validation import validate_collection
from .base import SupabaseRepository
from .mappers import COLLECTIONS_TABLE, collection_to_row, row_to_collection


class SupabaseCollectionRepository(SupabaseRepository, CollectionRepository):
    """Supabase implementation of the CollectionRepository interface."""

    repository_name = "SupabaseCollectionRepository"
    table_name = COLLECTIONS_TABLE
    resource_type = "collection"

    async def get_collections(self, user_id: str) -> List[Collection]:
        with self._call("get_collections"):
            response = self._table().select("*").eq("user_id", user_id).order("created_at").execute()
        return [row_to_collection(row) for row in self._rows(response)]

    async def get_collection(self, collection_id: str) -> Optional[Collection]:
        with self._call("get_collection"):
            response = self._table().select("*").eq("id", collection_id).limit(1).execute()
        row = self._first(response)
        return row_to_collection(row) if row else None

    async def create_collection(self, collection: Collection) -> Collection:
        validate_collection(collection)
        with self._call("create_collection"):
            response = self._table().insert(collection_to_row(collection)).execute()
        row = self._first(response)
        return row_to_collection(row) if row else collection

    async def update_collection(self, collection: Collection) -> Collection:
        validate_collection(collection)
        with self._call("update_collection"):
            response = (
                self._table()
                .update(collection_to_row(collection))
                .eq("id", collection.id)
                .execute()
            )
            row = self._first(response)
            if row is None:
                raise NotFoundError(
                    message=f"Collection {collection.id} not found",
                    resource_type=self.resource_type,
                    resource_id=collection.id,
                    operation="update_collection"
                )
        return row_to_collection(row)

    async def delete_collection(self, collection_id: str) -> None:
        with self._call("delete_collection"):
            self._table().delete().eq("id", collection_id).execute()
