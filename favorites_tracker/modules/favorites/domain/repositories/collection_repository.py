# 📄 File: favorites_tracker/modules/favorites/domain/repositories/collection_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for saving, finding, changing and deleting a user's collections.
# 🧪 Purpose (Technical Summary):
# Repository interface for Collection entities.
# 🔗 Dependencies:
# Domain models (Collection), typing, abc
# 🔄 Connected Modules / Calls From:
# Supabase collection implementation, in-memory collection fake, service assembly

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.collection import Collection


class CollectionRepository(ABC):
    """Repository interface for Collection entity data access operations."""

    @abstractmethod
    async def get_collections(self, user_id: str) -> List[Collection]:
        """Get every collection owned by user_id."""
        pass

    @abstractmethod
    async def get_collection(self, collection_id: str) -> Optional[Collection]:
        """Get collection by ID, or None if it does not exist."""
        pass

    @abstractmethod
    async def create_collection(self, collection: Collection) -> Collection:
        """
        Store a new collection.

        Raises:
            ValidationError: If the collection violates write-time rules
        """
        pass

    @abstractmethod
    async def update_collection(self, collection: Collection) -> Collection:
        """
        Replace an existing collection with the given record.

        Raises:
            NotFoundError: If a backend has no collection with that ID
        """
        pass

    @abstractmethod
    async def delete_collection(self, collection_id: str) -> None:
        """Delete a collection. Deleting a missing collection is a no-op."""
        pass
