# 📄 File: favorites_tracker/modules/favorites/domain/repositories/item_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for saving, finding, changing, deleting and searching the items
# inside a user's collections.
# 🧪 Purpose (Technical Summary):
# Repository interface for Item entities following the Repository pattern and
# dependency inversion principle.
# 🔗 Dependencies:
# Domain models (Item), typing, abc
# 🔄 Connected Modules / Calls From:
# Supabase item implementation, in-memory item fake, service assembly

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.item import Item


class ItemRepository(ABC):
    """
    Repository interface for Item entity data access operations.

    Implementation Notes:
    - Concrete implementations are in the infrastructure layer
    - Methods return domain entities (Item), not rows
    - All operations are async and each mutation is atomic from the caller's view
    """

    @abstractmethod
    async def get_items(self, user_id: str) -> List[Item]:
        """
        Get every item owned by a user.

        Args:
            user_id: Owner ID

        Returns:
            List of Item entities belonging to user_id only
        """
        pass

    @abstractmethod
    async def get_item(self, item_id: str) -> Optional[Item]:
        """
        Get item by ID.

        Args:
            item_id: Item ID to find

        Returns:
            Item entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_item_count(self, collection_id: str) -> int:
        """
        Count the items in a collection.

        Args:
            collection_id: Collection ID

        Returns:
            Number of items whose collection_id matches
        """
        pass

    @abstractmethod
    async def create_item(self, item: Item) -> Item:
        """
        Store a new item.

        Args:
            item: Item entity to create

        Returns:
            Stored Item entity

        Raises:
            ValidationError: If the item violates write-time rules
            RepositoryError: If the backend operation fails
        """
        pass

    @abstractmethod
    async def update_item(self, item: Item) -> Item:
        """
        Replace an existing item with the given record.

        Args:
            item: Item entity with updated data

        Returns:
            Updated Item entity

        Raises:
            NotFoundError: If a backend has no item with that ID
            ValidationError: If the item violates write-time rules
        """
        pass

    @abstractmethod
    async def delete_item(self, item_id: str) -> None:
        """
        Delete an item. Deleting a missing item is a no-op.

        Args:
            item_id: Item ID to delete
        """
        pass

    @abstractmethod
    async def search_items(self, query: str, user_id: str) -> List[Item]:
        """
        Search a user's items by name.

        Matches a case-insensitive substring of the name. There is no relevance
        ranking; result order is stable for a given store.

        Args:
            query: Substring to look for
            user_id: Owner ID; only this user's items are returned

        Returns:
            Matching Item entities
        """
        pass
