# 📄 File: favorites_tracker/modules/favorites/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for reading, saving and deleting user profiles.
# 🧪 Purpose (Technical Summary):
# Repository interface for UserProfile entities. update_user_profile is an upsert.
# 🔗 Dependencies:
# Domain models (UserProfile), typing, abc
# 🔄 Connected Modules / Calls From:
# Supabase user implementation, in-memory user fake, Supabase auth sign-up

from abc import ABC, abstractmethod
from typing import Optional

from ..models.profile import UserProfile


class UserRepository(ABC):
    """Repository interface for UserProfile data access operations."""

    @abstractmethod
    async def get_user_profile(self, profile_id: str) -> Optional[UserProfile]:
        """
        Get profile by ID.

        Args:
            profile_id: Profile ID to find

        Returns:
            UserProfile if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_user_profile(self, profile: UserProfile) -> UserProfile:
        """
        Insert or replace a profile.

        Args:
            profile: Profile to store

        Returns:
            Stored UserProfile

        Raises:
            ValidationError: If the profile violates write-time rules
        """
        pass

    @abstractmethod
    async def delete_user_profile(self, profile_id: str) -> None:
        """Delete a profile. Deleting a missing profile is a no-op."""
        pass
