# 📄 File: favorites_tracker/modules/favorites/infrastructure/supabase/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads, saves and deletes user profiles in the Supabase database.
# 🧪 Purpose (Technical Summary):
# Concrete UserRepository over the PostgREST "user_profiles" table; update is an upsert.
# 🔗 Dependencies:
# supabase (via SupabaseManager), domain models, validation, mappers
# 🔄 Connected Modules / Calls From:
# RepositoryProvider.user_repository, SupabaseAuthRepository.sign_up

from typing import Optional

from ...domain.models.profile import UserProfile
from ...domain.repositories.user_repository import UserRepository
from ...domain.validation import validate_user_profile
from .base import SupabaseRepository
from .mappers import USER_PROFILES_TABLE, profile_to_row, row_to_profile


class SupabaseUserRepository(SupabaseRepository, UserRepository):
    """Supabase implementation of the UserRepository interface."""

    repository_name = "SupabaseUserRepository"
    table_name = USER_PROFILES_TABLE
    resource_type = "user_profile"

    async def get_user_profile(self, profile_id: str) -> Optional[UserProfile]:
        with self._call("get_user_profile"):
            response = self._table().select("*").eq("id", profile_id).limit(1).execute()
        row = self._first(response)
        return row_to_profile(row) if row else None

    async def update_user_profile(self, profile: UserProfile) -> UserProfile:
        validate_user_profile(profile)
        with self._call("update_user_profile"):
            response = self._table().upsert(profile_to_row(profile)).execute()
        row = self._first(response)
        return row_to_profile(row) if row else profile

    async def delete_user_profile(self, profile_id: str) -> None:
        with self._call("delete_user_profile"):
            self._table().delete().eq("id", profile_id).execute()
