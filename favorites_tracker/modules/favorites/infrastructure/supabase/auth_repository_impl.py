# 📄 File: favorites_tracker/modules/favorites/infrastructure/supabase/auth_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Signs users in and out with Supabase Auth, creates accounts (with a starter profile)
# and deletes accounts, while remembering who is currently signed in. A sign up whose
# user record or profile cannot be saved removes the half-created account again.
#
# 🧪 Purpose (Technical Summary):
# Concrete AuthRepository over Supabase Auth (GoTrue). Keeps a cached current User that
# get_current_user returns without network access; sign_out/delete_account clear it in a
# finally block so local state never outlives a request to leave.
#
# 🔗 Dependencies:
# - supabase (auth client, admin client via service role key)
# - domain models (User, UserProfile), UserRepository contract
# - supabase/errors.py, supabase/mappers.py
#
# 🔄 Connected Modules / Calls From:
# - RepositoryProvider.auth_repository

from datetime import datetime
from typing import Any, Optional

from favorites_tracker.shared.config.supabase import SupabaseManager
from favorites_tracker.shared.core.exceptions import AuthenticationError
from favorites_tracker.shared.utils.logging import get_logger

from ...domain.models.profile import UserProfile
from ...domain.models.user import User
from ...domain.repositories.auth_repository import AuthRepository
from ...domain.repositories.user_repository import UserRepository
from .errors import backend_call
from .mappers import USERS_TABLE, user_to_row

logger = get_logger(__name__)

DEFAULT_DISPLAY_NAME = "User"


def user_from_auth(auth_user: Any) -> User:
    """
    Build a domain User from a Supabase Auth user object.

    display_name and photo_url come from user_metadata; verification from
    email_confirmed_at. A missing updated_at falls back to created_at.
    """
    metadata = getattr(auth_user, "user_metadata", None) or {}
    created_at: datetime = auth_user.created_at
    updated_at: Optional[datetime] = getattr(auth_user, "updated_at", None) or created_at
    if updated_at < created_at:
        updated_at = created_at

    return User(
        id=auth_user.id,
        email=auth_user.email,
        display_name=metadata.get("display_name") or metadata.get("full_name"),
        photo_url=metadata.get("avatar_url"),
        is_email_verified=getattr(auth_user, "email_confirmed_at", None) is not None,
        created_at=created_at,
        updated_at=updated_at,
    )


class SupabaseAuthRepository(AuthRepository):
    """Supabase Auth implementation of the AuthRepository interface."""

    repository_name = "SupabaseAuthRepository"

    def __init__(self, supabase_manager: SupabaseManager, user_repository: UserRepository):
        self._manager = supabase_manager
        self._user_repository = user_repository
        self._current_user: Optional[User] = None

    @property
    def _auth(self):
        return self._manager.get_auth_client()

    def _call(self, operation: str):
        return backend_call(self.repository_name, operation, "user")

    async def sign_in(self, email: str, password: str) -> User:
        with self._call("sign_in"):
            response = self._auth.sign_in_with_password({"email": email, "password": password})
        if response.user is None:
            raise AuthenticationError(message="Invalid email or password", operation="sign_in")

        user = user_from_auth(response.user)
        self._current_user = user
        logger.info(f"User {user.id} signed in", user_id=user.id)
        return user

    async def sign_up(self, email: str, password: str) -> User:
        with self._call("sign_up"):
            response = self._auth.sign_up({"email": email, "password": password})
        if response.user is None:
            raise AuthenticationError(message="Sign up was not accepted", operation="sign_up")

        user = user_from_auth(response.user)
        profile = UserProfile.create_new(
            user_id=user.id,
            display_name=user.display_name or DEFAULT_DISPLAY_NAME
        )

        try:
            with self._call("create_user_record"):
                self._manager.table(USERS_TABLE).upsert(user_to_row(user)).execute()
            await self._user_repository.update_user_profile(profile)
        except Exception:
            self._discard_auth_user(user)
            raise

        self._current_user = user
        logger.info(f"User {user.id} signed up", user_id=user.id, profile_id=profile.id)
        return user

    def _discard_auth_user(self, user: User) -> None:
        """Delete an auth account whose user record or profile could not be written."""
        try:
            self._manager.admin_client.auth.admin.delete_user(user.id)
            logger.warning(f"Rolled back auth account {user.id} after failed sign up", user_id=user.id)
        except Exception as e:
            logger.error(
                f"Auth account {user.id} left without a user record: {e}",
                user_id=user.id,
                error=type(e).__name__
            )

    async def sign_out(self) -> None:
        try:
            with self._call("sign_out"):
                self._auth.sign_out()
        finally:
            self._current_user = None

    def get_current_user(self) -> Optional[User]:
        return self._current_user

    async def delete_account(self) -> None:
        user = self._current_user
        if user is None:
            raise AuthenticationError(message="No user is signed in", operation="delete_account")

        try:
            with self._call("delete_account"):
                self._manager.admin_client.auth.admin.delete_user(user.id)
                self._manager.table(USERS_TABLE).delete().eq("id", user.id).execute()
                self._auth.sign_out()
            logger.info(f"Account {user.id} deleted", user_id=user.id)
        finally:
            self._current_user = None
