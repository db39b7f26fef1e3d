# 📄 File: favorites_tracker/modules/favorites/domain/repositories/auth_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for signing users in and out, creating accounts and deleting them,
# without saying which login service does the work.
# 🧪 Purpose (Technical Summary):
# Repository interface for authentication. get_current_user is synchronous and reflects the
# last known cached session; sign_out/delete_account clear that session unconditionally.
# 🔗 Dependencies:
# Domain models (User), typing, abc
# 🔄 Connected Modules / Calls From:
# Supabase auth implementation, in-memory auth fake, service assembly

from abc import ABC, abstractmethod
from typing import Optional

from ..models.user import User


class AuthRepository(ABC):
    """
    Repository interface for authentication operations.

    Implementation Notes:
    - Sign-in/up failures surface as AuthenticationError (bad credentials) or
      ServiceUnavailableError (backend unreachable)
    - Local session state must never contradict a user's request to leave:
      sign_out and delete_account clear it even when the remote call fails
    """

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> User:
        """
        Sign in with email and password.

        Args:
            email: Account email
            password: Account password

        Returns:
            Signed-in User; also becomes the cached current user

        Raises:
            AuthenticationError: If credentials are invalid
            ServiceUnavailableError: If the backend cannot be reached
        """
        pass

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> User:
        """
        Create an account and sign it in.

        Args:
            email: Account email
            password: Account password

        Returns:
            Newly created User

        Raises:
            ValidationError: If the email is already registered or input is malformed
            AuthenticationError: If the backend rejects the signup
            ServiceUnavailableError: If the backend cannot be reached
        """
        pass

    @abstractmethod
    async def sign_out(self) -> None:
        """
        Sign out the current user.

        The cached session is cleared even if the remote call raises.
        """
        pass

    @abstractmethod
    def get_current_user(self) -> Optional[User]:
        """
        Last known signed-in user, without blocking or network access.

        Returns:
            Cached User, or None when signed out
        """
        pass

    @abstractmethod
    async def delete_account(self) -> None:
        """
        Delete the signed-in account.

        The cached session is cleared even if the remote call raises.

        Raises:
            AuthenticationError: If no user is signed in
        """
        pass
