# 📄 File: favorites_tracker/modules/favorites/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a signed-in "user" is: their email, optional name and photo, and whether
# they confirmed their email address.
# 🧪 Purpose (Technical Summary):
# Immutable User entity for authenticated accounts with "new" and "rehydrate" constructors.
# 🔗 Dependencies:
# pydantic, datetime, typing, models.base
# 🔄 Connected Modules / Calls From:
# AuthRepository implementations, Supabase auth mapping, in-memory auth fake

from typing import Optional

from pydantic import EmailStr, Field

from .base import DomainModel, new_id, utc_now


class User(DomainModel):
    """
    Authenticated account.

    Fields:
    - id: Auth provider user id
    - email: Validated email address
    - display_name / photo_url: Optional presentation data
    - is_email_verified: Whether the address was confirmed
    - created_at / updated_at: Lifecycle timestamps
    """

    email: EmailStr = Field(frozen=True)
    display_name: Optional[str] = Field(None, frozen=True)
    photo_url: Optional[str] = Field(None, frozen=True)
    is_email_verified: bool = Field(False, frozen=True)

    @classmethod
    def create_new(
        cls,
        email: str,
        id: Optional[str] = None,
        display_name: Optional[str] = None,
        photo_url: Optional[str] = None,
        is_email_verified: bool = False
    ) -> "User":
        """
        Create a user record for a fresh signup.

        Args:
            email: Account email
            id: Auth provider id; generated when omitted
            display_name: Optional display name
            photo_url: Optional avatar URL
            is_email_verified: Verification state reported by the provider

        Returns:
            User: New user with both timestamps set to now
        """
        now = utc_now()
        return cls(
            id=id or new_id(),
            email=email,
            display_name=display_name,
            photo_url=photo_url,
            is_email_verified=is_email_verified,
            created_at=now,
            updated_at=now,
        )
