# 📄 File: favorites_tracker/modules/favorites/domain/models/profile.py
# 🧭 Purpose (Layman Explanation):
# Defines the extended profile for each user: the name shown in the app, a short bio,
# theme and notification choices, privacy switches, and their subscription plan.
# 🧪 Purpose (Technical Summary):
# UserProfile entity plus the UserPreferences / NotificationSettings / PrivacySettings
# value objects (fixed defaults, no identity) and SubscriptionInfo.
# 🔗 Dependencies:
# pydantic, datetime, typing, enum, models.base
# 🔄 Connected Modules / Calls From:
# UserRepository implementations, Supabase auth sign-up, domain/validation.py

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import DomainModel, as_utc, new_id, utc_now


class Theme(str, Enum):
    """UI theme preference"""
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class NotificationSettings(BaseModel):
    """Notification preferences; everything on by default"""

    model_config = ConfigDict(frozen=True)

    push_enabled: bool = True
    email_enabled: bool = True
    reminder_enabled: bool = True


class PrivacySettings(BaseModel):
    """Privacy settings for profile and data"""

    model_config = ConfigDict(frozen=True)

    profile_public: bool = False
    collections_public: bool = False
    analytics_enabled: bool = True


class UserPreferences(BaseModel):
    """App configuration chosen by the user."""

    model_config = ConfigDict(frozen=True)

    theme: Theme = Theme.SYSTEM
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
    privacy: PrivacySettings = Field(default_factory=PrivacySettings)


class SubscriptionPlan(str, Enum):
    """Subscription plans"""
    FREE = "free"
    PREMIUM = "premium"


class SubscriptionStatus(str, Enum):
    """Subscription lifecycle states"""
    ACTIVE = "active"
    EXPIRED = "expired"
    CANCELLED = "cancelled"
    TRIAL = "trial"


class SubscriptionInfo(BaseModel):
    """Subscription state attached to a profile."""

    model_config = ConfigDict(frozen=True)

    plan: SubscriptionPlan
    status: SubscriptionStatus
    start_date: datetime
    end_date: Optional[datetime] = None
    auto_renew: bool = False

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v) if v is not None else v

    def is_premium_active(self, at: Optional[datetime] = None) -> bool:
        """Premium plan in an active or trial state that has not run past end_date."""
        if self.plan != SubscriptionPlan.PREMIUM:
            return False
        if self.status not in (SubscriptionStatus.ACTIVE, SubscriptionStatus.TRIAL):
            return False
        if self.end_date is None:
            return True
        return as_utc(at or utc_now()) < self.end_date


class UserProfile(DomainModel):
    """
    Extended user information.

    A profile always has its own generated id, distinct from the owning user_id.
    """

    user_id: str = Field(min_length=1, frozen=True)
    display_name: str = Field(frozen=True)
    bio: Optional[str] = Field(None, frozen=True)
    profile_image_url: Optional[str] = Field(None, frozen=True)
    preferences: UserPreferences = Field(default_factory=UserPreferences, frozen=True)
    subscription: Optional[SubscriptionInfo] = Field(None, frozen=True)

    @classmethod
    def create_new(cls, user_id: str, display_name: str) -> "UserProfile":
        """Create a profile with default preferences and no subscription."""
        now = utc_now()
        profile_id = new_id()
        while profile_id == user_id:
            profile_id = new_id()
        return cls(
            id=profile_id,
            user_id=user_id,
            display_name=display_name,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_premium(self) -> bool:
        return self.subscription is not None and self.subscription.is_premium_active()
