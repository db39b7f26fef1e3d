# 📄 File: favorites_tracker/modules/favorites/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the data records of the app - users, profiles, collections, items, templates -
# and the small value pieces they are built from.
# 🧪 Purpose (Technical Summary):
# Package initialization re-exporting every entity, value object and capability protocol.
# 🔗 Dependencies:
# pydantic models in this package
# 🔄 Connected Modules / Calls From:
# Repository contracts and implementations, validation, tests

"""
Favorites Domain Models

Entities (identity + timestamps, created_at <= updated_at):
- User, UserProfile, Collection, Item, Template

Value objects (no identity):
- UserPreferences, NotificationSettings, PrivacySettings, SubscriptionInfo
- Location, ComponentDefinition, ValidationRule
- CustomFieldValue: closed union of text/number/date/boolean/url/image values

Entities are built either with ``create_new(...)`` (generated id, now timestamps)
or with the plain constructor / ``model_validate`` when rehydrating stored data.
"""

from .base import Entity, Favoritable, Taggable, DomainModel, new_id, utc_now
from .fields import (
    CustomFieldValue,
    TextFieldValue,
    NumberFieldValue,
    DateFieldValue,
    BooleanFieldValue,
    UrlFieldValue,
    ImageFieldValue,
    custom_field_value_adapter,
    field_value_from,
    Location,
    ComponentType,
    ComponentDefinition,
    ValidationRule,
)
from .user import User
from .profile import (
    UserProfile,
    UserPreferences,
    NotificationSettings,
    PrivacySettings,
    Theme,
    SubscriptionInfo,
    SubscriptionPlan,
    SubscriptionStatus,
)
from .collection import Collection
from .item import Item
from .template import Template

__all__ = [
    "Entity",
    "Favoritable",
    "Taggable",
    "DomainModel",
    "new_id",
    "utc_now",
    "CustomFieldValue",
    "TextFieldValue",
    "NumberFieldValue",
    "DateFieldValue",
    "BooleanFieldValue",
    "UrlFieldValue",
    "ImageFieldValue",
    "custom_field_value_adapter",
    "field_value_from",
    "Location",
    "ComponentType",
    "ComponentDefinition",
    "ValidationRule",
    "User",
    "UserProfile",
    "UserPreferences",
    "NotificationSettings",
    "PrivacySettings",
    "Theme",
    "SubscriptionInfo",
    "SubscriptionPlan",
    "SubscriptionStatus",
    "Collection",
    "Item",
    "Template",
]
