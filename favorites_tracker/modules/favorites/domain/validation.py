# 📄 File: favorites_tracker/modules/favorites/domain/validation.py
# 🧭 Purpose (Layman Explanation):
# Checks records before they are saved to the backend: names not blank or too long,
# ratings between 0 and 5, sensible map coordinates, not too many photos, and so on.
# 🧪 Purpose (Technical Summary):
# Write-time validation rules for profiles, collections, items and templates. Each
# validate_* function collects every violation and raises a single ValidationError.
# 🔗 Dependencies:
# typing, favorites_tracker.shared.core.exceptions, domain models
# 🔄 Connected Modules / Calls From:
# Supabase repository implementations (before every write)

from typing import Dict, List, Optional

from favorites_tracker.shared.core.exceptions import ValidationError

from .models.collection import Collection
from .models.fields import CustomFieldValue, Location
from .models.item import Item
from .models.profile import UserProfile
from .models.template import Template

# Text limits
MAX_NAME_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 2000
MAX_BIO_LENGTH = 2000
MAX_CUSTOM_FIELD_KEY_LENGTH = 255
MAX_CUSTOM_FIELD_VALUE_LENGTH = 1000
MAX_ID_LENGTH = 1024

# Photo limits
MAX_PHOTOS_FREE = 5
MAX_PHOTOS_PREMIUM = 10

# Ranges
MIN_RATING = 0.0
MAX_RATING = 5.0


# =============================================================================
# FIELD CHECKS
# =============================================================================

def check_required_string(errors: List[str], value: Optional[str], field: str, max_length: int = MAX_NAME_LENGTH):
    if value is None or not value.strip():
        errors.append(f"{field} is required")
    elif len(value) > max_length:
        errors.append(f"{field} is too long: {len(value)} characters (limit {max_length})")


def check_optional_string(errors: List[str], value: Optional[str], field: str, max_length: int):
    if value is not None and len(value) > max_length:
        errors.append(f"{field} is too long: {len(value)} characters (limit {max_length})")


def check_id(errors: List[str], value: Optional[str], field: str):
    if not value:
        errors.append(f"{field} is required")
    elif len(value) > MAX_ID_LENGTH:
        errors.append(f"{field} exceeds {MAX_ID_LENGTH} characters")


def check_rating(errors: List[str], rating: Optional[float]):
    if rating is not None and not (MIN_RATING <= rating <= MAX_RATING):
        errors.append(f"rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}")


def check_location(errors: List[str], location: Optional[Location]):
    if location is None:
        return
    if not -90.0 <= location.latitude <= 90.0:
        errors.append(f"latitude out of range: {location.latitude}")
    if not -180.0 <= location.longitude <= 180.0:
        errors.append(f"longitude out of range: {location.longitude}")


def check_photo_count(errors: List[str], photos: List[str], is_premium: bool):
    limit = MAX_PHOTOS_PREMIUM if is_premium else MAX_PHOTOS_FREE
    if len(photos) > limit:
        errors.append(f"Too many photos: {len(photos)}. Limit is {limit}")


def check_custom_fields(errors: List[str], fields: Dict[str, CustomFieldValue]):
    for key, value in fields.items():
        if not key or len(key) > MAX_CUSTOM_FIELD_KEY_LENGTH:
            errors.append(f"Invalid custom field key: {key!r}")
            continue
        if len(value.string_value) > MAX_CUSTOM_FIELD_VALUE_LENGTH:
            errors.append(
                f"custom field {key} is too long: {len(value.string_value)} characters "
                f"(limit {MAX_CUSTOM_FIELD_VALUE_LENGTH})"
            )


def _raise_if_invalid(errors: List[str], resource_type: str, resource_id: str):
    if errors:
        raise ValidationError(
            message=f"Invalid {resource_type}: {'; '.join(errors)}",
            errors=errors,
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


# =============================================================================
# ENTITY VALIDATORS
# =============================================================================

def validate_user_profile(profile: UserProfile) -> None:
    """
    Validate a profile before writing it.

    Raises:
        ValidationError: Listing every violation found
    """
    errors: List[str] = []
    check_id(errors, profile.id, "id")
    check_id(errors, profile.user_id, "user_id")
    check_required_string(errors, profile.display_name, "display_name")
    check_optional_string(errors, profile.bio, "bio", MAX_BIO_LENGTH)

    subscription = profile.subscription
    if subscription is not None and subscription.end_date is not None:
        if subscription.start_date >= subscription.end_date:
            errors.append("Subscription start date must be before end date")

    _raise_if_invalid(errors, "user_profile", profile.id)


def validate_collection(collection: Collection) -> None:
    """
    Validate a collection before writing it.

    Raises:
        ValidationError: Listing every violation found
    """
    errors: List[str] = []
    check_id(errors, collection.id, "id")
    check_id(errors, collection.user_id, "user_id")
    check_required_string(errors, collection.name, "name")
    check_optional_string(errors, collection.description, "description", MAX_DESCRIPTION_LENGTH)
    if collection.item_count < 0:
        errors.append("Item count cannot be negative")

    _raise_if_invalid(errors, "collection", collection.id)


def validate_item(item: Item, is_premium: bool = True) -> None:
    """
    Validate an item before writing it.

    Args:
        item: Item to check
        is_premium: Owner's plan; free users get a lower photo limit

    Raises:
        ValidationError: Listing every violation found
    """
    errors: List[str] = []
    check_id(errors, item.id, "id")
    check_id(errors, item.user_id, "user_id")
    check_id(errors, item.collection_id, "collection_id")
    check_required_string(errors, item.name, "name")
    check_optional_string(errors, item.description, "description", MAX_DESCRIPTION_LENGTH)
    check_rating(errors, item.rating)
    check_location(errors, item.location)
    check_photo_count(errors, item.image_urls, is_premium)
    check_custom_fields(errors, item.custom_fields)

    _raise_if_invalid(errors, "item", item.id)


def validate_template(template: Template) -> None:
    """Validate a template before writing it."""
    errors: List[str] = []
    check_id(errors, template.id, "id")
    check_id(errors, template.creator_id, "creator_id")
    check_required_string(errors, template.name, "name")
    check_required_string(errors, template.category, "category")
    check_optional_string(errors, template.description, "description", MAX_DESCRIPTION_LENGTH)
    check_rating(errors, template.rating)

    _raise_if_invalid(errors, "template", template.id)
