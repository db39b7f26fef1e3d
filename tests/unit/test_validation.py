"""Unit tests for write-time entity validation."""

from datetime import datetime, timedelta, timezone

import pytest

from favorites_tracker.modules.favorites.domain.models import (
    Collection,
    Item,
    Location,
    SubscriptionInfo,
    SubscriptionPlan,
    SubscriptionStatus,
    Template,
    TextFieldValue,
    UserProfile,
)
from favorites_tracker.modules.favorites.domain.validation import (
    MAX_NAME_LENGTH,
    MAX_PHOTOS_FREE,
    MAX_PHOTOS_PREMIUM,
    validate_collection,
    validate_item,
    validate_template,
    validate_user_profile,
)
from favorites_tracker.shared.core.exceptions import ErrorKind, ValidationError


NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def photos(count: int):
    return [f"https://cdn.example.com/{n}.png" for n in range(count)]


def item(**overrides) -> Item:
    return Item.create_new(user_id="user-1", collection_id="col-1", name="Mug").updated(**overrides)


class TestItemValidation:
    def test_valid_item_passes(self):
        validate_item(item(rating=5.0, location=Location(latitude=-90, longitude=180)))

    def test_collects_every_violation(self):
        bad = item(name="  ", rating=6.0, location=Location(latitude=91, longitude=0))

        with pytest.raises(ValidationError) as exc_info:
            validate_item(bad)

        error = exc_info.value
        assert error.kind is ErrorKind.VALIDATION_FAILED
        assert len(error.details["errors"]) == 3
        assert error.details["resource_type"] == "item"
        assert error.message.startswith("Invalid item:")

    def test_name_length_limit(self):
        validate_item(item(name="x" * MAX_NAME_LENGTH))
        with pytest.raises(ValidationError):
            validate_item(item(name="x" * (MAX_NAME_LENGTH + 1)))

    def test_photo_limit_depends_on_plan(self):
        validate_item(item(image_urls=photos(MAX_PHOTOS_PREMIUM)))
        validate_item(item(image_urls=photos(MAX_PHOTOS_FREE)), is_premium=False)

        with pytest.raises(ValidationError):
            validate_item(item(image_urls=photos(MAX_PHOTOS_FREE + 1)), is_premium=False)
        with pytest.raises(ValidationError):
            validate_item(item(image_urls=photos(MAX_PHOTOS_PREMIUM + 1)))

    def test_custom_field_limits(self):
        with pytest.raises(ValidationError):
            validate_item(item(custom_fields={"notes": TextFieldValue(value="x" * 1001)}))
        with pytest.raises(ValidationError):
            validate_item(item(custom_fields={"k" * 256: TextFieldValue(value="ok")}))


class TestOtherEntities:
    def test_collection_description_limit(self):
        collection = Collection.create_new(user_id="user-1", name="Mugs", description="d" * 2001)
        with pytest.raises(ValidationError):
            validate_collection(collection)

    def test_collection_negative_item_count(self):
        collection = Collection.create_new(user_id="user-1", name="Mugs").updated(item_count=-1)
        with pytest.raises(ValidationError, match="negative"):
            validate_collection(collection)

    def test_template_requires_category_and_rating_range(self):
        template = Template.create_new(creator_id="user-1", name="Wine", description="", category="")
        with pytest.raises(ValidationError) as exc_info:
            validate_template(template.updated(rating=-1.0))

        assert len(exc_info.value.details["errors"]) == 2

    def test_profile_bio_and_subscription_dates(self):
        profile = UserProfile.create_new(user_id="user-1", display_name="Sam")
        validate_user_profile(profile)

        with pytest.raises(ValidationError):
            validate_user_profile(profile.updated(bio="b" * 2001))

        backwards = SubscriptionInfo(
            plan=SubscriptionPlan.PREMIUM,
            status=SubscriptionStatus.ACTIVE,
            start_date=NOW,
            end_date=NOW - timedelta(days=1),
        )
        with pytest.raises(ValidationError, match="start date"):
            validate_user_profile(profile.updated(subscription=backwards))
