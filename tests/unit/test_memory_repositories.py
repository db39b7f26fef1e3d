"""Unit tests for the in-memory repository fakes."""

import asyncio
import time

import pytest

from favorites_tracker.modules.favorites.domain.models import Collection, Item, Template, UserProfile
from favorites_tracker.modules.favorites.infrastructure.memory import (
    MOCK_STORAGE_BASE_URL,
    InMemoryAuthRepository,
    InMemoryCollectionRepository,
    InMemoryItemRepository,
    InMemoryStorageRepository,
    InMemoryTemplateRepository,
    InMemoryUserRepository,
)
from favorites_tracker.shared.core.exceptions import (
    AuthenticationError,
    ErrorKind,
    InjectedFaultError,
    NotFoundError,
    ServiceUnavailableError,
    ValidationError,
)


def make_item(name: str, user_id: str = "user-1", collection_id: str = "col-1") -> Item:
    return Item.create_new(user_id=user_id, collection_id=collection_id, name=name)


def make_template(name: str, downloads: int, public: bool = True) -> Template:
    template = Template.create_new(creator_id="creator", name=name, description="", category="general")
    return template.updated(download_count=downloads, is_public=public)


ALL_FAKES = [
    InMemoryItemRepository,
    InMemoryCollectionRepository,
    InMemoryTemplateRepository,
    InMemoryUserRepository,
    InMemoryAuthRepository,
    InMemoryStorageRepository,
]


class TestTestControls:
    @pytest.mark.parametrize("fake_cls", ALL_FAKES)
    def test_reset_restores_defaults(self, fake_cls):
        fake = fake_cls()
        fake.should_throw_error = True
        fake.error_to_throw = RuntimeError("boom")
        fake.delay = 2.0
        fake.call_counts["anything"] = 3
        fake.last_arguments["anything"] = {"x": 1}
        fake._store["key"] = object()

        fake.reset()

        assert fake.should_throw_error is False
        assert fake.error_to_throw is None
        assert fake.delay == 0
        assert fake.total_calls() == 0
        assert fake.last_arguments == {}
        assert fake.stored == []

    @pytest.mark.asyncio
    async def test_fault_leaves_store_unchanged_and_counts_call(self):
        repo = InMemoryItemRepository()
        existing = make_item("Coffee Mug")
        repo.seed(existing)
        repo.should_throw_error = True

        with pytest.raises(InjectedFaultError) as exc_info:
            await repo.create_item(make_item("Tea Cup"))
        with pytest.raises(InjectedFaultError):
            await repo.delete_item(existing.id)

        assert exc_info.value.kind is ErrorKind.UNSPECIFIED
        assert exc_info.value.message == "Mock not configured"
        assert repo.call_count("create_item") == 1
        assert repo.call_count("delete_item") == 1
        assert repo.stored == [existing]

    @pytest.mark.asyncio
    async def test_configured_error_is_raised(self):
        repo = InMemoryCollectionRepository()
        repo.should_throw_error = True
        repo.error_to_throw = ServiceUnavailableError(service="test")

        with pytest.raises(ServiceUnavailableError):
            await repo.get_collections("user-1")

    @pytest.mark.asyncio
    async def test_last_arguments_are_captured(self):
        repo = InMemoryItemRepository()
        await repo.search_items("mug", "user-1")

        assert repo.last_arguments["search_items"] == {"query": "mug", "user_id": "user-1"}

    @pytest.mark.asyncio
    async def test_delay_suspends_for_at_least_the_configured_time(self):
        repo = InMemoryItemRepository()
        repo.delay = 0.1

        start = time.perf_counter()
        await repo.get_items("user-1")

        assert time.perf_counter() - start >= 0.1

    @pytest.mark.asyncio
    async def test_delay_is_a_real_suspension(self):
        repo = InMemoryItemRepository()
        repo.delay = 0.1

        start = time.perf_counter()
        await asyncio.gather(*(repo.get_items("user-1") for _ in range(5)))

        # five concurrent calls interleave instead of running back to back
        assert time.perf_counter() - start < 0.4
        assert repo.call_count("get_items") == 5

    @pytest.mark.asyncio
    async def test_delay_applies_before_fault(self):
        repo = InMemoryItemRepository()
        repo.delay = 0.05
        repo.should_throw_error = True

        start = time.perf_counter()
        with pytest.raises(InjectedFaultError):
            await repo.get_item("missing")

        assert time.perf_counter() - start >= 0.05


def seeded(fake_cls):
    """A fake holding one existing record, plus that record (or its key)."""
    repo = fake_cls()
    if fake_cls is InMemoryItemRepository:
        existing = make_item("Coffee Mug")
    elif fake_cls is InMemoryCollectionRepository:
        existing = Collection.create_new(user_id="user-1", name="Mugs")
    elif fake_cls is InMemoryTemplateRepository:
        existing = make_template("Wine", 3)
    elif fake_cls is InMemoryUserRepository:
        existing = UserProfile.create_new(user_id="user-1", display_name="Sam")
    elif fake_cls is InMemoryAuthRepository:
        existing = repo.add_account("sam@example.com", "secret123")
        repo.current_user = existing
        return repo, existing
    else:
        return repo, repo.seed_file("u1/mug.png", b"old-bytes")
    repo.seed(existing)
    return repo, existing


MUTATING_CALLS = [
    pytest.param(
        InMemoryItemRepository, "create_item",
        lambda repo, existing: repo.create_item(make_item("Tea Cup")),
        id="item-create",
    ),
    pytest.param(
        InMemoryItemRepository, "update_item",
        lambda repo, existing: repo.update_item(existing.updated(name="Big Mug")),
        id="item-update",
    ),
    pytest.param(
        InMemoryItemRepository, "delete_item",
        lambda repo, existing: repo.delete_item(existing.id),
        id="item-delete",
    ),
    pytest.param(
        InMemoryCollectionRepository, "create_collection",
        lambda repo, existing: repo.create_collection(Collection.create_new(user_id="user-1", name="Cups")),
        id="collection-create",
    ),
    pytest.param(
        InMemoryCollectionRepository, "update_collection",
        lambda repo, existing: repo.update_collection(existing.updated(name="Old Mugs")),
        id="collection-update",
    ),
    pytest.param(
        InMemoryCollectionRepository, "delete_collection",
        lambda repo, existing: repo.delete_collection(existing.id),
        id="collection-delete",
    ),
    pytest.param(
        InMemoryTemplateRepository, "create_template",
        lambda repo, existing: repo.create_template(make_template("Books", 1)),
        id="template-create",
    ),
    pytest.param(
        InMemoryTemplateRepository, "update_template",
        lambda repo, existing: repo.update_template(existing.updated(download_count=99)),
        id="template-update",
    ),
    pytest.param(
        InMemoryTemplateRepository, "delete_template",
        lambda repo, existing: repo.delete_template(existing.id),
        id="template-delete",
    ),
    pytest.param(
        InMemoryUserRepository, "update_user_profile",
        lambda repo, existing: repo.update_user_profile(existing.updated(bio="Collector")),
        id="profile-update",
    ),
    pytest.param(
        InMemoryUserRepository, "update_user_profile",
        lambda repo, existing: repo.update_user_profile(
            UserProfile.create_new(user_id="user-2", display_name="Alex")
        ),
        id="profile-upsert-new",
    ),
    pytest.param(
        InMemoryUserRepository, "delete_user_profile",
        lambda repo, existing: repo.delete_user_profile(existing.id),
        id="profile-delete",
    ),
    pytest.param(
        InMemoryAuthRepository, "sign_up",
        lambda repo, existing: repo.sign_up("new@example.com", "secret123"),
        id="auth-sign-up",
    ),
    pytest.param(
        InMemoryAuthRepository, "delete_account",
        lambda repo, existing: repo.delete_account(),
        id="auth-delete-account",
    ),
    pytest.param(
        InMemoryStorageRepository, "upload_image",
        lambda repo, existing: repo.upload_image(b"new-bytes", "u1/cup.png"),
        id="storage-upload-new",
    ),
    pytest.param(
        InMemoryStorageRepository, "upload_image",
        lambda repo, existing: repo.upload_image(b"new-bytes", "u1/mug.png"),
        id="storage-upload-overwrite",
    ),
    pytest.param(
        InMemoryStorageRepository, "delete_image",
        lambda repo, existing: repo.delete_image("u1/mug.png"),
        id="storage-delete",
    ),
]


class TestFaultInjection:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("fake_cls, operation, call", MUTATING_CALLS)
    async def test_faulted_write_raises_counts_and_leaves_store(self, fake_cls, operation, call):
        repo, existing = seeded(fake_cls)
        before = repo.stored
        accounts_before = dict(getattr(repo, "_accounts", {}))
        error = ServiceUnavailableError(service="backend")
        repo.should_throw_error = True
        repo.error_to_throw = error

        with pytest.raises(ServiceUnavailableError) as exc_info:
            await call(repo, existing)

        assert exc_info.value is error
        assert repo.call_count(operation) == 1
        assert repo.total_calls() == 1
        assert repo.stored == before
        assert dict(getattr(repo, "_accounts", {})) == accounts_before

    @pytest.mark.asyncio
    async def test_faulted_sign_up_creates_no_account(self):
        repo = InMemoryAuthRepository()
        repo.should_throw_error = True

        with pytest.raises(InjectedFaultError):
            await repo.sign_up("new@example.com", "secret123")

        repo.should_throw_error = False
        with pytest.raises(AuthenticationError):
            await repo.sign_in("new@example.com", "secret123")
        assert repo.get_current_user() is None


class TestValueSemantics:
    @pytest.mark.asyncio
    async def test_editing_a_fetched_item_does_not_touch_the_store(self):
        repo = InMemoryItemRepository()
        item = make_item("Coffee Mug")
        await repo.create_item(item)

        fetched = await repo.get_item(item.id)
        fetched.is_favorite = True
        fetched.tags.append("kitchen")
        listed = await repo.get_items("user-1")
        listed[0].tags.append("office")

        stored = repo.stored[0]
        assert stored.is_favorite is False
        assert stored.tags == []
        assert repo.call_count("update_item") == 0

    @pytest.mark.asyncio
    async def test_editing_the_created_object_does_not_touch_the_store(self):
        repo = InMemoryCollectionRepository()
        collection = Collection.create_new(user_id="user-1", name="Mugs")
        await repo.create_collection(collection)

        collection.tags.append("kitchen")

        assert (await repo.get_collection(collection.id)).tags == []

    @pytest.mark.asyncio
    async def test_edits_persist_only_through_update(self):
        repo = InMemoryItemRepository()
        item = make_item("Coffee Mug")
        repo.seed(item)
        item.is_favorite = True

        assert (await repo.get_item(item.id)).is_favorite is False

        await repo.update_item(item)

        assert (await repo.get_item(item.id)).is_favorite is True


class TestItemRepository:
    @pytest.mark.asyncio
    async def test_round_trip(self):
        repo = InMemoryItemRepository()
        item = make_item("Coffee Mug")

        await repo.create_item(item)

        assert await repo.get_item(item.id) == item

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self):
        assert await InMemoryItemRepository().get_item("nope") is None

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self):
        repo = InMemoryItemRepository()
        item = make_item("Coffee Mug")
        await repo.create_item(item)

        await repo.delete_item(item.id)
        await repo.delete_item(item.id)

        assert await repo.get_item(item.id) is None
        assert repo.call_count("delete_item") == 2

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_substring_scoped_to_user(self):
        repo = InMemoryItemRepository()
        repo.seed(
            make_item("Coffee Mug"),
            make_item("Tea Cup"),
            make_item("Water Bottle"),
            make_item("Cocoa Tin", user_id="user-2"),
        )

        results = await repo.search_items("c", "user-1")

        assert {item.name for item in results} == {"Coffee Mug", "Tea Cup"}

    @pytest.mark.asyncio
    async def test_get_items_only_returns_owned(self):
        repo = InMemoryItemRepository()
        mine = make_item("Mine")
        repo.seed(mine, make_item("Theirs", user_id="user-2"))

        assert await repo.get_items("user-1") == [mine]

    @pytest.mark.asyncio
    async def test_item_count_per_collection(self):
        repo = InMemoryItemRepository()
        repo.seed(make_item("A"), make_item("B"), make_item("C", collection_id="col-2"))

        assert await repo.get_item_count("col-1") == 2
        assert await repo.get_item_count("col-3") == 0

    @pytest.mark.asyncio
    async def test_update_replaces_by_id(self):
        repo = InMemoryItemRepository()
        item = make_item("Mug")
        await repo.create_item(item)

        renamed = item.updated(name="Big Mug")
        await repo.update_item(renamed)

        assert (await repo.get_item(item.id)).name == "Big Mug"

    @pytest.mark.asyncio
    async def test_update_of_absent_id_is_noop(self):
        repo = InMemoryItemRepository()
        item = make_item("Ghost")

        returned = await repo.update_item(item)

        assert returned == item
        assert repo.stored == []


class TestCollectionRepository:
    @pytest.mark.asyncio
    async def test_crud(self):
        repo = InMemoryCollectionRepository()
        collection = Collection.create_new(user_id="user-1", name="Vinyl")

        await repo.create_collection(collection)
        assert await repo.get_collections("user-1") == [collection]

        await repo.update_collection(collection.updated(description="Records"))
        assert (await repo.get_collection(collection.id)).description == "Records"

        await repo.delete_collection(collection.id)
        assert await repo.get_collection(collection.id) is None


class TestTemplateRepository:
    @pytest.mark.asyncio
    async def test_featured_orders_public_by_downloads(self):
        repo = InMemoryTemplateRepository()
        a = make_template("A", 5)
        b = make_template("B", 50)
        c = make_template("C", 10, public=False)
        repo.seed(a, b, c)

        featured = await repo.get_featured_templates()

        assert featured == [b, a]

    @pytest.mark.asyncio
    async def test_featured_ties_keep_insertion_order(self):
        repo = InMemoryTemplateRepository()
        first = make_template("First", 7)
        second = make_template("Second", 7)
        repo.seed(first, second)

        assert await repo.get_featured_templates() == [first, second]

    @pytest.mark.asyncio
    async def test_search_filters_public_by_name_and_category(self):
        repo = InMemoryTemplateRepository()
        wine = make_template("Wine Log", 1)
        wine_private = make_template("Wine Cellar", 1, public=False)
        books = Template.create_new(
            creator_id="creator", name="Book Log", description="", category="reading"
        ).updated(is_public=True)
        repo.seed(wine, wine_private, books)

        assert await repo.search_templates("LOG") == [wine, books]
        assert await repo.search_templates("log", category="reading") == [books]
        assert await repo.search_templates("wine") == [wine]

    @pytest.mark.asyncio
    async def test_get_templates_returns_public_only(self):
        repo = InMemoryTemplateRepository()
        public = make_template("Public", 0)
        repo.seed(public, make_template("Private", 0, public=False))

        assert await repo.get_templates() == [public]


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_update_upserts(self):
        repo = InMemoryUserRepository()
        profile = UserProfile.create_new(user_id="user-1", display_name="Sam")

        await repo.update_user_profile(profile)

        assert await repo.get_user_profile(profile.id) == profile

        await repo.delete_user_profile(profile.id)
        await repo.delete_user_profile(profile.id)
        assert await repo.get_user_profile(profile.id) is None


class TestAuthRepository:
    @pytest.mark.asyncio
    async def test_sign_in_sets_current_user(self):
        repo = InMemoryAuthRepository()
        account = repo.add_account("sam@example.com", "secret123")

        user = await repo.sign_in("Sam@Example.com", "secret123")

        assert user == account
        assert repo.get_current_user() == account

    @pytest.mark.asyncio
    async def test_sign_out_clears_session_even_when_faulted(self):
        repo = InMemoryAuthRepository()
        repo.add_account("sam@example.com", "secret123")
        await repo.sign_in("sam@example.com", "secret123")
        assert repo.get_current_user() is not None

        repo.should_throw_error = True
        with pytest.raises(InjectedFaultError):
            await repo.sign_out()

        assert repo.get_current_user() is None
        assert repo.call_count("sign_out") == 1

    @pytest.mark.asyncio
    async def test_wrong_password_is_unauthorized(self):
        repo = InMemoryAuthRepository()
        repo.add_account("sam@example.com", "secret123")

        with pytest.raises(AuthenticationError) as exc_info:
            await repo.sign_in("sam@example.com", "wrong")

        assert exc_info.value.kind is ErrorKind.UNAUTHORIZED
        assert repo.get_current_user() is None

    @pytest.mark.asyncio
    async def test_sign_up_validates_input(self):
        repo = InMemoryAuthRepository()
        await repo.sign_up("sam@example.com", "secret123")

        with pytest.raises(ValidationError):
            await repo.sign_up("sam@example.com", "secret123")
        with pytest.raises(ValidationError):
            await repo.sign_up("kim@example.com", "123")
        with pytest.raises(ValidationError):
            await repo.sign_up("not-an-email", "secret123")

    @pytest.mark.asyncio
    async def test_sign_up_signs_in(self):
        repo = InMemoryAuthRepository()
        user = await repo.sign_up("kim@example.com", "secret123")

        assert repo.get_current_user() == user
        assert str(user.email) == "kim@example.com"

    @pytest.mark.asyncio
    async def test_delete_account_clears_session_and_account(self):
        repo = InMemoryAuthRepository()
        await repo.sign_up("kim@example.com", "secret123")

        await repo.delete_account()

        assert repo.get_current_user() is None
        with pytest.raises(AuthenticationError):
            await repo.sign_in("kim@example.com", "secret123")

    @pytest.mark.asyncio
    async def test_delete_account_without_session_is_unauthorized(self):
        with pytest.raises(AuthenticationError):
            await InMemoryAuthRepository().delete_account()

    @pytest.mark.asyncio
    async def test_get_current_user_ignores_faults(self):
        repo = InMemoryAuthRepository()
        repo.should_throw_error = True

        assert repo.get_current_user() is None
        assert repo.call_count("get_current_user") == 1


class TestStorageRepository:
    @pytest.mark.asyncio
    async def test_upload_then_download(self):
        repo = InMemoryStorageRepository()

        url = await repo.upload_image(b"\x89PNG", "users/u1/photo.png")

        assert url == f"{MOCK_STORAGE_BASE_URL}/users/u1/photo.png"
        assert await repo.download_image(url) == b"\x89PNG"

    @pytest.mark.asyncio
    async def test_download_missing_is_not_found(self):
        repo = InMemoryStorageRepository()

        with pytest.raises(NotFoundError):
            await repo.download_image(f"{MOCK_STORAGE_BASE_URL}/missing.png")
        with pytest.raises(NotFoundError):
            await repo.download_image("https://elsewhere.example.com/a.png")

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self):
        repo = InMemoryStorageRepository()
        url = repo.seed_file("a.png", b"data")

        await repo.delete_image("a.png")
        await repo.delete_image("a.png")

        with pytest.raises(NotFoundError):
            await repo.download_image(url)
