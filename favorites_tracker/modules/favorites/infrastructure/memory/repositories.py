# 📄 File: favorites_tracker/modules/favorites/infrastructure/memory/repositories.py
# 🧭 Purpose (Layman Explanation):
# Pretend versions of every repository that keep data in memory, so tests and previews can
# run without a real backend.
# 🧪 Purpose (Technical Summary):
# In-memory implementations of the six repository contracts built on InMemoryRepository.
# Updates of absent ids are no-ops (profiles upsert), deletes are idempotent, and no
# write-time validation is applied.
# 🔗 Dependencies:
# pydantic, domain models and repository contracts, memory.base, shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Service assembly (register_test_dependencies), unit tests

from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from favorites_tracker.shared.core.exceptions import (
    AuthenticationError,
    NotFoundError,
    ValidationError,
)

from ...domain.models.collection import Collection
from ...domain.models.item import Item
from ...domain.models.profile import UserProfile
from ...domain.models.template import Template
from ...domain.models.user import User
from ...domain.repositories.auth_repository import AuthRepository
from ...domain.repositories.collection_repository import CollectionRepository
from ...domain.repositories.item_repository import ItemRepository
from ...domain.repositories.storage_repository import StorageRepository
from ...domain.repositories.template_repository import TemplateRepository
from ...domain.repositories.user_repository import UserRepository
from .base import InMemoryRepository, detach

MOCK_STORAGE_BASE_URL = "https://mock-storage.example.com"
MIN_PASSWORD_LENGTH = 6


def _matches(name: str, query: str) -> bool:
    return query.lower() in name.lower()


# =============================================================================
# ITEMS
# =============================================================================

class InMemoryItemRepository(InMemoryRepository[Item], ItemRepository):
    """In-memory ItemRepository."""

    repository_name = "InMemoryItemRepository"

    async def get_items(self, user_id: str) -> List[Item]:
        await self._begin("get_items", user_id=user_id)
        return [item for item in self._values() if item.user_id == user_id]

    async def get_item(self, item_id: str) -> Optional[Item]:
        await self._begin("get_item", item_id=item_id)
        return self._get(item_id)

    async def get_item_count(self, collection_id: str) -> int:
        await self._begin("get_item_count", collection_id=collection_id)
        return sum(1 for item in self._values() if item.collection_id == collection_id)

    async def create_item(self, item: Item) -> Item:
        await self._begin("create_item", item=item)
        self._put(item.id, item)
        return item

    async def update_item(self, item: Item) -> Item:
        await self._begin("update_item", item=item)
        if item.id in self._store:
            self._put(item.id, item)
        return item

    async def delete_item(self, item_id: str) -> None:
        await self._begin("delete_item", item_id=item_id)
        self._store.pop(item_id, None)

    async def search_items(self, query: str, user_id: str) -> List[Item]:
        await self._begin("search_items", query=query, user_id=user_id)
        return [
            item for item in self._values()
            if item.user_id == user_id and _matches(item.name, query)
        ]


# =============================================================================
# COLLECTIONS
# =============================================================================

class InMemoryCollectionRepository(InMemoryRepository[Collection], CollectionRepository):
    """In-memory CollectionRepository."""

    repository_name = "InMemoryCollectionRepository"

    async def get_collections(self, user_id: str) -> List[Collection]:
        await self._begin("get_collections", user_id=user_id)
        return [c for c in self._values() if c.user_id == user_id]

    async def get_collection(self, collection_id: str) -> Optional[Collection]:
        await self._begin("get_collection", collection_id=collection_id)
        return self._get(collection_id)

    async def create_collection(self, collection: Collection) -> Collection:
        await self._begin("create_collection", collection=collection)
        self._put(collection.id, collection)
        return collection

    async def update_collection(self, collection: Collection) -> Collection:
        await self._begin("update_collection", collection=collection)
        if collection.id in self._store:
            self._put(collection.id, collection)
        return collection

    async def delete_collection(self, collection_id: str) -> None:
        await self._begin("delete_collection", collection_id=collection_id)
        self._store.pop(collection_id, None)


# =============================================================================
# TEMPLATES
# =============================================================================

class InMemoryTemplateRepository(InMemoryRepository[Template], TemplateRepository):
    """
    In-memory TemplateRepository.

    Featured ordering is a stable sort on download_count, so ties keep insertion order.
    """

    repository_name = "InMemoryTemplateRepository"

    def _public(self) -> List[Template]:
        return [t for t in self._values() if t.is_public]

    async def get_templates(self) -> List[Template]:
        await self._begin("get_templates")
        return self._public()

    async def get_template(self, template_id: str) -> Optional[Template]:
        await self._begin("get_template", template_id=template_id)
        return self._get(template_id)

    async def create_template(self, template: Template) -> Template:
        await self._begin("create_template", template=template)
        self._put(template.id, template)
        return template

    async def update_template(self, template: Template) -> Template:
        await self._begin("update_template", template=template)
        if template.id in self._store:
            self._put(template.id, template)
        return template

    async def delete_template(self, template_id: str) -> None:
        await self._begin("delete_template", template_id=template_id)
        self._store.pop(template_id, None)

    async def search_templates(self, query: str, category: Optional[str] = None) -> List[Template]:
        await self._begin("search_templates", query=query, category=category)
        return [
            t for t in self._public()
            if _matches(t.name, query) and (category is None or t.category == category)
        ]

    async def get_featured_templates(self) -> List[Template]:
        await self._begin("get_featured_templates")
        return sorted(self._public(), key=lambda t: t.download_count, reverse=True)


# =============================================================================
# USER PROFILES
# =============================================================================

class InMemoryUserRepository(InMemoryRepository[UserProfile], UserRepository):
    """In-memory UserRepository. update_user_profile upserts."""

    repository_name = "InMemoryUserRepository"

    async def get_user_profile(self, profile_id: str) -> Optional[UserProfile]:
        await self._begin("get_user_profile", profile_id=profile_id)
        return self._get(profile_id)

    async def update_user_profile(self, profile: UserProfile) -> UserProfile:
        await self._begin("update_user_profile", profile=profile)
        self._put(profile.id, profile)
        return profile

    async def delete_user_profile(self, profile_id: str) -> None:
        await self._begin("delete_user_profile", profile_id=profile_id)
        self._store.pop(profile_id, None)


# =============================================================================
# AUTHENTICATION
# =============================================================================

class InMemoryAuthRepository(InMemoryRepository[User], AuthRepository):
    """
    In-memory AuthRepository.

    Accounts are kept as email -> (password, User). ``get_current_user`` is counted
    but never delayed or faulted, since it only reads the cached session.
    """

    repository_name = "InMemoryAuthRepository"

    def __init__(self):
        super().__init__()
        self.current_user: Optional[User] = None
        self._accounts: Dict[str, Tuple[str, User]] = {}

    def reset(self) -> None:
        super().reset()
        self.current_user = None
        self._accounts = {}

    def add_account(self, email: str, password: str, user: Optional[User] = None) -> User:
        """Register an account directly, without counting a call."""
        user = user or User.create_new(email=email)
        self._accounts[email.lower()] = (password, detach(user))
        self._put(user.id, user)
        return user

    async def sign_in(self, email: str, password: str) -> User:
        await self._begin("sign_in", email=email, password=password)
        account = self._accounts.get(email.lower())
        if account is None or account[0] != password:
            raise AuthenticationError(message="Invalid email or password", operation="sign_in")
        self.current_user = detach(account[1])
        return detach(account[1])

    async def sign_up(self, email: str, password: str) -> User:
        await self._begin("sign_up", email=email, password=password)
        if email.lower() in self._accounts:
            raise ValidationError(
                message="Email already in use",
                field="email",
                value=email,
                constraint="unique"
            )
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                message=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                field="password",
                constraint="min_length"
            )
        try:
            user = User.create_new(email=email)
        except PydanticValidationError as e:
            raise ValidationError(message="Invalid email address", field="email", value=email) from e

        self._accounts[email.lower()] = (password, detach(user))
        self._put(user.id, user)
        self.current_user = detach(user)
        return user

    async def sign_out(self) -> None:
        try:
            await self._begin("sign_out")
        finally:
            self.current_user = None

    def get_current_user(self) -> Optional[User]:
        self._record("get_current_user", {})
        return detach(self.current_user)

    async def delete_account(self) -> None:
        user = self.current_user
        try:
            await self._begin("delete_account")
            if user is None:
                raise AuthenticationError(message="No user is signed in", operation="delete_account")
            self._accounts.pop(user.email.lower(), None)
            self._store.pop(user.id, None)
        finally:
            self.current_user = None


# =============================================================================
# STORAGE
# =============================================================================

class InMemoryStorageRepository(InMemoryRepository[bytes], StorageRepository):
    """In-memory StorageRepository keyed by path. URLs are ``<base_url>/<path>``."""

    repository_name = "InMemoryStorageRepository"

    def __init__(self, base_url: str = MOCK_STORAGE_BASE_URL):
        super().__init__()
        self.base_url = base_url.rstrip("/")

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _path_for(self, url: str) -> Optional[str]:
        prefix = f"{self.base_url}/"
        if not url.startswith(prefix):
            return None
        return url[len(prefix):]

    def seed_file(self, path: str, data: bytes) -> str:
        self._store[path.lstrip("/")] = data
        return self.url_for(path)

    async def upload_image(self, data: bytes, path: str) -> str:
        await self._begin("upload_image", data=data, path=path)
        self._store[path.lstrip("/")] = data
        return self.url_for(path)

    async def delete_image(self, path: str) -> None:
        await self._begin("delete_image", path=path)
        self._store.pop(path.lstrip("/"), None)

    async def download_image(self, url: str) -> bytes:
        await self._begin("download_image", url=url)
        path = self._path_for(url)
        if path is None or path not in self._store:
            raise NotFoundError(
                message=f"No image stored at {url}",
                resource_type="image",
                resource_id=url,
                operation="download_image"
            )
        return self._store[path]
