# 📄 File: favorites_tracker/modules/favorites/infrastructure/repository_provider.py
# 🧭 Purpose (Layman Explanation):
# One place that builds each real (Supabase-backed) repository the first time it is needed
# and hands out that same one afterwards.
# 🧪 Purpose (Technical Summary):
# Repository Provider: owns one lazily constructed instance per concrete repository,
# exposes a property and a make_* factory method per contract, and can be repointed at the
# local Supabase stack for integration testing.
# 🔗 Dependencies:
# favorites_tracker.shared.config (Settings, SupabaseManager), Supabase repository implementations
# 🔄 Connected Modules / Calls From:
# favorites_tracker.modules.favorites.assembly (factory bindings), favorites_tracker.main

from functools import lru_cache
from typing import Any, Callable, Dict, Optional

from favorites_tracker.shared.config.settings import Settings, get_settings
from favorites_tracker.shared.config.supabase import SupabaseManager
from favorites_tracker.shared.utils.logging import get_logger

from ..domain.repositories.auth_repository import AuthRepository
from ..domain.repositories.collection_repository import CollectionRepository
from ..domain.repositories.item_repository import ItemRepository
from ..domain.repositories.storage_repository import StorageRepository
from ..domain.repositories.template_repository import TemplateRepository
from ..domain.repositories.user_repository import UserRepository
from .supabase.auth_repository_impl import SupabaseAuthRepository
from .supabase.collection_repository_impl import SupabaseCollectionRepository
from .supabase.item_repository_impl import SupabaseItemRepository
from .supabase.storage_repository_impl import SupabaseStorageRepository
from .supabase.template_repository_impl import SupabaseTemplateRepository
from .supabase.user_repository_impl import SupabaseUserRepository

logger = get_logger(__name__)


class RepositoryProvider:
    """
    Lazily constructs and owns the concrete repository implementations.

    Construction is idempotent under the container's single initialization path;
    it is not otherwise guarded against concurrent first access.
    """

    def __init__(
        self,
        supabase_manager: Optional[SupabaseManager] = None,
        settings: Optional[Settings] = None
    ):
        self.settings = settings or (supabase_manager.settings if supabase_manager else get_settings())
        self.supabase_manager = supabase_manager or SupabaseManager(self.settings)
        self._instances: Dict[str, Any] = {}

    def _get_or_create(self, key: str, builder: Callable[[], Any]) -> Any:
        instance = self._instances.get(key)
        if instance is None:
            instance = builder()
            self._instances[key] = instance
            logger.debug(f"Constructed {type(instance).__name__}", repository=key)
        return instance

    # =========================================================================
    # REPOSITORY ACCESSORS
    # =========================================================================

    @property
    def item_repository(self) -> ItemRepository:
        return self._get_or_create("item", lambda: SupabaseItemRepository(self.supabase_manager))

    @property
    def collection_repository(self) -> CollectionRepository:
        return self._get_or_create(
            "collection", lambda: SupabaseCollectionRepository(self.supabase_manager)
        )

    @property
    def template_repository(self) -> TemplateRepository:
        return self._get_or_create(
            "template", lambda: SupabaseTemplateRepository(self.supabase_manager)
        )

    @property
    def user_repository(self) -> UserRepository:
        return self._get_or_create("user", lambda: SupabaseUserRepository(self.supabase_manager))

    @property
    def auth_repository(self) -> AuthRepository:
        return self._get_or_create(
            "auth",
            lambda: SupabaseAuthRepository(self.supabase_manager, self.user_repository)
        )

    @property
    def storage_repository(self) -> StorageRepository:
        return self._get_or_create(
            "storage",
            lambda: SupabaseStorageRepository(self.supabase_manager, self.settings)
        )

    # Factory-method aliases

    def make_item_repository(self) -> ItemRepository:
        return self.item_repository

    def make_collection_repository(self) -> CollectionRepository:
        return self.collection_repository

    def make_template_repository(self) -> TemplateRepository:
        return self.template_repository

    def make_user_repository(self) -> UserRepository:
        return self.user_repository

    def make_auth_repository(self) -> AuthRepository:
        return self.auth_repository

    def make_storage_repository(self) -> StorageRepository:
        return self.storage_repository

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    @property
    def constructed(self) -> Dict[str, Any]:
        """Repositories built so far, keyed by kind."""
        return dict(self._instances)

    def configure_for_testing(self) -> None:
        """Point at the local Supabase stack and drop constructed repositories."""
        self.supabase_manager.close()
        self.supabase_manager = SupabaseManager(self.settings, url=self.settings.SUPABASE_LOCAL_URL)
        self._instances.clear()
        logger.info(f"Repository provider configured for local Supabase at {self.settings.SUPABASE_LOCAL_URL}")

    def reset(self) -> None:
        """Drop constructed repositories; the next access rebuilds them."""
        self._instances.clear()
        self.supabase_manager.close()


@lru_cache()
def get_repository_provider() -> RepositoryProvider:
    """
    Get the process default repository provider.

    Returns:
        RepositoryProvider: Singleton provider
    """
    return RepositoryProvider()
