# 📄 File: favorites_tracker/modules/favorites/assembly.py
# 🧭 Purpose (Layman Explanation):
# Fills in the app's service "phone book": in production every repository points at the
# Supabase-backed one, and in tests every repository points at an in-memory pretend one.
# 🧪 Purpose (Technical Summary):
# Service assembly for the container: production factory bindings delegating to the
# RepositoryProvider, test bindings to fresh in-memory fakes, and DI testing helpers
# (mock, mock_factory, reset, setup_test_environment, is_registered).
# 🔗 Dependencies:
# favorites_tracker.shared.core.container, repository contracts, RepositoryProvider, in-memory fakes
# 🔄 Connected Modules / Calls From:
# favorites_tracker.main (ApplicationContext.start), unit tests

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional

from favorites_tracker.shared.config.settings import Settings
from favorites_tracker.shared.core.container import ServiceContainer, get_container
from favorites_tracker.shared.utils.logging import get_logger

from .domain.repositories.auth_repository import AuthRepository
from .domain.repositories.collection_repository import CollectionRepository
from .domain.repositories.item_repository import ItemRepository
from .domain.repositories.storage_repository import StorageRepository
from .domain.repositories.template_repository import TemplateRepository
from .domain.repositories.user_repository import UserRepository
from .infrastructure.memory.repositories import (
    InMemoryAuthRepository,
    InMemoryCollectionRepository,
    InMemoryItemRepository,
    InMemoryStorageRepository,
    InMemoryTemplateRepository,
    InMemoryUserRepository,
)
from .infrastructure.repository_provider import RepositoryProvider, get_repository_provider

logger = get_logger(__name__)


@dataclass
class FakeRepositories:
    """The in-memory fakes bound by register_test_dependencies."""
    auth: InMemoryAuthRepository
    items: InMemoryItemRepository
    collections: InMemoryCollectionRepository
    templates: InMemoryTemplateRepository
    users: InMemoryUserRepository
    storage: InMemoryStorageRepository

    def reset_all(self) -> None:
        for fake in (self.auth, self.items, self.collections, self.templates, self.users, self.storage):
            fake.reset()


# =============================================================================
# PRODUCTION / TEST REGISTRATION
# =============================================================================

def register_dependencies(
    container: Optional[ServiceContainer] = None,
    provider: Optional[RepositoryProvider] = None
) -> ServiceContainer:
    """
    Bind every repository contract to a factory delegating to the provider.

    The provider caches its instances, so repeated resolves return the same
    repository while construction stays lazy. Settings and the provider itself
    are bound as singletons.

    Args:
        container: Target container (process default when omitted)
        provider: Repository provider (process default when omitted)

    Returns:
        The container that was populated
    """
    container = container if container is not None else get_container()
    provider = provider if provider is not None else get_repository_provider()

    container.register(Settings, provider.settings)
    container.register(RepositoryProvider, provider)

    container.register(ItemRepository, factory=provider.make_item_repository)
    container.register(CollectionRepository, factory=provider.make_collection_repository)
    container.register(TemplateRepository, factory=provider.make_template_repository)
    container.register(UserRepository, factory=provider.make_user_repository)
    container.register(AuthRepository, factory=provider.make_auth_repository)
    container.register(StorageRepository, factory=provider.make_storage_repository)

    logger.info(
        f"Registered production dependencies in container '{container.name}'",
        capabilities=container.registered_capabilities()
    )
    return container


def register_test_dependencies(container: Optional[ServiceContainer] = None) -> FakeRepositories:
    """
    Clear the container and bind every contract to a fresh in-memory fake.

    Returns:
        FakeRepositories holding the bound fakes, for assertions and seeding
    """
    container = container if container is not None else get_container()
    container.clear()

    fakes = FakeRepositories(
        auth=InMemoryAuthRepository(),
        items=InMemoryItemRepository(),
        collections=InMemoryCollectionRepository(),
        templates=InMemoryTemplateRepository(),
        users=InMemoryUserRepository(),
        storage=InMemoryStorageRepository(),
    )

    container.register(AuthRepository, fakes.auth)
    container.register(ItemRepository, fakes.items)
    container.register(CollectionRepository, fakes.collections)
    container.register(TemplateRepository, fakes.templates)
    container.register(UserRepository, fakes.users)
    container.register(StorageRepository, fakes.storage)

    logger.debug(f"Registered in-memory test dependencies in container '{container.name}'")
    return fakes


# =============================================================================
# TESTING HELPERS
# =============================================================================

def _target(container: Optional[ServiceContainer]) -> ServiceContainer:
    return container if container is not None else get_container()


def mock(capability: Hashable, instance: Any, container: Optional[ServiceContainer] = None) -> None:
    """Replace a capability with a mock instance."""
    _target(container).register(capability, instance)


def mock_factory(
    capability: Hashable,
    factory: Callable[[], Any],
    container: Optional[ServiceContainer] = None
) -> None:
    """Replace a capability with a mock factory."""
    _target(container).register(capability, factory=factory)


def reset(
    container: Optional[ServiceContainer] = None,
    provider: Optional[RepositoryProvider] = None
) -> ServiceContainer:
    """Clear the container and restore the production registrations."""
    container = container if container is not None else get_container()
    container.clear()
    return register_dependencies(container, provider)


def setup_test_environment(container: Optional[ServiceContainer] = None) -> FakeRepositories:
    """Clear the container and install in-memory fakes for every contract."""
    return register_test_dependencies(container)


def is_registered(capability: Hashable, container: Optional[ServiceContainer] = None) -> bool:
    """Check whether a capability is bound."""
    return _target(container).is_registered(capability)
