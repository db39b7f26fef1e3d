"""Conftest for unit tests - automatically mark all tests as unit tests."""

from unittest.mock import MagicMock

import pytest

from favorites_tracker.modules.favorites.assembly import FakeRepositories, register_test_dependencies
from favorites_tracker.shared.config.supabase import SupabaseManager
from favorites_tracker.shared.core.container import ServiceContainer


def pytest_collection_modifyitems(config, items):
    """Automatically mark all tests in the unit directory as unit tests."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def container() -> ServiceContainer:
    """A fresh container, never the process default."""
    return ServiceContainer(name="test")


@pytest.fixture
def fakes(container) -> FakeRepositories:
    """In-memory fakes bound into the test container."""
    return register_test_dependencies(container)


@pytest.fixture
def supabase_manager(settings) -> MagicMock:
    """SupabaseManager double whose client calls are MagicMock chains."""
    manager = MagicMock(spec=SupabaseManager)
    manager.settings = settings
    return manager

