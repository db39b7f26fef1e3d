"""
In-memory test doubles for every repository contract.
Used by unit tests and by register_test_dependencies.
"""

from .base import InMemoryRepository
from .repositories import (
    InMemoryAuthRepository,
    InMemoryCollectionRepository,
    InMemoryItemRepository,
    InMemoryStorageRepository,
    InMemoryTemplateRepository,
    InMemoryUserRepository,
    MOCK_STORAGE_BASE_URL,
)

__all__ = [
    "InMemoryRepository",
    "InMemoryAuthRepository",
    "InMemoryCollectionRepository",
    "InMemoryItemRepository",
    "InMemoryStorageRepository",
    "InMemoryTemplateRepository",
    "InMemoryUserRepository",
    "MOCK_STORAGE_BASE_URL",
]
