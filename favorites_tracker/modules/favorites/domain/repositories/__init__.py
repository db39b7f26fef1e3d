# 📄 File: favorites_tracker/modules/favorites/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the data access contracts that say what can be done with users, collections,
# items, templates and photos, without tying the app to one database.
# 🧪 Purpose (Technical Summary):
# Package initialization for the six repository interfaces (abstract base classes).
# 🔗 Dependencies:
# Repository interface classes, domain models, typing
# 🔄 Connected Modules / Calls From:
# Infrastructure implementations, in-memory fakes, service assembly

"""
Favorites Domain Repositories

Repository Interfaces:
- AuthRepository: sign in/up/out, current user, account deletion
- ItemRepository: item CRUD, per-collection count and name search
- CollectionRepository: collection CRUD
- TemplateRepository: template CRUD, search and featured list
- UserRepository: profile read/upsert/delete
- StorageRepository: image upload/delete/download

Implementation Note:
- These are interfaces only; the container binds them to Supabase-backed
  implementations in production and to in-memory fakes in tests
"""

from .auth_repository import AuthRepository
from .item_repository import ItemRepository
from .collection_repository import CollectionRepository
from .template_repository import TemplateRepository
from .user_repository import UserRepository
from .storage_repository import StorageRepository

__all__ = [
    "AuthRepository",
    "ItemRepository",
    "CollectionRepository",
    "TemplateRepository",
    "UserRepository",
    "StorageRepository",
]
