# 📄 File: favorites_tracker/modules/favorites/infrastructure/supabase/__init__.py
# 🧭 Purpose (Layman Explanation):
# The real repositories that store data in Supabase (database, login service and photo storage).
# 🧪 Purpose (Technical Summary):
# Supabase-backed implementations of every repository contract, row mappers and
# backend error translation.
# 🔗 Dependencies:
# supabase, postgrest, httpx, aiohttp, Pillow
# 🔄 Connected Modules / Calls From:
# favorites_tracker.modules.favorites.infrastructure.repository_provider

from .auth_repository_impl import SupabaseAuthRepository
from .collection_repository_impl import SupabaseCollectionRepository
from .item_repository_impl import SupabaseItemRepository
from .storage_repository_impl import SupabaseStorageRepository
from .template_repository_impl import SupabaseTemplateRepository
from .user_repository_impl import SupabaseUserRepository

__all__ = [
    "SupabaseAuthRepository",
    "SupabaseCollectionRepository",
    "SupabaseItemRepository",
    "SupabaseStorageRepository",
    "SupabaseTemplateRepository",
    "SupabaseUserRepository",
]
