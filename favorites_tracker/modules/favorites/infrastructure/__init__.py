# 📄 File: favorites_tracker/modules/favorites/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where the favorites data actually lives: Supabase in the real app, plain memory in tests.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer: Supabase repository implementations, in-memory fakes and the
# RepositoryProvider that owns the production instances.
# 🔗 Dependencies:
# supabase, postgrest, aiohttp, Pillow, domain layer
# 🔄 Connected Modules / Calls From:
# favorites_tracker.modules.favorites.assembly

from .repository_provider import RepositoryProvider, get_repository_provider

__all__ = [
    "RepositoryProvider",
    "get_repository_provider",
]
