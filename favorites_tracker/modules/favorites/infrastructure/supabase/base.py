# 📄 File: favorites_tracker/modules/favorites/infrastructure/supabase/base.py
# 🧭 Purpose (Layman Explanation):
# Common plumbing shared by every repository that talks to Supabase.
# 🧪 Purpose (Technical Summary):
# Base class holding the SupabaseManager, the target table and a backend_call helper
# bound to the repository name; plus LIKE-pattern escaping for name search.
# 🔗 Dependencies:
# favorites_tracker.shared.config.supabase, supabase/errors.py
# 🔄 Connected Modules / Calls From:
# Supabase item, collection, template and user repositories

from typing import Any, Dict, List, Optional

from favorites_tracker.shared.config.supabase import SupabaseManager

from .errors import backend_call


def ilike_pattern(query: str) -> str:
    """Case-insensitive substring pattern with LIKE wildcards escaped."""
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SupabaseRepository:
    """Base for PostgREST-backed repositories."""

    repository_name = "SupabaseRepository"
    table_name: str = ""
    resource_type: str = ""

    def __init__(self, supabase_manager: SupabaseManager):
        self._manager = supabase_manager

    def _table(self):
        return self._manager.table(self.table_name)

    def _call(self, operation: str):
        return backend_call(self.repository_name, operation, self.resource_type)

    @staticmethod
    def _rows(response) -> List[Dict[str, Any]]:
        return list(response.data or [])

    @staticmethod
    def _first(response) -> Optional[Dict[str, Any]]:
        rows = response.data or []
        return rows[0] if rows else None
