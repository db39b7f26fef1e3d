# 📄 File: favorites_tracker/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell FavoritesTracker how to reach its Supabase backend
# and how to behave in each environment.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting settings management.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - favorites_tracker.main (application startup)
# - Repository provider and Supabase repositories

"""
Configuration Management Package

Handles environment-based settings and Supabase integration settings.
The Supabase client manager lives in ``.supabase`` and is imported explicitly
so that settings can be loaded without the Supabase SDK.
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
