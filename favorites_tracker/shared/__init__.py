# 📄 File: favorites_tracker/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package holding the common tools every part of
# FavoritesTracker uses, like settings, logging, errors and the service phone book.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, typed exceptions, the service
# container and structured logging.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - favorites_tracker.modules.favorites
# - favorites_tracker.main

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management (pydantic-settings, Supabase client manager)
- Typed exception taxonomy
- Service container (dependency injection)
- Structured logging
"""

__all__ = []
