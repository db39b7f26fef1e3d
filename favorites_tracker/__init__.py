# 📄 File: favorites_tracker/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this folder holds the FavoritesTracker code and records the basic
# version and package information.
#
# 🧪 Purpose (Technical Summary):
# Package initialization with version metadata for the FavoritesTracker data core
# (entities, repository contracts, service container and repository fakes).
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - favorites_tracker.main (application context)
# - Package imports throughout the application

"""
FavoritesTracker - collections of favorite items

Data core for the FavoritesTracker app: users build collections of favorite
items, optionally from reusable templates with configurable form fields.
"""

__version__ = "1.0.0"
__title__ = "FavoritesTracker"
__description__ = "Collections, items and templates backed by Supabase"
__author__ = "FavoritesTracker Team"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
]
