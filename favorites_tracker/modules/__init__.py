"""
Feature modules for FavoritesTracker.
"""
