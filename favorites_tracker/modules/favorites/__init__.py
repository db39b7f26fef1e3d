# 📄 File: favorites_tracker/modules/favorites/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about favorites: users, their collections, the items inside them,
# shareable templates and uploaded photos.
# 🧪 Purpose (Technical Summary):
# Feature module laid out as domain (entities, repository contracts, validation) and
# infrastructure (Supabase repositories, in-memory fakes, repository provider), plus service assembly.
# 🔗 Dependencies:
# pydantic, supabase, favorites_tracker.shared
# 🔄 Connected Modules / Calls From:
# favorites_tracker.main

"""
Favorites Module

Architecture follows Domain-Driven Design:
- Domain: Entities, value objects, repository contracts and write-time validation
- Infrastructure: Supabase-backed repositories, in-memory test doubles, repository provider
- Assembly: Container registrations for production and tests
"""

__version__ = "1.0.0"
