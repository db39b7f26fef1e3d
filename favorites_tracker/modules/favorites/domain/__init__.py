# 📄 File: favorites_tracker/modules/favorites/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules about users, collections, items and templates, with no knowledge of
# where the data is actually stored.
# 🧪 Purpose (Technical Summary):
# Domain layer: entities, repository contracts and write-time validation rules.
# 🔗 Dependencies:
# Domain models and repositories subpackages
# 🔄 Connected Modules / Calls From:
# Infrastructure layer, service assembly
