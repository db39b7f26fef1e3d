# 📄 File: favorites_tracker/modules/favorites/domain/repositories/template_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for browsing, searching and managing shareable collection templates,
# including the "featured" list of the most downloaded ones.
# 🧪 Purpose (Technical Summary):
# Repository interface for Template entities with public-only browse/search queries and
# featured ordering by descending download count.
# 🔗 Dependencies:
# Domain models (Template), typing, abc
# 🔄 Connected Modules / Calls From:
# Supabase template implementation, in-memory template fake, service assembly

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.template import Template


class TemplateRepository(ABC):
    """
    Repository interface for Template entity data access operations.

    Browse and search queries only ever return public templates.
    """

    @abstractmethod
    async def get_templates(self) -> List[Template]:
        """
        Get all public templates.

        Returns:
            List of public Template entities
        """
        pass

    @abstractmethod
    async def get_template(self, template_id: str) -> Optional[Template]:
        """
        Get template by ID regardless of visibility.

        Args:
            template_id: Template ID to find

        Returns:
            Template entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def create_template(self, template: Template) -> Template:
        """
        Store a new template.

        Raises:
            ValidationError: If the template violates write-time rules
        """
        pass

    @abstractmethod
    async def update_template(self, template: Template) -> Template:
        """
        Replace an existing template with the given record.

        Raises:
            NotFoundError: If a backend has no template with that ID
        """
        pass

    @abstractmethod
    async def delete_template(self, template_id: str) -> None:
        """Delete a template. Deleting a missing template is a no-op."""
        pass

    @abstractmethod
    async def search_templates(self, query: str, category: Optional[str] = None) -> List[Template]:
        """
        Search public templates by name.

        Args:
            query: Case-insensitive substring of the template name
            category: Optional exact-match category filter

        Returns:
            Matching public Template entities
        """
        pass

    @abstractmethod
    async def get_featured_templates(self) -> List[Template]:
        """
        Get featured templates.

        Returns:
            Every public template ordered by descending download_count. Ties keep
            a stable implementation-defined order.
        """
        pass
