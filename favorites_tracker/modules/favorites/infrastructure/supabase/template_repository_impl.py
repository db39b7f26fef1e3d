# 📄 File: favorites_tracker/modules/favorites/infrastructure/supabase/template_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Stores templates in Supabase and answers "show me public templates", "search templates"
# and "which templates are featured".
# 🧪 Purpose (Technical Summary):
# Concrete TemplateRepository over the PostgREST "templates" table. Browse/search queries
# filter on is_public; featured ordering is download_count desc, then created_at asc.
# 🔗 Dependencies:
# supabase (via SupabaseManager), domain models, validation, mappers
# 🔄 Connected Modules / Calls From:
# RepositoryProvider.template_repository

from typing import List, Optional

from favorites_tracker.shared.core.exceptions import NotFoundError

from ...domain.models.template import Template
from ...domain.repositories.template_repository import TemplateRepository
from ...domain.validation import validate_template
from .base import SupabaseRepository, ilike_pattern
from .mappers import TEMPLATES_TABLE, row_to_template, template_to_row


class SupabaseTemplateRepository(SupabaseRepository, TemplateRepository):
    """Supabase implementation of the TemplateRepository interface."""

    repository_name = "SupabaseTemplateRepository"
    table_name = TEMPLATES_TABLE
    resource_type = "template"

    def _public(self):
        return self._table().select("*").eq("is_public", True)

    async def get_templates(self) -> List[Template]:
        with self._call("get_templates"):
            response = self._public().order("created_at").execute()
        return [row_to_template(row) for row in self._rows(response)]

    async def get_template(self, template_id: str) -> Optional[Template]:
        with self._call("get_template"):
            response = self._table().select("*").eq("id", template_id).limit(1).execute()
        row = self._first(response)
        return row_to_template(row) if row else None

    async def create_template(self, template: Template) -> Template:
        validate_template(template)
        with self._call("create_template"):
            response = self._table().insert(template_to_row(template)).execute()
        row = self._first(response)
        return row_to_template(row) if row else template

    async def update_template(self, template: Template) -> Template:
        validate_template(template)
        with self._call("update_template"):
            response = self._table().update(template_to_row(template)).eq("id", template.id).execute()
            row = self._first(response)
            if row is None:
                raise NotFoundError(
                    message=f"Template {template.id} not found",
                    resource_type=self.resource_type,
                    resource_id=template.id,
                    operation="update_template"
                )
        return row_to_template(row)

    async def delete_template(self, template_id: str) -> None:
        with self._call("delete_template"):
            self._table().delete().eq("id", template_id).execute()

    async def search_templates(self, query: str, category: Optional[str] = None) -> List[Template]:
        with self._call("search_templates"):
            request = self._public().ilike("name", ilike_pattern(query))
            if category is not None:
                request = request.eq("category", category)
            response = request.order("created_at").execute()
        return [row_to_template(row) for row in self._rows(response)]

    async def get_featured_templates(self) -> List[Template]:
        with self._call("get_featured_templates"):
            response = (
                self._public()
                .order("download_count", desc=True)
                .order("created_at")
                .execute()
            )
        return [row_to_template(row) for row in self._rows(response)]
