"""Template catalog service - active templates from the database, cached."""

import logging
from collections import defaultdict

from ..api.serializers import parse_template_row
from ..clients.supabase import SupabaseClient, SupabaseError
from ..config import TABLE_TEMPLATES, TEMPLATE_CACHE_TTL
from ..models.template import TemplateShape
from .cache import TTLCache

logger = logging.getLogger(__name__)

_ALL_KEY = "templates"


class CatalogError(Exception):
    """Failed to load templates."""

    pass


class TemplateCatalogService:
    """Look up template shapes by id, print size and type."""

    def __init__(self, client: SupabaseClient, cache: TTLCache | None = None):
        self.client = client
        self.cache = cache or TTLCache(TEMPLATE_CACHE_TTL)

    def get_all_templates(self) -> list[TemplateShape]:
        """All templates in catalog order (sort_order asc, newest first)."""
        cached = self.cache.get(_ALL_KEY)
        if cached is not None:
            return cached

        try:
            rows = self.client.select(
                TABLE_TEMPLATES,
                order=[("sort_order", True), ("created_at", False)],
            )
        except SupabaseError as e:
            raise CatalogError(f"Failed to load templates: {e}") from e

        templates = [parse_template_row(row) for row in rows]
        active = sum(1 for t in templates if t.is_active)
        logger.info(f"Loaded {len(templates)} templates ({active} active)")
        self.cache.put(_ALL_KEY, templates)
        return templates

    def get_active_templates(self) -> list[TemplateShape]:
        return [t for t in self.get_all_templates() if t.is_active]

    def get_templates_by_print_size(self, print_size: str) -> list[TemplateShape]:
        """Active templates for a print size."""
        return [t for t in self.get_active_templates() if t.print_size == print_size]

    def get_template(self, shape_id: str) -> TemplateShape | None:
        """Any template by id, active or not."""
        return next((t for t in self.get_all_templates() if t.shape_id == shape_id), None)

    def find_template_by_type(self, template_type: str, print_size: str) -> TemplateShape | None:
        """First active template of a type for a print size."""
        return next(
            (t for t in self.get_templates_by_print_size(print_size) if t.template_type == template_type),
            None,
        )

    def get_templates_grouped_by_type(self, print_size: str) -> dict[str, list[TemplateShape]]:
        grouped: dict[str, list[TemplateShape]] = defaultdict(list)
        for template in self.get_templates_by_print_size(print_size):
            grouped[template.template_type].append(template)
        return dict(grouped)

    def get_unique_template_types(self, print_size: str | None = None) -> list[str]:
        """Template types in catalog order, optionally for one print size."""
        templates = (
            self.get_templates_by_print_size(print_size) if print_size else self.get_active_templates()
        )
        return list(dict.fromkeys(t.template_type for t in templates))

    def search_templates(self, query: str) -> list[TemplateShape]:
        """Active templates whose name or description contains query (case-insensitive)."""
        needle = query.lower()
        return [
            t for t in self.get_active_templates()
            if needle in t.name.lower() or (t.description and needle in t.description.lower())
        ]

    def clear_cache(self) -> None:
        self.cache.invalidate()
        logger.info("Template cache cleared")
