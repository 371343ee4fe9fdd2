"""Package service - packages and their ordered templates."""

import logging

from ..api.serializers import parse_package_row
from ..clients.supabase import SupabaseClient, SupabaseError
from ..config import PACKAGE_CACHE_TTL, TABLE_PACKAGES
from ..models.package import Package
from .cache import TTLCache

logger = logging.getLogger(__name__)

_ALL_KEY = "packages"
_WITH_TEMPLATES = "*, package_templates (id, order_index, template:manual_templates (*))"


class PackageError(Exception):
    """Failed to load packages."""

    pass


class PackageService:
    """Read packages from the database."""

    def __init__(self, client: SupabaseClient, cache: TTLCache | None = None):
        self.client = client
        self.cache = cache or TTLCache(PACKAGE_CACHE_TTL)

    def get_all_packages(self) -> list[Package]:
        cached = self.cache.get(_ALL_KEY)
        if cached is not None:
            return cached

        try:
            rows = self.client.select(
                TABLE_PACKAGES,
                order=[("sort_order", True), ("created_at", False)],
            )
        except SupabaseError as e:
            raise PackageError(f"Failed to load packages: {e}") from e

        packages = [parse_package_row(row) for row in rows]
        logger.info(f"Loaded {len(packages)} packages")
        self.cache.put(_ALL_KEY, packages)
        return packages

    def get_active_packages(self) -> list[Package]:
        return [p for p in self.get_all_packages() if p.is_active]

    def get_packages_by_print_size(self, print_size: str) -> list[Package]:
        return [p for p in self.get_active_packages() if p.print_size == print_size]

    def get_package_with_templates(self, package_id: str) -> Package | None:
        """Package with templates in order_index order, or None if it does not exist."""
        key = f"package:{package_id}"
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        try:
            rows = self.client.select(
                TABLE_PACKAGES, filters={"id": package_id}, columns=_WITH_TEMPLATES, limit=1
            )
        except SupabaseError as e:
            raise PackageError(f"Failed to load package {package_id}: {e}") from e

        if not rows:
            return None

        package = parse_package_row(rows[0])
        logger.info(f"Loaded package {package.name} with {len(package.templates)} templates")
        self.cache.put(key, package)
        return package

    def clear_cache(self) -> None:
        self.cache.invalidate()
