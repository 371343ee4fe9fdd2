"""Business logic services."""

from .cache import TTLCache
from .package import PackageError, PackageService
from .session_store import SessionStore, SessionStoreError
from .swap import (
    EmptyShapeError,
    IncompatibleTemplateError,
    InvalidTargetError,
    NoTemplatesAvailableError,
    PartialSaveError,
    SwapError,
    TemplateNotFoundError,
    TemplateSwapService,
)
from .template_catalog import CatalogError, TemplateCatalogService

__all__ = [
    "CatalogError",
    "EmptyShapeError",
    "IncompatibleTemplateError",
    "InvalidTargetError",
    "NoTemplatesAvailableError",
    "PackageError",
    "PackageService",
    "PartialSaveError",
    "SessionStore",
    "SessionStoreError",
    "SwapError",
    "TTLCache",
    "TemplateCatalogService",
    "TemplateNotFoundError",
    "TemplateSwapService",
]
