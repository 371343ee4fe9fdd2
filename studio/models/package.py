"""Package model - a sellable set of prints."""

from dataclasses import dataclass, field

from .template import TemplateShape


@dataclass
class Package:
    """A package of templates for one print size."""

    id: str
    name: str
    print_size: str
    template_count: int
    price: float | None = None
    description: str | None = None
    is_active: bool = True
    is_default: bool = False
    sort_order: int = 0
    templates: list[TemplateShape] = field(default_factory=list)  # Ordered by order_index
