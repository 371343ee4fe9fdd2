"""Template shape model - a layout looked up from the template catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Hole:
    """A photo hole in template pixel coordinates."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class TemplateShape:
    """A named layout that a print can be bound to."""

    shape_id: str
    name: str
    holes: tuple[Hole, ...]
    print_size: str
    template_type: str = ""      # "solo", "collage", "photocard", "photostrip"
    description: str | None = None
    drive_file_id: str | None = None
    is_active: bool = True
    sort_order: int = 0

    @property
    def slot_count(self) -> int:
        return len(self.holes)
