"""Slot model - one photo position inside a print."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Placement:
    """Photo-centric positioning of a photo inside a hole."""

    scale: float = 1.0      # Zoom relative to the fitted size
    center_x: float = 0.5   # Normalised 0..1
    center_y: float = 0.5


@dataclass(frozen=True)
class Slot:
    """A single photo position bound to one hole of a template shape."""

    id: str
    group_id: str                # Shared by every slot of one print
    group_name: str              # e.g. "Solo (Print #1)"
    template_shape_id: str
    index_in_group: int
    print_size: str              # "4R", "5R", "A4"
    template_type: str = ""      # "solo", "collage", "photocard", "photostrip"
    photo_ref: str | None = None
    placement: Placement | None = None
