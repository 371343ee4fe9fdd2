"""Placement auto-fit and bounds."""

import dataclasses

from ..models.slot import Placement, Slot
from ..models.template import TemplateShape
from ..utils import clamp

MIN_SCALE = 0.1
MAX_SCALE = 10.0


def auto_fit() -> Placement:
    """Default placement for a newly placed photo: scale 1.0, centred.

    Placements are photo-centric, scale 1.0 being the photo fitted to
    whatever hole it sits in, so the default is the same for every hole.
    """
    return Placement(scale=1.0, center_x=0.5, center_y=0.5)


def normalize_placement(placement: Placement) -> Placement:
    """Clamp scale to [MIN_SCALE, MAX_SCALE] and centres to [0, 1]."""
    return Placement(
        scale=clamp(placement.scale, MIN_SCALE, MAX_SCALE),
        center_x=clamp(placement.center_x, 0.0, 1.0),
        center_y=clamp(placement.center_y, 0.0, 1.0),
    )


def fill_placements(slots: list[Slot], shapes: dict[str, TemplateShape]) -> list[Slot]:
    """Auto-fit every slot that has a photo but no placement.

    Slots whose shape is unknown, or whose index has no hole, are left as is.
    """
    result = []
    for slot in slots:
        shape = shapes.get(slot.template_shape_id)
        if (
            slot.photo_ref
            and slot.placement is None
            and shape is not None
            and slot.index_in_group < shape.slot_count
        ):
            slot = dataclasses.replace(slot, placement=auto_fit())
        result.append(slot)
    return result
