"""Session slot operations - building, extending and editing a slot sequence."""

import dataclasses
from collections import Counter

from ..models.slot import Placement, Slot
from ..models.template import TemplateShape
from ..utils import new_slot_id
from .grouping import find_group, group_slots_by_group_id, is_additional_name, print_label
from .placement import normalize_placement


class SessionError(Exception):
    """Invalid operation on a session slot sequence."""

    pass


class GroupNotFoundError(SessionError):
    """No print with the given group id."""

    pass


class SlotNotFoundError(SessionError):
    """No slot with the given id."""

    pass


class ProtectedPrintError(SessionError):
    """Package prints cannot be removed, only additional ones."""

    pass


def build_package_slots(templates: list[TemplateShape]) -> list[Slot]:
    """Create the initial slot sequence for a package, one print per template."""
    slots: list[Slot] = []
    for k, shape in enumerate(templates):
        slots.extend(_new_group(shape, f"{shape.shape_id}_{k}", print_label(shape.name, k + 1)))
    return slots


def add_print(slots: list[Slot], shape: TemplateShape) -> list[Slot]:
    """Append an additional print with empty slots."""
    groups = group_slots_by_group_id(slots)
    existing = {group.group_id for group in groups}

    k = len(groups)
    while f"{shape.shape_id}_{k}" in existing:
        k += 1

    name = print_label(shape.name, len(groups) + 1, additional=True)
    return list(slots) + _new_group(shape, f"{shape.shape_id}_{k}", name)


def remove_print(slots: list[Slot], group_id: str) -> list[Slot]:
    """Remove an additional print. Package prints are protected."""
    group = find_group(slots, group_id)
    if group is None:
        raise GroupNotFoundError(f"Unknown print: {group_id}")
    if not is_additional_name(group.group_name):
        raise ProtectedPrintError(
            f"Cannot remove package print '{group.group_name}'. Only added prints can be removed."
        )
    return [slot for slot in slots if slot.group_id != group_id]


def assign_photo(slots: list[Slot], slot_id: str, photo_ref: str) -> list[Slot]:
    """Put a photo in a slot. Any previous placement no longer applies."""
    return _replace_slot(slots, slot_id, photo_ref=photo_ref, placement=None)


def clear_photo(slots: list[Slot], slot_id: str) -> list[Slot]:
    return _replace_slot(slots, slot_id, photo_ref=None, placement=None)


def set_placement(slots: list[Slot], slot_id: str, placement: Placement) -> list[Slot]:
    """Store a user adjusted placement, clamped to the allowed range."""
    return _replace_slot(slots, slot_id, placement=normalize_placement(placement))


def photo_usage(slots: list[Slot]) -> dict[str, int]:
    """How many slots each photo fills."""
    return dict(Counter(slot.photo_ref for slot in slots if slot.photo_ref))


def _new_group(shape: TemplateShape, group_id: str, group_name: str) -> list[Slot]:
    return [
        Slot(
            id=new_slot_id(),
            group_id=group_id,
            group_name=group_name,
            template_shape_id=shape.shape_id,
            index_in_group=i,
            print_size=shape.print_size,
            template_type=shape.template_type,
        )
        for i in range(shape.slot_count)
    ]


def _replace_slot(slots: list[Slot], slot_id: str, **changes) -> list[Slot]:
    if not any(slot.id == slot_id for slot in slots):
        raise SlotNotFoundError(f"Unknown slot: {slot_id}")
    return [
        dataclasses.replace(slot, **changes) if slot.id == slot_id else slot
        for slot in slots
    ]
