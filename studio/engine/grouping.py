"""Grouping of a flat slot sequence into prints."""

from ..models.group import SlotGroup
from ..models.slot import Slot

ADDITIONAL_MARKERS = ("(Additional)", "(Additional Print #")


class InvalidSequenceError(Exception):
    """Slot sequence breaks a group invariant."""

    pass


def group_slots_by_group_id(slots: list[Slot]) -> list[SlotGroup]:
    """Group slots by group_id, ordered by first occurrence.

    Slots of a group keep their relative order. Groups do not need to be
    contiguous in the sequence; `positions` records where each slot sits.
    """
    groups: dict[str, SlotGroup] = {}
    for position, slot in enumerate(slots):
        group = groups.get(slot.group_id)
        if group is None:
            group = SlotGroup(
                group_id=slot.group_id,
                group_name=slot.group_name,
                ordinal=len(groups) + 1,
            )
            groups[slot.group_id] = group
        group.slots.append(slot)
        group.positions.append(position)
    return list(groups.values())


def find_group(slots: list[Slot], group_id: str) -> SlotGroup | None:
    """Return the group with this id, or None."""
    for group in group_slots_by_group_id(slots):
        if group.group_id == group_id:
            return group
    return None


def group_at(slots: list[Slot], position: int) -> SlotGroup | None:
    """Return the group at a 0-based group position, or None."""
    groups = group_slots_by_group_id(slots)
    if 0 <= position < len(groups):
        return groups[position]
    return None


def is_additional_name(name: str) -> bool:
    """True if a group name marks a print added beyond the package."""
    return any(marker in name for marker in ADDITIONAL_MARKERS)


def print_label(shape_name: str, ordinal: int, additional: bool = False) -> str:
    """Display name of a print: "Solo (Print #2)" / "Solo (Additional Print #4)"."""
    if additional:
        return f"{shape_name} (Additional Print #{ordinal})"
    return f"{shape_name} (Print #{ordinal})"


def validate_sequence(slots: list[Slot]) -> None:
    """Raise InvalidSequenceError if any group breaks the slot invariants.

    Every slot of a group must share name, shape, type and print size, and the
    indices in the group must be exactly 0..n-1.
    """
    problems = []
    for group in group_slots_by_group_id(slots):
        first = group.slots[0]
        for slot in group.slots[1:]:
            if (slot.group_name, slot.template_shape_id, slot.template_type, slot.print_size) != (
                first.group_name,
                first.template_shape_id,
                first.template_type,
                first.print_size,
            ):
                problems.append(f"group {group.group_id}: slot {slot.id} disagrees with slot {first.id}")

        indices = sorted(slot.index_in_group for slot in group.slots)
        if indices != list(range(len(group.slots))):
            problems.append(f"group {group.group_id}: indices {indices} are not 0..{len(group.slots) - 1}")

    if problems:
        raise InvalidSequenceError("; ".join(problems))
