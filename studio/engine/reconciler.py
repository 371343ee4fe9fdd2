"""Template swap reconciliation.

Replaces the slots of one print with slots for a differently shaped
template while keeping every other print where it was.
"""

import logging

from ..config import DEFAULT_PRINT_SIZE
from ..models.slot import Slot
from ..models.template import TemplateShape
from ..utils import new_slot_id
from .grouping import group_slots_by_group_id, is_additional_name, print_label

logger = logging.getLogger(__name__)


def reconcile(
    current_slots: list[Slot],
    target_group_id: str,
    replacement_shape: TemplateShape,
    fallback_print_size: str | None = None,
) -> list[Slot]:
    """Swap the template of one group and return the new slot sequence.

    Preconditions (checked by callers, not here):
        - current_slots holds at least one slot with target_group_id.
        - replacement_shape has at least one hole.

    The new group keeps target_group_id and its ordinal among groups, gets
    fresh slot ids, and always has its placements cleared. Photos carry over
    by index; when shrinking and slot 0 is empty, slot 0 takes the first
    photo found in the old group. current_slots is not modified.
    """
    target = next(
        group for group in group_slots_by_group_id(current_slots)
        if group.group_id == target_group_id
    )
    old_slots = target.slots
    first_index = target.first_index
    all_indices = target.positions

    group_name = print_label(
        replacement_shape.name,
        target.ordinal,
        additional=is_additional_name(target.group_name),
    )
    print_size = old_slots[0].print_size or fallback_print_size or DEFAULT_PRINT_SIZE

    new_count = replacement_shape.slot_count
    new_slots = [
        Slot(
            id=new_slot_id(),
            group_id=target_group_id,
            group_name=group_name,
            template_shape_id=replacement_shape.shape_id,
            index_in_group=i,
            print_size=print_size,
            template_type=replacement_shape.template_type,
            photo_ref=_preserved_photo(old_slots, i, new_count),
            placement=None,
        )
        for i in range(new_count)
    ]

    result = list(current_slots)
    for index in sorted(all_indices, reverse=True):
        del result[index]

    removed_before = sum(1 for index in all_indices if index < first_index)
    insert_at = first_index - removed_before
    result[insert_at:insert_at] = new_slots

    logger.debug(
        f"Reconciled group {target_group_id}: {len(old_slots)} -> {new_count} slots "
        f"at index {insert_at} ({group_name})"
    )
    return result


def _preserved_photo(old_slots: list[Slot], index: int, new_count: int) -> str | None:
    """Photo to carry into new slot `index`."""
    if index < len(old_slots) and old_slots[index].photo_ref:
        return old_slots[index].photo_ref

    # Shrinking with an empty first slot: keep the first photo the client picked
    if index == 0 and new_count < len(old_slots):
        return next((slot.photo_ref for slot in old_slots if slot.photo_ref), None)

    return None
