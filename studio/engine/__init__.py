"""Slot sequence engine."""

from .grouping import (
    InvalidSequenceError,
    find_group,
    group_at,
    group_slots_by_group_id,
    is_additional_name,
    print_label,
    validate_sequence,
)
from .placement import auto_fit, fill_placements, normalize_placement
from .reconciler import reconcile
from .session import (
    GroupNotFoundError,
    ProtectedPrintError,
    SessionError,
    SlotNotFoundError,
    add_print,
    assign_photo,
    build_package_slots,
    clear_photo,
    photo_usage,
    remove_print,
    set_placement,
)

__all__ = [
    "InvalidSequenceError",
    "GroupNotFoundError",
    "ProtectedPrintError",
    "SessionError",
    "SlotNotFoundError",
    "add_print",
    "assign_photo",
    "auto_fit",
    "build_package_slots",
    "clear_photo",
    "fill_placements",
    "find_group",
    "group_at",
    "group_slots_by_group_id",
    "is_additional_name",
    "normalize_placement",
    "photo_usage",
    "print_label",
    "reconcile",
    "remove_print",
    "set_placement",
    "validate_sequence",
]
