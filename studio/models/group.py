"""Slot group view - the slots of one print."""

from dataclasses import dataclass, field

from .slot import Slot


@dataclass
class SlotGroup:
    """All slots sharing a group_id, in sequence order."""

    group_id: str
    group_name: str
    ordinal: int                                          # 1-based, by first occurrence
    slots: list[Slot] = field(default_factory=list)
    positions: list[int] = field(default_factory=list)    # Indices in the full sequence

    @property
    def first_index(self) -> int:
        return self.positions[0]

    @property
    def template_shape_id(self) -> str:
        return self.slots[0].template_shape_id

    @property
    def template_type(self) -> str:
        return self.slots[0].template_type

    @property
    def print_size(self) -> str:
        return self.slots[0].print_size
