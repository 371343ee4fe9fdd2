"""Data models."""

from .group import SlotGroup
from .package import Package
from .slot import Placement, Slot
from .template import Hole, TemplateShape

__all__ = [
    "Hole",
    "Package",
    "Placement",
    "Slot",
    "SlotGroup",
    "TemplateShape",
]
