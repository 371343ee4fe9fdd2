"""Template swap service - catalog lookup, validation, reconcile, persist.

Shared by the package preview swap and the in-editor template change.
"""

import logging

from ..config import DEFAULT_PRINT_SIZE
from ..engine.grouping import find_group, group_at
from ..engine.reconciler import reconcile
from ..models.group import SlotGroup
from ..models.slot import Slot
from ..models.template import TemplateShape
from .session_store import SessionStore, SessionStoreError
from .template_catalog import TemplateCatalogService

logger = logging.getLogger(__name__)


class SwapError(Exception):
    """Template swap cannot be performed."""

    pass


class InvalidTargetError(SwapError):
    """The group to swap is not in the slot sequence."""

    pass


class EmptyShapeError(SwapError):
    """The replacement template has no holes."""

    pass


class TemplateNotFoundError(SwapError):
    """The replacement template is not in the catalog."""

    pass


class NoTemplatesAvailableError(SwapError):
    """The catalog has no templates for the print size."""

    pass


class IncompatibleTemplateError(SwapError):
    """The replacement template is inactive or made for another print size."""

    pass


class PartialSaveError(SwapError):
    """The slots were saved but the session template record was not updated."""

    pass


class TemplateSwapService:
    """Swap the template of one print in a slot sequence."""

    def __init__(self, catalog: TemplateCatalogService, store: SessionStore | None = None):
        self.catalog = catalog
        self.store = store

    def current_print_size(self, slots: list[Slot], group_id: str, fallback: str | None = None) -> str:
        group = self._require_group(slots, group_id)
        if group.print_size:
            return group.print_size
        print_size = fallback or DEFAULT_PRINT_SIZE
        logger.warning(f"Group {group_id} has no print size, using {print_size}")
        return print_size

    def list_candidates(
        self, slots: list[Slot], group_id: str, fallback_print_size: str | None = None
    ) -> list[TemplateShape]:
        """Templates the group can be swapped to (same print size)."""
        print_size = self.current_print_size(slots, group_id, fallback_print_size)
        candidates = self.catalog.get_templates_by_print_size(print_size)
        if not candidates:
            raise NoTemplatesAvailableError(f"No templates available for print size {print_size}")
        return candidates

    def default_selection(
        self, slots: list[Slot], group_id: str, candidates: list[TemplateShape]
    ) -> TemplateShape | None:
        """The group's current template if listed, else the first candidate.

        Matches on the shape id when the slots carry one, then on the
        template type, which is all that older saved slots record.
        """
        group = self._require_group(slots, group_id)
        current = None
        if group.template_shape_id:
            current = next((c for c in candidates if c.shape_id == group.template_shape_id), None)
        if current is None and group.template_type:
            current = next((c for c in candidates if c.template_type == group.template_type), None)
        if current is None and candidates:
            logger.warning(
                f"Current template {group.template_shape_id or group.template_type} not among candidates, "
                f"selecting first"
            )
            return candidates[0]
        return current

    def swap(
        self,
        slots: list[Slot],
        group_id: str,
        shape: TemplateShape,
        fallback_print_size: str | None = None,
    ) -> list[Slot]:
        """Validate and reconcile. Returns the new slot sequence."""
        group = self._require_group(slots, group_id)
        if shape.slot_count < 1:
            raise EmptyShapeError(f"Template {shape.name} ({shape.shape_id}) has no holes")
        if not shape.is_active:
            raise IncompatibleTemplateError(f"Template {shape.name} ({shape.shape_id}) is not active")
        print_size = self.current_print_size(slots, group_id, fallback_print_size)
        if shape.print_size != print_size:
            raise IncompatibleTemplateError(
                f"Template {shape.name} ({shape.shape_id}) is for {shape.print_size}, "
                f"print #{group.ordinal} is {print_size}"
            )

        result = reconcile(slots, group_id, shape, fallback_print_size)
        logger.info(
            f"Swapped print #{group.ordinal} ({group.group_name}) to {shape.name}: "
            f"{len(group.slots)} -> {shape.slot_count} slots"
        )
        return result

    def swap_by_id(
        self,
        slots: list[Slot],
        group_id: str,
        shape_id: str,
        fallback_print_size: str | None = None,
    ) -> list[Slot]:
        return self.swap(slots, group_id, self._require_template(shape_id), fallback_print_size)

    def swap_at_position(
        self,
        slots: list[Slot],
        position: int,
        shape_id: str,
        fallback_print_size: str | None = None,
    ) -> list[Slot]:
        """Swap the print at a 0-based group position."""
        group = group_at(slots, position)
        if group is None:
            raise InvalidTargetError(f"No print at position {position}")
        return self.swap_by_id(slots, group.group_id, shape_id, fallback_print_size)

    def swap_and_save(
        self,
        session_id: str,
        slots: list[Slot],
        group_id: str,
        shape_id: str,
        fallback_print_size: str | None = None,
    ) -> list[Slot]:
        """Swap, then persist the sequence and the template at the print's position.

        The slots are saved first. If the session template record then fails
        to update, PartialSaveError is raised with the slots already stored.
        """
        if self.store is None:
            raise SwapError("No session store configured")

        ordinal = self._require_group(slots, group_id).ordinal
        result = self.swap_by_id(slots, group_id, shape_id, fallback_print_size)
        self.store.save_slots(session_id, result)
        try:
            self.store.replace_session_template(session_id, ordinal, shape_id)
        except SessionStoreError as e:
            raise PartialSaveError(
                f"Slots for session {session_id} were saved but the template at position "
                f"{ordinal} was not updated: {e}"
            ) from e
        return result

    def _require_group(self, slots: list[Slot], group_id: str) -> SlotGroup:
        group = find_group(slots, group_id)
        if group is None:
            raise InvalidTargetError(f"Print {group_id} is not in the session")
        return group

    def _require_template(self, shape_id: str) -> TemplateShape:
        shape = self.catalog.get_template(shape_id)
        if shape is None:
            raise TemplateNotFoundError(f"Unknown template: {shape_id}")
        return shape
