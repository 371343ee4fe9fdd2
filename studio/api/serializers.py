"""Serializers between models, client slot records and database rows."""

from typing import Any

from ..models.group import SlotGroup
from ..models.package import Package
from ..models.slot import Placement, Slot
from ..models.template import Hole, TemplateShape

PLACEMENT_VERSION = "photo-centric"


def serialize_slot(slot: Slot) -> dict:
    """Serialize a slot to the client's camelCase record."""
    result: dict[str, Any] = {
        "id": slot.id,
        "templateId": slot.group_id,
        "templateName": slot.group_name,
        "templateType": slot.template_type,
        "printSize": slot.print_size,
        "slotIndex": slot.index_in_group,
    }
    if slot.template_shape_id:
        result["manualTemplateId"] = slot.template_shape_id
    if slot.photo_ref is not None:
        result["photoId"] = slot.photo_ref
    if slot.placement is not None:
        result["transform"] = serialize_placement(slot.placement)
    return result


def serialize_slots(slots: list[Slot]) -> list[dict]:
    return [serialize_slot(slot) for slot in slots]


def serialize_placement(placement: Placement) -> dict:
    return {
        "photoScale": placement.scale,
        "photoCenterX": placement.center_x,
        "photoCenterY": placement.center_y,
        "version": PLACEMENT_VERSION,
    }


def serialize_group(group: SlotGroup) -> dict:
    """Serialize a print with its slots."""
    return {
        "templateId": group.group_id,
        "templateName": group.group_name,
        "position": group.ordinal,
        "slots": serialize_slots(group.slots),
    }


def parse_slot(data: dict) -> Slot:
    """Parse a client slot record. Raises KeyError on missing required keys.

    Records saved before manualTemplateId existed only carry templateType,
    so their shape id is empty.
    """
    transform = data.get("transform")
    return Slot(
        id=str(data["id"]),
        group_id=str(data["templateId"]),
        group_name=data.get("templateName", ""),
        template_shape_id=str(data.get("manualTemplateId") or ""),
        index_in_group=int(data["slotIndex"]),
        print_size=data.get("printSize") or "",
        template_type=data.get("templateType") or "",
        photo_ref=data.get("photoId") or None,
        placement=parse_placement(transform) if transform else None,
    )


def parse_slots(records: list[dict]) -> list[Slot]:
    return [parse_slot(record) for record in records]


def parse_placement(data: dict) -> Placement:
    """Parse a transform record.

    Accepts the photo-centric form and the older {scale, x, y} form, where
    x/y were already normalised centres.
    """
    if "photoScale" in data:
        return Placement(
            scale=float(data["photoScale"]),
            center_x=float(data.get("photoCenterX", 0.5)),
            center_y=float(data.get("photoCenterY", 0.5)),
        )
    return Placement(
        scale=float(data.get("scale", 1.0)),
        center_x=float(data.get("x", 0.5)),
        center_y=float(data.get("y", 0.5)),
    )


def parse_template_row(row: dict) -> TemplateShape:
    """Parse a manual_templates row."""
    holes = tuple(
        Hole(
            x=float(hole.get("x", 0)),
            y=float(hole.get("y", 0)),
            width=float(hole["width"]),
            height=float(hole["height"]),
        )
        for hole in row.get("holes_data") or []
    )
    return TemplateShape(
        shape_id=str(row["id"]),
        name=row["name"],
        holes=holes,
        print_size=row["print_size"],
        template_type=row.get("template_type") or "",
        description=row.get("description"),
        drive_file_id=row.get("drive_file_id"),
        is_active=row.get("is_active", True),
        sort_order=row.get("sort_order") or 0,
    )


def parse_package_row(row: dict) -> Package:
    """Parse a manual_packages row, with embedded package_templates if selected."""
    links = sorted(row.get("package_templates") or [], key=lambda link: link.get("order_index", 0))
    templates = [parse_template_row(link["template"]) for link in links if link.get("template")]
    price = row.get("price")
    return Package(
        id=str(row["id"]),
        name=row["name"],
        print_size=row["print_size"],
        template_count=row.get("template_count") or len(templates),
        price=float(price) if price is not None else None,
        description=row.get("description"),
        is_active=row.get("is_active", True),
        is_default=row.get("is_default", False),
        sort_order=row.get("sort_order") or 0,
        templates=templates,
    )


def serialize_template(shape: TemplateShape) -> dict:
    """Serialize a template for a candidate list."""
    return {
        "id": shape.shape_id,
        "name": shape.name,
        "templateType": shape.template_type,
        "printSize": shape.print_size,
        "slotCount": shape.slot_count,
    }
