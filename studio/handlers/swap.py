"""AWS Lambda handler for template swaps."""

import json
import logging

from ..api.serializers import parse_slots, serialize_group, serialize_slots, serialize_template
from ..clients import SupabaseClient
from ..config import SUPABASE_ANON_KEY, SUPABASE_URL
from ..engine.grouping import InvalidSequenceError, find_group, group_at, validate_sequence
from ..services import (
    EmptyShapeError,
    IncompatibleTemplateError,
    InvalidTargetError,
    NoTemplatesAvailableError,
    SessionStore,
    TemplateCatalogService,
    TemplateNotFoundError,
    TemplateSwapService,
)

logger = logging.getLogger(__name__)

_service: TemplateSwapService | None = None


def get_service() -> TemplateSwapService:
    """Build the swap service once per container so the template cache is reused."""
    global _service
    if _service is None:
        client = SupabaseClient(SUPABASE_URL, SUPABASE_ANON_KEY)
        _service = TemplateSwapService(TemplateCatalogService(client), SessionStore(client))
    return _service


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def handler(event, context, service: TemplateSwapService | None = None):
    """
    AWS Lambda handler - triggered by SQS or HTTP.

    Input payload:
    {
        "slots": [{"id": "...", "templateId": "...", "templateType": "solo", ...}],
        "group_id": "tpl-solo_0",          # or "position": 0
        "template_id": "tpl-collage",      # omit to list candidates instead
        "print_size": "4R",                # optional fallback
        "session_id": "..."                # optional, persists the result
    }

    Output: {"group_id", "group_name", "group", "slots"} or {"group_id", "candidates"}.
    """
    # Handle SQS event format
    if "Records" in event:
        body = json.loads(event["Records"][0]["body"])
    else:
        body = json.loads(event.get("body") or "{}")

    if "slots" not in body:
        return _response(400, {"error": "Missing 'slots' field"})
    if not body.get("group_id") and body.get("position") is None:
        return _response(400, {"error": "Missing 'group_id' or 'position' field"})

    try:
        slots = parse_slots(body["slots"])
        validate_sequence(slots)
        position = int(body["position"]) if not body.get("group_id") else None
    except (KeyError, TypeError, ValueError, InvalidSequenceError) as e:
        return _response(400, {"error": f"Invalid slots: {e}"})

    service = service or get_service()
    fallback_print_size = body.get("print_size")

    group = find_group(slots, body["group_id"]) if position is None else group_at(slots, position)
    if group is None:
        return _response(404, {"error": "Print not found"})

    try:
        if not body.get("template_id"):
            candidates = service.list_candidates(slots, group.group_id, fallback_print_size)
            selected = service.default_selection(slots, group.group_id, candidates)
            return _response(200, {
                "group_id": group.group_id,
                "candidates": [serialize_template(c) for c in candidates],
                "selected": selected.shape_id if selected else None,
            })

        if body.get("session_id"):
            result = service.swap_and_save(
                body["session_id"], slots, group.group_id, body["template_id"], fallback_print_size
            )
        else:
            result = service.swap_by_id(slots, group.group_id, body["template_id"], fallback_print_size)

        new_group = find_group(result, group.group_id)
        logger.info(f"Swap complete for {group.group_id}: {new_group.group_name}")
        return _response(200, {
            "group_id": group.group_id,
            "group_name": new_group.group_name,
            "group": serialize_group(new_group),
            "slots": serialize_slots(result),
        })

    except (InvalidTargetError, TemplateNotFoundError) as e:
        return _response(404, {"error": str(e)})
    except (EmptyShapeError, IncompatibleTemplateError, NoTemplatesAvailableError) as e:
        return _response(422, {"error": str(e)})
    except Exception as e:
        logger.exception(f"Swap failed: {e}")
        return _response(500, {"error": str(e)})


# Local testing
if __name__ == "__main__":
    import sys

    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) < 4:
        print("Usage: python -m studio.handlers.swap <slots.json> <group_id> <template_id>")
        sys.exit(1)

    with open(sys.argv[1]) as f:
        slots_data = json.load(f)

    event = {"body": json.dumps({
        "slots": slots_data,
        "group_id": sys.argv[2],
        "template_id": sys.argv[3],
    })}

    result = handler(event, None)
    print(json.dumps(json.loads(result["body"]), indent=2))
