"""Session store - persists a session's slot sequence."""

import logging

from ..api.serializers import parse_slots, serialize_slots
from ..clients.supabase import SupabaseClient, SupabaseError
from ..config import SESSION_SLOTS_COLUMN, TABLE_SESSION_TEMPLATES, TABLE_SESSIONS
from ..models.slot import Slot

logger = logging.getLogger(__name__)


class SessionStoreError(Exception):
    """Failed to read or write session state."""

    pass


class SessionStore:
    """Load and save slot sequences on the sessions table."""

    def __init__(self, client: SupabaseClient):
        self.client = client

    def load_slots(self, session_id: str) -> list[Slot]:
        try:
            rows = self.client.select(
                TABLE_SESSIONS,
                filters={"id": session_id},
                columns=f"id, {SESSION_SLOTS_COLUMN}",
                limit=1,
            )
        except SupabaseError as e:
            raise SessionStoreError(f"Failed to load session {session_id}: {e}") from e

        if not rows:
            raise SessionStoreError(f"Session not found: {session_id}")
        return parse_slots(rows[0].get(SESSION_SLOTS_COLUMN) or [])

    def save_slots(self, session_id: str, slots: list[Slot]) -> None:
        try:
            rows = self.client.update(
                TABLE_SESSIONS,
                {SESSION_SLOTS_COLUMN: serialize_slots(slots)},
                filters={"id": session_id},
            )
        except SupabaseError as e:
            raise SessionStoreError(f"Failed to save session {session_id}: {e}") from e

        if not rows:
            raise SessionStoreError(f"Session not found: {session_id}")
        logger.info(f"Saved {len(slots)} slots for session {session_id}")

    def replace_session_template(self, session_id: str, position: int, template_id: str) -> None:
        """Record the template used at a 1-based print position."""
        try:
            self.client.insert(
                TABLE_SESSION_TEMPLATES,
                {"session_id": session_id, "position": position, "template_id": template_id},
                upsert_on="session_id,position",
            )
        except SupabaseError as e:
            raise SessionStoreError(
                f"Failed to replace template at position {position} for session {session_id}: {e}"
            ) from e
