import uuid


def new_slot_id() -> str:
    """Return a fresh opaque slot id."""
    return uuid.uuid4().hex


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))
