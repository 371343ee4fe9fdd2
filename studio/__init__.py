"""Print studio slot management."""
