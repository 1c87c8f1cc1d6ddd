"""Timestamp helpers for session directories."""

from datetime import datetime


def now() -> str:
    """Compact local timestamp for directory names (e.g., "20261018_142530")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
