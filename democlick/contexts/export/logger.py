"""
Export context logger.

Provides logging interface for export context with automatic [export] prefix.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[export]"


def _log_info(message: str) -> None:
    """Log info message with [export] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [export] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def log_csv_written(output_path: Path, event_count: int) -> None:
    """Log a completed CSV export."""
    _log_success(f"Wrote {event_count} rows to {output_path}")


def log_column_copied(label: str, item_count: int) -> None:
    """Log a single column emitted for clipboard copy."""
    _log_info(f"Emitted {label} ({item_count} items)")
