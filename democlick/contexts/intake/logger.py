"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from democlick.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path, source: str) -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this parsing session
        source: Where the raw log came from (file path or "stdin")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Input": source},
    )


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_parse_result(parsed, verbose: bool = False) -> None:
    """
    Log a parse summary with diagnostics.

    Args:
        parsed: ParsedClickLog from parse_click_log()
        verbose: Show every warning instead of the first few
    """
    summary = (
        f"{len(parsed.events)} events from {parsed.line_count} lines "
        f"({len(parsed.skipped_lines)} skipped, {parsed.truncated_blocks} truncated)"
    )

    if parsed.needs_plaintext_recopy:
        _log_warning(f"No events found in non-empty input: {summary}")
        return

    if parsed.events:
        _log_success(summary)
    else:
        _log_info("Empty input, nothing to parse")

    if parsed.warnings:
        _log_warning(f"{len(parsed.warnings)} fields left empty")
        warning_limit = len(parsed.warnings) if verbose else 5
        for warning in parsed.warnings[:warning_limit]:
            _log_debug(f"  {warning}")
        if len(parsed.warnings) > warning_limit:
            _log_debug(f"  ... and {len(parsed.warnings) - warning_limit} more")
