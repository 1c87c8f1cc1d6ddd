"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import Optional


class ParseConfigError(ValueError):
    """
    Exception raised when a parse configuration is invalid.

    Raised at load time, never during parsing, so a bad config cannot turn a
    parse call into an exception.

    Attributes:
        message: Error description
        config_path: YAML file the bad value came from (if any)
        original_error: The underlying OmegaConf, YAML or I/O error (if any)
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.original_error = original_error

        parts = [message]

        if config_path:
            parts.append(f"\nConfig file: {config_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
