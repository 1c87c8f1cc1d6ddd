"""
Shared utilities for DEMOCLICK.

Common functionality used across contexts:
- Logger setup
- CSV cell formatting
- Timestamps for session directories
"""

from democlick.utils.csv_formatting import escape_csv_cell, format_csv_row
from democlick.utils.timestamp import now

__all__ = ["escape_csv_cell", "format_csv_row", "now"]
