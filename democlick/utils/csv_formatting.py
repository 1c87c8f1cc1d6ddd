"""
CSV cell formatting for spreadsheet-safe export.

Quoting is minimal: a cell is wrapped in double quotes (with internal quotes
doubled) only when it contains a comma, a double quote, or a line break.
Everything else is emitted as-is so the export stays diff-friendly.
"""

import re
from typing import Any, Iterable

# Characters that force a cell to be quoted
CSV_SPECIAL_CHARS = re.compile(r'[",\n\r]')


def escape_csv_cell(value: Any) -> str:
    """
    Render one value as a CSV cell.

    Args:
        value: Cell value (None renders as empty string, other values via str())

    Returns:
        Raw string, or quoted string with doubled internal quotes

    Examples:
        >>> escape_csv_cell("w_123")
        'w_123'
        >>> escape_csv_cell("w,123")
        '"w,123"'
        >>> escape_csv_cell('a "b" c')
        '"a ""b"" c"'
        >>> escape_csv_cell(None)
        ''
    """
    text = "" if value is None else str(value)
    if CSV_SPECIAL_CHARS.search(text):
        return '"' + text.replace('"', '""') + '"'
    return text


def format_csv_row(values: Iterable[Any]) -> str:
    """Escape each value and join with commas."""
    return ",".join(escape_csv_cell(value) for value in values)
