"""
Serialization of parsed click events.

Two output formats, both pure functions of the event sequence:
- Grouped lists: one newline-joined list per column, for pasting a single
  column into a spreadsheet
- CSV table: fixed header and column order, minimal quoting

Column order everywhere is Account Executive, Workspace ID, Timestamp.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from democlick.contexts.intake.click_event import ClickEvent
from democlick.utils.csv_formatting import format_csv_row

CSV_HEADER = ("Account Executive", "Workspace ID", "Timestamp")
CSV_MIME_TYPE = "text/csv;charset=utf-8;"
DEFAULT_CSV_FILENAME = "demo-clicks.csv"


class Column(str, Enum):
    """Exportable event columns, in export order."""

    AE_NAME = "ae"
    WORKSPACE_ID = "workspace"
    TIMESTAMP = "timestamp"

    @property
    def label(self) -> str:
        """Plural heading used for the grouped list."""
        return {
            Column.AE_NAME: "Account Executives",
            Column.WORKSPACE_ID: "Workspace IDs",
            Column.TIMESTAMP: "Timestamps",
        }[self]


@dataclass(frozen=True)
class GroupedLists:
    """
    Per-column values of an event sequence, each in event order.

    Lists are tuples so copying one column can never reorder or edit the
    others (or the events they came from).
    """

    ae_names: tuple[str, ...] = ()
    workspace_ids: tuple[str, ...] = ()
    timestamps: tuple[str, ...] = ()

    def items(self, column: Column) -> tuple[str, ...]:
        return {
            Column.AE_NAME: self.ae_names,
            Column.WORKSPACE_ID: self.workspace_ids,
            Column.TIMESTAMP: self.timestamps,
        }[Column(column)]

    def as_text(self, column: Column) -> str:
        """Newline-joined column, ready for the clipboard."""
        return "\n".join(self.items(column))


def event_row(event: ClickEvent) -> tuple[str, str, str]:
    """Event values in CSV column order."""
    return (event.ae_name, event.workspace_id, event.timestamp)


def grouped_lists(events: Iterable[ClickEvent]) -> GroupedLists:
    """
    Split events into per-column lists.

    Args:
        events: Parsed events

    Returns:
        GroupedLists with one entry per event in every column
    """
    events = tuple(events)
    return GroupedLists(
        ae_names=tuple(event.ae_name for event in events),
        workspace_ids=tuple(event.workspace_id for event in events),
        timestamps=tuple(event.timestamp for event in events),
    )


def to_csv(events: Iterable[ClickEvent]) -> str:
    """
    Render events as a CSV table.

    Rows are joined by a single newline with no trailing newline, so an empty
    event sequence renders as the header row alone.

    Args:
        events: Parsed events

    Returns:
        CSV text

    Example:
        >>> to_csv([ClickEvent("Jan 05 10:30:00", "w,123", "Jane Doe")])
        'Account Executive,Workspace ID,Timestamp\\nJane Doe,"w,123",Jan 05 10:30:00'
    """
    rows = [format_csv_row(CSV_HEADER)]
    rows.extend(format_csv_row(event_row(event)) for event in events)
    return "\n".join(rows)
