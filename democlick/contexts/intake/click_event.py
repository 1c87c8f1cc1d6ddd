"""
Click event data structure for the Intake context.

A ClickEvent is one parsed "Book a Demo" click. Events have no identity
beyond their position in the parsed sequence and are never mutated.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClickEvent:
    """
    One parsed click record.

    Every field is a string; a field that could not be extracted is "".

    Attributes:
        timestamp: Timestamp line exactly as logged (e.g., "Jan 05 10:30:00", no year)
        workspace_id: Workspace ID from the event metadata JSON
        ae_name: Account executive name derived from the booking link slug
    """

    timestamp: str = ""
    workspace_id: str = ""
    ae_name: str = ""

    def to_dict(self) -> dict[str, str]:
        """Serialize with the analytics tool's camelCase field names."""
        return {
            "timestamp": self.timestamp,
            "workspaceId": self.workspace_id,
            "aeName": self.ae_name,
        }
