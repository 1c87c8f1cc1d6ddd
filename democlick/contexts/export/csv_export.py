"""
CSV export files for parsed click events.

Exports land in EXPORTS_PATH (default outs/exports) as demo-clicks.csv unless
an explicit path is given. The file is regenerated from the events on every
export and never edited in place.
"""

import os
from pathlib import Path
from typing import Iterable, Optional

from dotenv import load_dotenv

from democlick.contexts.export.serializer import DEFAULT_CSV_FILENAME, to_csv
from democlick.contexts.intake.click_event import ClickEvent

load_dotenv()
EXPORTS_PATH = Path(os.getenv("EXPORTS_PATH", "outs/exports"))


def default_export_path() -> Path:
    """Default CSV export location."""
    return EXPORTS_PATH / DEFAULT_CSV_FILENAME


def write_csv_export(events: Iterable[ClickEvent], output_path: Optional[Path] = None) -> Path:
    """
    Write events to a UTF-8 CSV file, replacing any previous export.

    Args:
        events: Parsed events
        output_path: Destination file (defaults to EXPORTS_PATH/demo-clicks.csv)

    Returns:
        Path the CSV was written to
    """
    output_path = Path(output_path) if output_path else default_export_path()
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # newline="" keeps "\n" row separators as-is on every platform
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(to_csv(events))

    return output_path
