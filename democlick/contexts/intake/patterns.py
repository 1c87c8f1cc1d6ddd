"""
Regex patterns for raw click log parsing.

Pattern classes follow the same convention throughout:
- Dataclasses with frozen=True for immutability
- Class-level compiled patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# TIMESTAMP PATTERNS
# =============================================================================


@dataclass(frozen=True)
class TimestampPatterns:
    """
    Patterns for the line that opens every event record.

    Raw log timestamps carry no year, e.g. "Jan 05 10:30:00".
    """

    # Month abbreviation, two-digit day, HH:MM:SS - matched against the whole line
    EVENT_START: re.Pattern = re.compile(
        r"[A-Z][a-z]{2}\s+[0-9]{2}\s+[0-9]{2}:[0-9]{2}:[0-9]{2}"
    )


def is_event_start(line: str) -> bool:
    """Check whether a (trimmed) line is an event timestamp line."""
    return TimestampPatterns.EVENT_START.fullmatch(line) is not None


# =============================================================================
# SCHEDULING URL PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SchedulingUrlPatterns:
    """
    Patterns for the booking link recorded with each click.

    The slug encodes the account executive's name plus an optional
    meeting-type suffix, e.g. calendly.com/jane-doe-demo/30min.
    """

    # Slug is everything between "calendly.com/" and the next slash
    CALENDLY_SLUG: re.Pattern = re.compile(r"calendly\.com/([^/]+)/")

    SLUG_SEPARATOR: str = "-"


def find_scheduling_slug(url: str) -> str | None:
    """Return the first scheduling slug in a URL-like string, or None."""
    match = SchedulingUrlPatterns.CALENDLY_SLUG.search(url)
    if match:
        return match.group(1)
    return None
