"""
Field extraction for event blocks.

Each field has its own extractor that returns a FieldResult: either the
extracted value or an empty value with the reason it is empty. Extractors
never raise, and one field's failure never touches another field, so a block
with broken metadata JSON still yields its timestamp and AE name.
"""

import json
from dataclasses import dataclass
from typing import Optional, Sequence

from democlick.contexts.intake.click_event import ClickEvent
from democlick.contexts.intake.parse_config import ParseConfig
from democlick.contexts.intake.patterns import SchedulingUrlPatterns, find_scheduling_slug
from democlick.contexts.intake.segmenter import EventBlock

TIMESTAMP_OFFSET = 0


@dataclass(frozen=True)
class FieldResult:
    """
    Outcome of extracting one field.

    Attributes:
        value: Extracted string ("" when empty)
        reason: Why the field is empty (None on success)
    """

    value: str = ""
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, value: str) -> "FieldResult":
        return cls(value=value)

    @classmethod
    def empty(cls, reason: str) -> "FieldResult":
        return cls(value="", reason=reason)


@dataclass(frozen=True)
class ExtractedFields:
    """All field results for one block."""

    timestamp: FieldResult
    workspace_id: FieldResult
    ae_name: FieldResult

    def to_event(self) -> ClickEvent:
        return ClickEvent(
            timestamp=self.timestamp.value,
            workspace_id=self.workspace_id.value,
            ae_name=self.ae_name.value,
        )

    def warnings(self) -> list[str]:
        """Reasons for every empty field, prefixed with the field name."""
        results = {
            "timestamp": self.timestamp,
            "workspace_id": self.workspace_id,
            "ae_name": self.ae_name,
        }
        return [f"{name}: {result.reason}" for name, result in results.items() if not result.ok]


# =============================================================================
# FIELD EXTRACTORS
# =============================================================================


def extract_timestamp(block: EventBlock) -> FieldResult:
    """Timestamp line, copied verbatim."""
    line = block.line(TIMESTAMP_OFFSET)
    if not line:
        return FieldResult.empty("missing timestamp line")
    return FieldResult.success(line)


def extract_workspace_id(
    metadata_line: str, key_path: Sequence[str] = ("customIDs", "workspaceId")
) -> FieldResult:
    """
    Read a nested string from a JSON metadata line.

    Args:
        metadata_line: Line expected to hold a JSON object
        key_path: Keys to follow from the top-level object

    Returns:
        FieldResult with the string at key_path, or empty if the line is not
        JSON, a key is missing, an intermediate value is not an object, or the
        leaf is not a string
    """
    if not metadata_line:
        return FieldResult.empty("missing metadata line")

    try:
        node = json.loads(metadata_line)
    except (ValueError, RecursionError) as e:
        return FieldResult.empty(f"metadata is not valid JSON ({getattr(e, 'msg', e)})")

    walked = []
    for key in key_path:
        walked.append(key)
        if not isinstance(node, dict) or key not in node:
            return FieldResult.empty(f"metadata has no {'.'.join(walked)}")
        node = node[key]

    if not isinstance(node, str):
        return FieldResult.empty(
            f"metadata {'.'.join(key_path)} is {type(node).__name__}, not a string"
        )

    return FieldResult.success(node)


def slug_to_name(slug: str, suffix_min_parts: int = 3) -> str:
    """
    Turn a booking slug into a display name.

    Slugs with at least suffix_min_parts hyphen parts end in a meeting-type
    suffix, which is dropped. The first character of each remaining part is
    upper-cased; the rest of the part is left as-is.

    Args:
        slug: Slug such as "jane-doe-demo"
        suffix_min_parts: Part count at which the last part is dropped

    Returns:
        Space-joined name

    Examples:
        >>> slug_to_name("jane-doe-demo")
        'Jane Doe'
        >>> slug_to_name("john-q-public-demo")
        'John Q Public'
        >>> slug_to_name("jane-doe")
        'Jane Doe'
        >>> slug_to_name("mcDonald")
        'McDonald'
    """
    parts = slug.split(SchedulingUrlPatterns.SLUG_SEPARATOR)
    if len(parts) >= suffix_min_parts:
        parts = parts[:-1]
    return " ".join(part[:1].upper() + part[1:] for part in parts)


def extract_ae_name(url_line: str, suffix_min_parts: int = 3) -> FieldResult:
    """
    Derive the account executive name from a booking URL line.

    Args:
        url_line: Line expected to hold a calendly.com booking link
        suffix_min_parts: See slug_to_name()

    Returns:
        FieldResult with the display name, or empty if no slug matched
    """
    if not url_line:
        return FieldResult.empty("missing booking URL line")

    slug = find_scheduling_slug(url_line)
    if slug is None:
        return FieldResult.empty("no calendly.com/<slug>/ in booking URL")

    return FieldResult.success(slug_to_name(slug, suffix_min_parts))


# =============================================================================
# BLOCK EXTRACTION
# =============================================================================


def extract_fields(block: EventBlock, config: Optional[ParseConfig] = None) -> ExtractedFields:
    """
    Run every field extractor on one block.

    Args:
        block: Event block from the segmenter
        config: Block layout and name heuristics (defaults to ParseConfig())

    Returns:
        ExtractedFields with one independent result per field
    """
    config = config or ParseConfig()
    return ExtractedFields(
        timestamp=extract_timestamp(block),
        workspace_id=extract_workspace_id(
            block.line(config.json_offset), config.workspace_id_path
        ),
        ae_name=extract_ae_name(block.line(config.url_offset), config.suffix_min_parts),
    )


def extract_event(block: EventBlock, config: Optional[ParseConfig] = None) -> ClickEvent:
    """Extract one ClickEvent from a block."""
    return extract_fields(block, config).to_event()
