"""
Raw click log parsing for the Intake context.

Pipeline: raw text -> trimmed lines -> event blocks -> ClickEvents.

parse() is the everyday entry point and returns just the events.
parse_click_log() returns the same events plus diagnostics (skipped lines,
truncated blocks, empty-field reasons) for the inspection script.

Neither function raises on any input. Text that contains no timestamp line
at all yields zero events; callers decide what that means (usually: the
paste kept rich-text formatting and should be re-copied via a plain-text
editor).
"""

from dataclasses import dataclass, field
from typing import Optional

from democlick.contexts.intake.click_event import ClickEvent
from democlick.contexts.intake.extractor import extract_fields
from democlick.contexts.intake.logger import _log_debug
from democlick.contexts.intake.normalizer import preprocess_raw_log
from democlick.contexts.intake.parse_config import ParseConfig
from democlick.contexts.intake.segmenter import Block, scan_lines
from democlick.utils.text_processing import truncate_display


@dataclass
class ParsedClickLog:
    """
    Parsed click log with diagnostics.

    Attributes:
        raw_text: Text as pasted
        events: Parsed events in input order
        line_count: Non-empty lines seen by the segmenter
        skipped_lines: (line index, line) for every line outside a block
        truncated_blocks: Blocks cut short by the end of input
        warnings: "block N: field: reason" for every field left empty
    """

    raw_text: str
    events: list[ClickEvent] = field(default_factory=list)
    line_count: int = 0
    skipped_lines: list[tuple[int, str]] = field(default_factory=list)
    truncated_blocks: int = 0
    warnings: list[str] = field(default_factory=list)

    @property
    def needs_plaintext_recopy(self) -> bool:
        """True when the input had content but no event could be found."""
        return bool(self.raw_text.strip()) and not self.events


def parse_click_log(raw_text: str, config: Optional[ParseConfig] = None) -> ParsedClickLog:
    """
    Parse raw click log text into events with diagnostics.

    Args:
        raw_text: Text pasted from the raw event log view
        config: Block layout and heuristics (defaults to ParseConfig())

    Returns:
        ParsedClickLog
    """
    config = config or ParseConfig()
    lines = preprocess_raw_log(raw_text, normalize=config.normalize_unicode)
    parsed = ParsedClickLog(raw_text=raw_text, line_count=len(lines))

    for step in scan_lines(lines, config.block_size):
        if not isinstance(step, Block):
            parsed.skipped_lines.append((step.position, step.line))
            _log_debug(f"Skipped line {step.position}: {truncate_display(step.line, 60)}")
            continue

        block_number = len(parsed.events) + 1
        if step.block.truncated:
            parsed.truncated_blocks += 1
            parsed.warnings.append(
                f"block {block_number}: truncated at end of input (line {step.block.start})"
            )

        fields = extract_fields(step.block, config)
        for warning in fields.warnings():
            parsed.warnings.append(f"block {block_number}: {warning}")

        parsed.events.append(fields.to_event())

    return parsed


def parse(raw_text: str, config: Optional[ParseConfig] = None) -> list[ClickEvent]:
    """
    Parse raw click log text into events.

    Args:
        raw_text: Text pasted from the raw event log view
        config: Block layout and heuristics (defaults to ParseConfig())

    Returns:
        Events in input order (empty for empty or unrecognized input)

    Example:
        >>> raw = "\\n".join([
        ...     "Jan 05 10:30:00", "X", "Y",
        ...     '{"customIDs":{"workspaceId":"w_123"}}',
        ...     "https://calendly.com/jane-doe-demo/30min", "Z",
        ... ])
        >>> parse(raw)
        [ClickEvent(timestamp='Jan 05 10:30:00', workspace_id='w_123', ae_name='Jane Doe')]
    """
    return parse_click_log(raw_text, config).events
