"""
Record segmentation for raw click logs.

The raw log view has no record delimiters: each event is a fixed number of
consecutive lines that starts with a timestamp line. Segmentation walks an
immutable line tuple by index. Every step returns either a Block (a timestamp
line plus its trailing lines) or a Skip (a stray line), together with the
position the scan continues from.

Lines that are neither a block start nor part of a block are skipped one at a
time, so noise between records never aborts the scan.
"""

from dataclasses import dataclass
from typing import Iterator, Union

from democlick.contexts.intake.patterns import is_event_start

DEFAULT_BLOCK_SIZE = 6


@dataclass(frozen=True)
class EventBlock:
    """
    Fixed-size window of lines belonging to one event.

    lines[0] is always a timestamp line. Blocks cut short by the end of the
    input are padded with empty strings and flagged as truncated.
    """

    lines: tuple[str, ...]
    start: int
    truncated: bool = False

    def line(self, offset: int) -> str:
        """Return the line at a block offset, or "" past the end."""
        if 0 <= offset < len(self.lines):
            return self.lines[offset]
        return ""


@dataclass(frozen=True)
class Block:
    """Scan step that found an event block."""

    block: EventBlock
    next_position: int


@dataclass(frozen=True)
class Skip:
    """Scan step that skipped a line that does not open a block."""

    position: int
    line: str
    next_position: int


ScanStep = Union[Block, Skip]


def scan_step(lines: tuple[str, ...], position: int, block_size: int = DEFAULT_BLOCK_SIZE) -> ScanStep:
    """
    Take one segmentation step at a position.

    Args:
        lines: Trimmed, non-empty lines
        position: Index to test (must be < len(lines))
        block_size: Lines consumed by one event

    Returns:
        Block advancing by block_size, or Skip advancing by one
    """
    line = lines[position]

    if not is_event_start(line):
        return Skip(position=position, line=line, next_position=position + 1)

    window = lines[position : position + block_size]
    missing = block_size - len(window)
    block = EventBlock(
        lines=window + ("",) * missing,
        start=position,
        truncated=missing > 0,
    )
    return Block(block=block, next_position=position + block_size)


def scan_lines(lines: tuple[str, ...], block_size: int = DEFAULT_BLOCK_SIZE) -> Iterator[ScanStep]:
    """
    Walk the line tuple left to right, yielding every scan step.

    Args:
        lines: Trimmed, non-empty lines
        block_size: Lines consumed by one event

    Yields:
        Block and Skip steps in input order
    """
    position = 0
    while position < len(lines):
        step = scan_step(lines, position, block_size)
        yield step
        position = step.next_position


def segment_lines(lines: tuple[str, ...], block_size: int = DEFAULT_BLOCK_SIZE) -> list[EventBlock]:
    """
    Group lines into event blocks in discovery order.

    Args:
        lines: Trimmed, non-empty lines
        block_size: Lines consumed by one event

    Returns:
        List of EventBlock (stray lines dropped)
    """
    return [step.block for step in scan_lines(lines, block_size) if isinstance(step, Block)]
