"""Status line with priority-based segment visibility."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from termfit.core.dimensions import TerminalDimensions, Tier
from termfit.core.truncate import truncate_end, visible_len

SEPARATOR = " │ "


class SegmentPriority(Enum):
    """How hard a segment fights for space."""
    CRITICAL = 0  # Always shown, never trimmed
    HIGH = 1      # All tiers, abbreviated when narrow
    MEDIUM = 2    # Compact and above
    LOW = 3       # Wide only


# Lowest tier at which each priority is shown
_MIN_TIER = {
    SegmentPriority.CRITICAL: Tier.NARROW,
    SegmentPriority.HIGH: Tier.NARROW,
    SegmentPriority.MEDIUM: Tier.COMPACT,
    SegmentPriority.LOW: Tier.WIDE,
}


@dataclass(frozen=True)
class Segment:
    """One piece of status information."""
    key: str
    text: str
    priority: SegmentPriority = SegmentPriority.MEDIUM
    short_text: Optional[str] = None  # Used on narrow terminals

    def label(self, narrow: bool) -> str:
        if narrow and self.short_text is not None:
            return self.short_text
        return self.text


@dataclass(frozen=True)
class StatusLine:
    """Fitted status line."""
    segments: tuple[Segment, ...]
    hidden: tuple[Segment, ...]
    text: str

    def keys(self) -> list[str]:
        return [s.key for s in self.segments]


def _join(segments: list[Segment], indices: list[int], narrow: bool, separator: str) -> str:
    return separator.join(segments[i].label(narrow) for i in indices)


def build_status_line(
    segments: Iterable[Segment],
    dims: TerminalDimensions,
    separator: str = SEPARATOR,
) -> StatusLine:
    """
    Choose which segments to show and fit them into the terminal width.

    Segments are first filtered by tier, then trimmed lowest priority first
    (rightmost first within a priority) until the line fits. Critical
    segments are never removed; if they alone overflow, the text is cut.
    Segments are tracked by position, so equal segments are kept apart.
    """
    all_segments = list(segments)
    narrow = dims.is_narrow
    shown = [i for i, s in enumerate(all_segments) if dims.tier >= _MIN_TIER[s.priority]]

    trimmable = sorted(
        (i for i in shown if all_segments[i].priority is not SegmentPriority.CRITICAL),
        key=lambda i: (all_segments[i].priority.value, i),
    )
    while trimmable and visible_len(_join(all_segments, shown, narrow, separator)) > dims.width:
        shown.remove(trimmable.pop())

    text = _join(all_segments, shown, narrow, separator)
    if visible_len(text) > dims.width:
        text = truncate_end(text, dims.width)

    kept = set(shown)
    return StatusLine(
        segments=tuple(all_segments[i] for i in shown),
        hidden=tuple(s for i, s in enumerate(all_segments) if i not in kept),
        text=text,
    )
