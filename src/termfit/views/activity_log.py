"""Activity log view with display modes and an entry-count guard."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Optional

from termfit.core.dimensions import TerminalDimensions
from termfit.core.layout import minimum_floor
from termfit.core.truncate import ASCII_ELLIPSIS, ELLIPSIS, truncate_end


class LogDisplayMode(Enum):
    NORMAL = "normal"
    COMPACT = "compact"
    VERBOSE = "verbose"


class EntryPriority(Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True)
class LogEntry:
    """A single activity log entry."""
    timestamp: datetime
    type: str
    content: str
    priority: EntryPriority = EntryPriority.NORMAL
    metadata: dict[str, Any] = field(default_factory=dict)
    details: Optional[str] = None


# Content limits per mode (None = no mode limit, terminal budget still applies)
CONTENT_LIMITS = {
    LogDisplayMode.NORMAL: 100,
    LogDisplayMode.COMPACT: 40,
    LogDisplayMode.VERBOSE: None,
}
COMPACT_MAX_ENTRIES = 10
COMPACT_TYPES = frozenset({"user", "error"})
IMPORTANT_PRIORITIES = frozenset({EntryPriority.HIGH, EntryPriority.CRITICAL})
# " (" and ")" around the metadata suffix
METADATA_CHROME = 3
MIN_METADATA_WIDTH = 8

TITLES = {
    LogDisplayMode.NORMAL: "Activity Log",
    LogDisplayMode.COMPACT: "Log",
    LogDisplayMode.VERBOSE: "Activity Log (verbose)",
}


@dataclass(frozen=True)
class LogLine:
    """Render-ready entry."""
    entry: LogEntry
    content: str
    truncated: bool
    timestamp: Optional[str] = None
    type_label: Optional[str] = None
    metadata: Optional[str] = None
    details: Optional[str] = None

    def text(self) -> str:
        parts = []
        if self.timestamp:
            parts.append(f"[{self.timestamp}]")
        if self.type_label:
            parts.append(f"{self.type_label}:")
        parts.append(self.content)
        line = " ".join(parts)
        if self.metadata:
            line += f" ({self.metadata})"
        return line


@dataclass(frozen=True)
class ActivityLog:
    """Fitted log view."""
    mode: LogDisplayMode
    title: str
    lines: tuple[LogLine, ...]
    hidden_count: int = 0  # Entries dropped by the max_entries guard

    @property
    def header(self) -> str:
        return f"{self.title} ({len(self.lines)})"

    def render(self) -> list[str]:
        out = [self.header]
        if self.hidden_count:
            out.append(f"{ELLIPSIS} {self.hidden_count} earlier entries")
        for line in self.lines:
            out.append(line.text())
            if line.details:
                out.extend(f"  {d}" for d in line.details.splitlines())
        return out


def _visible(entry: LogEntry, mode: LogDisplayMode) -> bool:
    if mode is LogDisplayMode.VERBOSE:
        return True
    if mode is LogDisplayMode.COMPACT:
        return entry.priority in IMPORTANT_PRIORITIES or entry.type in COMPACT_TYPES
    return entry.type != "debug"


def _format_metadata(metadata: dict[str, Any]) -> Optional[str]:
    if not metadata:
        return None
    return ", ".join(f"{k}={v}" for k, v in metadata.items())


def _fit_metadata(metadata: Optional[str], room: int) -> Optional[str]:
    """Shorten metadata to the room left after the content floor; drop it if too tight."""
    if not metadata:
        return None
    width = room - METADATA_CHROME
    if width < MIN_METADATA_WIDTH:
        return None
    return truncate_end(metadata, width, ASCII_ELLIPSIS)


def _format_timestamp(ts: datetime) -> str:
    return ts.isoformat(timespec="milliseconds")


def build_activity_log(
    entries: Iterable[LogEntry],
    dims: TerminalDimensions,
    display_mode: LogDisplayMode = LogDisplayMode.NORMAL,
    max_entries: Optional[int] = None,
) -> ActivityLog:
    """
    Filter, limit and truncate log entries for the given terminal.

    Args:
        entries: Entries in chronological order
        dims: Current terminal dimensions
        display_mode: How much detail to show
        max_entries: Keep only this many most recent entries

    Returns:
        ActivityLog ready for rendering
    """
    visible = [e for e in entries if _visible(e, display_mode)]

    limit = max_entries
    if display_mode is LogDisplayMode.COMPACT:
        limit = COMPACT_MAX_ENTRIES if limit is None else min(limit, COMPACT_MAX_ENTRIES)

    hidden = 0
    if limit is not None and len(visible) > max(0, limit):
        keep = max(0, limit)
        hidden = len(visible) - keep
        visible = visible[len(visible) - keep:]

    lines: list[LogLine] = []
    for entry in visible:
        lines.append(_fit_entry(entry, dims, display_mode))

    return ActivityLog(
        mode=display_mode,
        title=TITLES[display_mode],
        lines=tuple(lines),
        hidden_count=hidden,
    )


def _fit_entry(entry: LogEntry, dims: TerminalDimensions, mode: LogDisplayMode) -> LogLine:
    timestamp = None
    type_label = None
    metadata = None
    details = None
    if mode is not LogDisplayMode.COMPACT:
        timestamp = _format_timestamp(entry.timestamp)
        type_label = entry.type
        metadata = _format_metadata(entry.metadata)
    if mode is LogDisplayMode.VERBOSE:
        details = entry.details

    chrome = 0
    if timestamp:
        chrome += len(timestamp) + 3
    if type_label:
        chrome += len(type_label) + 2
    floor = minimum_floor(dims.tier)
    metadata = _fit_metadata(metadata, dims.width - chrome - floor)
    if metadata:
        chrome += len(metadata) + METADATA_CHROME
    budget = max(floor, dims.width - chrome)

    mode_limit = CONTENT_LIMITS[mode]
    limit = budget if mode_limit is None else min(mode_limit, budget)
    content = truncate_end(entry.content, limit, ASCII_ELLIPSIS)

    return LogLine(
        entry=entry,
        content=content,
        truncated=content != entry.content,
        timestamp=timestamp,
        type_label=type_label,
        metadata=metadata,
        details=details,
    )
