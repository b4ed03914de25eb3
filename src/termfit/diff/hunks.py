"""Line classification and context-windowed hunks.

Turns edit runs into numbered line records, then groups the changes into
hunks the way unified diff does: each change keeps `context` unchanged lines
on either side, and two changes whose gap is small enough to be covered by
both windows share a hunk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from termfit.diff.primitive import DiffOp, OpTag, RawOp, coerce_op

logger = logging.getLogger(__name__)


class LineKind(Enum):
    """Classification of a diff line."""
    CONTEXT = "context"
    ADDED = "added"
    REMOVED = "removed"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    LineKind.CONTEXT: " ",
    LineKind.ADDED: "+",
    LineKind.REMOVED: "-",
}


@dataclass(frozen=True)
class LineRecord:
    """A single source line with its position on each side."""
    old_line_no: Optional[int]  # None if addition
    new_line_no: Optional[int]  # None if removal
    kind: LineKind
    text: str

    @property
    def display_line_no(self) -> Optional[int]:
        """Number shown in a single gutter: new side unless the line was removed."""
        if self.kind is LineKind.REMOVED:
            return self.old_line_no
        return self.new_line_no


@dataclass(frozen=True)
class Hunk:
    """A contiguous block of changes with surrounding context."""
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    lines: tuple[LineRecord, ...]

    @property
    def header(self) -> str:
        return f"@@ -{self.old_start},{self.old_count} +{self.new_start},{self.new_count} @@"

    @property
    def added(self) -> int:
        return sum(1 for line in self.lines if line.kind is LineKind.ADDED)

    @property
    def removed(self) -> int:
        return sum(1 for line in self.lines if line.kind is LineKind.REMOVED)


def sanitize_ops(raw_ops: Optional[Iterable[RawOp]], split_lines: bool = True) -> list[DiffOp]:
    """Keep the edit runs that can be interpreted, dropping the rest."""
    if raw_ops is None:
        return []
    ops: list[DiffOp] = []
    dropped = 0
    for raw in raw_ops:
        op = coerce_op(raw, split_lines=split_lines)
        if op is None:
            dropped += 1
            continue
        ops.append(op)
    if dropped:
        logger.debug("Dropped %d malformed diff operation(s)", dropped)
    return ops


def build_line_records(ops: Iterable[DiffOp]) -> list[LineRecord]:
    """Number every line on both sides, preserving the order of the runs."""
    records: list[LineRecord] = []
    old_no = 1
    new_no = 1
    for op in ops:
        for text in op.items:
            if op.tag is OpTag.EQUAL:
                records.append(LineRecord(old_no, new_no, LineKind.CONTEXT, text))
                old_no += 1
                new_no += 1
            elif op.tag is OpTag.DELETE:
                records.append(LineRecord(old_no, None, LineKind.REMOVED, text))
                old_no += 1
            else:
                records.append(LineRecord(None, new_no, LineKind.ADDED, text))
                new_no += 1
    return records


def _make_hunk(records: list[LineRecord], start: int, end: int) -> Hunk:
    """Build a hunk from records[start:end]."""
    lines = tuple(records[start:end])
    old_before = sum(1 for r in records[:start] if r.kind is not LineKind.ADDED)
    new_before = sum(1 for r in records[:start] if r.kind is not LineKind.REMOVED)
    old_count = sum(1 for r in lines if r.kind is not LineKind.ADDED)
    new_count = sum(1 for r in lines if r.kind is not LineKind.REMOVED)
    # An empty side points at the line before the change (0 at file start)
    return Hunk(
        old_start=old_before + 1 if old_count else old_before,
        old_count=old_count,
        new_start=new_before + 1 if new_count else new_before,
        new_count=new_count,
        lines=lines,
    )


def build_hunks(records: list[LineRecord], context: int = 3) -> list[Hunk]:
    """
    Group changed lines into hunks with `context` lines of surrounding context.

    Unchanged runs longer than 2*context between two changes are collapsed:
    the interior lines are dropped and a new hunk begins.
    """
    context = max(0, context)
    changed = [i for i, r in enumerate(records) if r.kind is not LineKind.CONTEXT]
    if not changed:
        return []

    hunks: list[Hunk] = []
    group_start = changed[0]
    group_end = changed[0]
    for idx in changed[1:]:
        gap = idx - group_end - 1
        if gap > 2 * context:
            hunks.append(_make_hunk(
                records,
                max(0, group_start - context),
                min(len(records), group_end + context + 1),
            ))
            group_start = idx
        group_end = idx

    hunks.append(_make_hunk(
        records,
        max(0, group_start - context),
        min(len(records), group_end + context + 1),
    ))
    return hunks


def pair_changes(lines: Iterable[LineRecord]) -> list[tuple[Optional[LineRecord], Optional[LineRecord]]]:
    """
    Convert hunk lines to (old, new) rows for side-by-side display.

    - Context: (line, line)
    - Removal run followed by addition run: zipped row by row,
      leftovers get None on the other side
    - Lone addition: (None, line)
    """
    seq = list(lines)
    rows: list[tuple[Optional[LineRecord], Optional[LineRecord]]] = []
    i = 0
    while i < len(seq):
        line = seq[i]
        if line.kind is LineKind.CONTEXT:
            rows.append((line, line))
            i += 1
            continue

        removals: list[LineRecord] = []
        while i < len(seq) and seq[i].kind is LineKind.REMOVED:
            removals.append(seq[i])
            i += 1
        additions: list[LineRecord] = []
        while i < len(seq) and seq[i].kind is LineKind.ADDED:
            additions.append(seq[i])
            i += 1

        for k in range(max(len(removals), len(additions))):
            old = removals[k] if k < len(removals) else None
            new = additions[k] if k < len(additions) else None
            rows.append((old, new))
    return rows
