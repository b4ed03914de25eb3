"""Character-level diff for paired removed/added lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from termfit.diff.hunks import sanitize_ops
from termfit.diff.primitive import CharDiffer, OpTag, SequenceMatcherDiffer


class SpanKind(Enum):
    """Highlight class of a character span."""
    EQUAL = "equal"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class CharSpan:
    """Half-open [start, end) range of a line with one highlight class."""
    start: int
    end: int
    kind: SpanKind

    @property
    def length(self) -> int:
        return self.end - self.start

    def clip(self, limit: int) -> Optional[CharSpan]:
        """Restrict the span to the first `limit` characters."""
        if self.start >= limit:
            return None
        return CharSpan(self.start, min(self.end, limit), self.kind)


@dataclass(frozen=True)
class InlineDiff:
    """Spans for the old and the new version of a changed line."""
    old_spans: tuple[CharSpan, ...]
    new_spans: tuple[CharSpan, ...]

    @property
    def has_changes(self) -> bool:
        return any(s.kind is not SpanKind.EQUAL for s in self.old_spans + self.new_spans)


_default_differ = SequenceMatcherDiffer()


def _append(spans: list[CharSpan], start: int, length: int, kind: SpanKind) -> None:
    if length <= 0:
        return
    if spans and spans[-1].kind is kind and spans[-1].end == start:
        spans[-1] = CharSpan(spans[-1].start, start + length, kind)
    else:
        spans.append(CharSpan(start, start + length, kind))


def compute_inline_diff(old: str, new: str, differ: Optional[CharDiffer] = None) -> InlineDiff:
    """
    Compute character spans for a changed line pair.

    Offsets index into the untruncated texts. Malformed runs from the
    differ are ignored, so spans may not cover a line entirely.
    """
    ops = sanitize_ops((differ or _default_differ).char_ops(old, new), split_lines=False)

    old_spans: list[CharSpan] = []
    new_spans: list[CharSpan] = []
    old_pos = 0
    new_pos = 0
    for op in ops:
        n = len(op.value)
        if op.tag is OpTag.EQUAL:
            _append(old_spans, old_pos, n, SpanKind.EQUAL)
            _append(new_spans, new_pos, n, SpanKind.EQUAL)
            old_pos += n
            new_pos += n
        elif op.tag is OpTag.DELETE:
            _append(old_spans, old_pos, n, SpanKind.REMOVED)
            old_pos += n
        else:
            _append(new_spans, new_pos, n, SpanKind.ADDED)
            new_pos += n

    return InlineDiff(tuple(old_spans), tuple(new_spans))


def clip_spans(spans: tuple[CharSpan, ...], limit: int) -> tuple[CharSpan, ...]:
    """Drop or shorten spans past the visible part of a truncated line."""
    clipped = (s.clip(limit) for s in spans)
    return tuple(s for s in clipped if s is not None)
