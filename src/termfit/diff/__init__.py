"""
Diff engine - line hunks, character spans and width-aware layout.

The LCS computation itself comes from a swappable differ; difflib is the
default.
"""

from termfit.diff.primitive import DiffOp, OpTag, SequenceMatcherDiffer
from termfit.diff.hunks import Hunk, LineKind, LineRecord, build_hunks, pair_changes
from termfit.diff.inline import CharSpan, InlineDiff, SpanKind, compute_inline_diff
from termfit.diff.engine import (
    DiffEngine,
    DiffResult,
    DiffStats,
    HunkHeaderRecord,
    LineRender,
    NoticeRecord,
    OmittedRecord,
    PaneCell,
    RenderRecord,
    SplitRowRecord,
    diff,
)

__all__ = [
    "DiffOp",
    "OpTag",
    "SequenceMatcherDiffer",
    "Hunk",
    "LineKind",
    "LineRecord",
    "build_hunks",
    "pair_changes",
    "CharSpan",
    "InlineDiff",
    "SpanKind",
    "compute_inline_diff",
    "DiffEngine",
    "DiffResult",
    "DiffStats",
    "HunkHeaderRecord",
    "LineRender",
    "NoticeRecord",
    "OmittedRecord",
    "PaneCell",
    "RenderRecord",
    "SplitRowRecord",
    "diff",
]
