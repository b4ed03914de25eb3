"""Diff engine - hunks plus width-aware render records.

Pipeline for one call:

    options + provider -> TerminalDimensions
    requested mode + width -> ModeResolution (may fall back to unified)
    line differ -> edit runs -> LineRecords -> Hunks
    hunks + LayoutBudget -> render records (truncated to the content width)

The output is plain data. Painting it is left to a renderer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from termfit.core.dimensions import DimensionProvider, TerminalDimensions
from termfit.core.layout import DEFAULT_BUDGET, BudgetConfig, LayoutBudget, compute_budget
from termfit.core.modes import ModeResolution, RenderMode, resolve_mode
from termfit.core.options import RenderOptions
from termfit.core.truncate import ELLIPSIS, truncate_end
from termfit.diff.hunks import (
    Hunk,
    LineKind,
    LineRecord,
    build_hunks,
    build_line_records,
    pair_changes,
    sanitize_ops,
)
from termfit.diff.inline import CharSpan, InlineDiff, clip_spans, compute_inline_diff
from termfit.diff.primitive import CharDiffer, LineDiffer, SequenceMatcherDiffer

logger = logging.getLogger(__name__)


# -- Render records ---------------------------------------------------------

@dataclass(frozen=True)
class NoticeRecord:
    """Informational line, e.g. a mode fallback explanation."""
    text: str


@dataclass(frozen=True)
class HunkHeaderRecord:
    """The @@ header that opens a hunk."""
    hunk: Hunk
    text: str


@dataclass(frozen=True)
class LineRender:
    """One line in unified or inline mode."""
    line: LineRecord
    text: str
    truncated: bool = False
    spans: tuple[CharSpan, ...] = ()

    @property
    def kind(self) -> LineKind:
        return self.line.kind

    @property
    def marker(self) -> str:
        return self.line.kind.symbol


@dataclass(frozen=True)
class PaneCell:
    """One side of a split row."""
    line_no: Optional[int]
    kind: LineKind
    text: str
    truncated: bool = False


@dataclass(frozen=True)
class SplitRowRecord:
    """A split-mode row; a None side is rendered blank."""
    left: Optional[PaneCell]
    right: Optional[PaneCell]


@dataclass(frozen=True)
class OmittedRecord:
    """Marker for rows cut by the large-output guard."""
    count: int

    @property
    def text(self) -> str:
        noun = "line" if self.count == 1 else "lines"
        return f"{ELLIPSIS} {self.count} more {noun}"


RenderRecord = Union[NoticeRecord, HunkHeaderRecord, LineRender, SplitRowRecord, OmittedRecord]


@dataclass(frozen=True)
class DiffStats:
    """Statistics about a diff."""
    added: int = 0
    removed: int = 0

    @property
    def total_changes(self) -> int:
        return self.added + self.removed

    def __str__(self) -> str:
        parts = []
        if self.added:
            parts.append(f"+{self.added}")
        if self.removed:
            parts.append(f"-{self.removed}")
        return ", ".join(parts) if parts else "no changes"


@dataclass(frozen=True)
class DiffResult:
    """Everything produced by one diff call."""
    hunks: tuple[Hunk, ...]
    records: tuple[RenderRecord, ...]
    resolution: ModeResolution
    budget: LayoutBudget
    dimensions: TerminalDimensions
    stats: DiffStats
    omitted_lines: int = 0

    @property
    def effective_mode(self) -> RenderMode:
        return self.resolution.effective

    @property
    def fallback_notice(self) -> Optional[str]:
        return self.resolution.notice

    @property
    def has_changes(self) -> bool:
        return bool(self.hunks)


# -- Engine -----------------------------------------------------------------

def split_lines(text: Optional[str]) -> list[str]:
    """Split text into lines; a trailing newline does not add an empty line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _fit(text: str, width: int) -> tuple[str, bool]:
    fitted = truncate_end(text, width)
    return fitted, fitted != text


class DiffEngine:
    """
    Computes hunks and lays them out for the resolved mode.

    The LCS work is delegated to the line and character differs, which
    default to difflib. Output from a differ that cannot be interpreted is
    dropped rather than raised.
    """

    def __init__(
        self,
        line_differ: Optional[LineDiffer] = None,
        char_differ: Optional[CharDiffer] = None,
        budget_config: BudgetConfig = DEFAULT_BUDGET,
    ):
        default = SequenceMatcherDiffer()
        self.line_differ = line_differ or default
        self.char_differ = char_differ or default
        self.budget_config = budget_config

    def compute_hunks(self, old_text: Optional[str], new_text: Optional[str], context_lines: int = 3) -> list[Hunk]:
        """Line-diff two texts and window the changes into hunks."""
        old_lines = split_lines(old_text)
        new_lines = split_lines(new_text)
        ops = sanitize_ops(self.line_differ.line_ops(old_lines, new_lines))
        return build_hunks(build_line_records(ops), context_lines)

    def char_diff(self, old: str, new: str) -> InlineDiff:
        """Character spans for two strings with no line structure."""
        return compute_inline_diff(old or "", new or "", self.char_differ)

    def diff(
        self,
        old_text: Optional[str],
        new_text: Optional[str],
        options: Optional[RenderOptions] = None,
        provider: Optional[DimensionProvider] = None,
    ) -> DiffResult:
        """
        Diff two texts and produce layout-complete render records.

        Args:
            old_text: Previous version (None is treated as empty)
            new_text: Current version (None is treated as empty)
            options: Mode, width, context and guard settings
            provider: Source of the terminal size when no width is given

        Returns:
            DiffResult with hunks, records, the resolved mode and budget
        """
        options = options or RenderOptions()
        dims = options.dimensions(provider)
        resolution = resolve_mode(options.mode, dims.width, options.split_threshold)

        hunks = self.compute_hunks(old_text, new_text, options.context_lines)
        max_line_no = max(
            (max(h.old_start + h.old_count - 1, h.new_start + h.new_count - 1) for h in hunks),
            default=0,
        )
        budget = compute_budget(
            dims.width,
            dims.tier,
            resolution.effective,
            max_line_no,
            options.show_line_numbers,
            self.budget_config,
        )

        records: list[RenderRecord] = []
        if resolution.notice:
            records.append(NoticeRecord(resolution.notice))
        body, omitted = self._layout(hunks, resolution.effective, budget, options.max_rendered_lines)
        records.extend(body)

        stats = DiffStats(
            added=sum(h.added for h in hunks),
            removed=sum(h.removed for h in hunks),
        )
        logger.debug(
            "diff: %d hunk(s), %s, mode=%s width=%d omitted=%d",
            len(hunks), stats, resolution.effective.value, dims.width, omitted,
        )
        return DiffResult(
            hunks=tuple(hunks),
            records=tuple(records),
            resolution=resolution,
            budget=budget,
            dimensions=dims,
            stats=stats,
            omitted_lines=omitted,
        )

    def _layout(
        self,
        hunks: list[Hunk],
        mode: RenderMode,
        budget: LayoutBudget,
        limit: Optional[int],
    ) -> tuple[list[RenderRecord], int]:
        """Render hunks until the row limit is hit; returns (records, omitted rows)."""
        if mode is RenderMode.SPLIT:
            row_sources: list[list] = [pair_changes(h.lines) for h in hunks]
        else:
            row_sources = [list(h.lines) for h in hunks]

        total_rows = sum(len(rows) for rows in row_sources)
        remaining = None if limit is None else max(0, limit)

        out: list[RenderRecord] = []
        shown = 0
        for hunk, rows in zip(hunks, row_sources):
            if remaining is not None and shown >= remaining:
                break
            take = len(rows) if remaining is None else min(len(rows), remaining - shown)
            out.append(HunkHeaderRecord(hunk, hunk.header))
            if mode is RenderMode.SPLIT:
                out.extend(self._split_rows(rows[:take], budget))
            elif mode is RenderMode.INLINE:
                out.extend(self._inline_rows(hunk, rows[:take], budget))
            else:
                out.extend(self._unified_rows(rows[:take], budget))
            shown += take

        omitted = total_rows - shown
        if omitted > 0:
            out.append(OmittedRecord(omitted))
        return out, omitted

    def _unified_rows(self, lines: list[LineRecord], budget: LayoutBudget) -> list[LineRender]:
        rows = []
        for line in lines:
            text, truncated = _fit(line.text, budget.content_width)
            rows.append(LineRender(line, text, truncated))
        return rows

    def _inline_rows(self, hunk: Hunk, lines: list[LineRecord], budget: LayoutBudget) -> list[LineRender]:
        spans: dict[int, tuple[CharSpan, ...]] = {}
        for old, new in pair_changes(hunk.lines):
            if old is None or new is None or old is new:
                continue
            inline = compute_inline_diff(old.text, new.text, self.char_differ)
            spans[id(old)] = inline.old_spans
            spans[id(new)] = inline.new_spans

        rows = []
        for line in lines:
            text, truncated = _fit(line.text, budget.content_width)
            line_spans = spans.get(id(line), ())
            if truncated:
                line_spans = clip_spans(line_spans, max(0, len(text) - len(ELLIPSIS)))
            rows.append(LineRender(line, text, truncated, line_spans))
        return rows

    def _cell(self, line: Optional[LineRecord], line_no: Optional[int], width: int) -> Optional[PaneCell]:
        if line is None:
            return None
        text, truncated = _fit(line.text, width)
        return PaneCell(line_no, line.kind, text, truncated)

    def _split_rows(self, pairs: list, budget: LayoutBudget) -> list[SplitRowRecord]:
        width = budget.per_pane_width or budget.content_width
        rows = []
        for old, new in pairs:
            left = self._cell(old, old.old_line_no if old else None, width)
            right = self._cell(new, new.new_line_no if new else None, width)
            rows.append(SplitRowRecord(left, right))
        return rows


_default_engine = DiffEngine()


def diff(
    old_text: Optional[str],
    new_text: Optional[str],
    context_lines: int = 3,
    mode: RenderMode | str = RenderMode.AUTO,
    width: Optional[int] = None,
    show_line_numbers: bool = True,
    max_rendered_lines: Optional[int] = None,
    responsive: bool = True,
    provider: Optional[DimensionProvider] = None,
) -> DiffResult:
    """Diff two texts with the default engine. See DiffEngine.diff."""
    options = RenderOptions(
        mode=mode,
        width=width,
        context_lines=context_lines,
        show_line_numbers=show_line_numbers,
        max_rendered_lines=max_rendered_lines,
        responsive=responsive,
    )
    return _default_engine.diff(old_text, new_text, options, provider)
