"""Render diff records to plain text (no styling)."""

from __future__ import annotations

from typing import Iterable, Optional

from termfit.core.layout import LayoutBudget
from termfit.core.truncate import pad_to_width
from termfit.diff.engine import (
    HunkHeaderRecord,
    LineRender,
    NoticeRecord,
    OmittedRecord,
    PaneCell,
    RenderRecord,
    SplitRowRecord,
)

SPLIT_SEPARATOR = "  │ "


class PlainRenderer:
    """Lay render records out as strings using the computed budget."""

    def __init__(self, budget: LayoutBudget):
        self.budget = budget

    def gutter(self, line_no: Optional[int]) -> str:
        if not self.budget.gutter_width:
            return ""
        number = "" if line_no is None else str(line_no)
        return number.rjust(self.budget.digits) + " "

    def prefix(self, record: LineRender) -> str:
        """Everything left of the content: margin, gutter and marker."""
        return " " + self.gutter(record.line.display_line_no) + record.marker + " "

    def pane(self, cell: Optional[PaneCell]) -> str:
        width = self.budget.gutter_width + (self.budget.per_pane_width or 0)
        if cell is None:
            return " " * width
        return pad_to_width(self.gutter(cell.line_no) + cell.text, width)

    def render_record(self, record: RenderRecord) -> str:
        if isinstance(record, LineRender):
            return self.prefix(record) + record.text
        if isinstance(record, SplitRowRecord):
            row = " " + self.pane(record.left) + SPLIT_SEPARATOR + self.pane(record.right)
            return row.rstrip()
        if isinstance(record, (NoticeRecord, HunkHeaderRecord, OmittedRecord)):
            return record.text
        raise TypeError(f"Unknown render record: {record!r}")

    def render(self, records: Iterable[RenderRecord]) -> list[str]:
        return [self.render_record(r) for r in records]


def render_plain(records: Iterable[RenderRecord], budget: LayoutBudget) -> str:
    """Render records to a newline-joined string."""
    return "\n".join(PlainRenderer(budget).render(records))
