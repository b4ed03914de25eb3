"""Render diff records as styled rich Text."""

from __future__ import annotations

from typing import Iterable

from rich.text import Text

from termfit.core.layout import LayoutBudget
from termfit.diff.engine import (
    HunkHeaderRecord,
    LineRender,
    NoticeRecord,
    OmittedRecord,
    RenderRecord,
    SplitRowRecord,
)
from termfit.diff.hunks import LineKind
from termfit.diff.inline import SpanKind
from termfit.render.plain import SPLIT_SEPARATOR, PlainRenderer

LINE_STYLES = {
    LineKind.CONTEXT: "",
    LineKind.ADDED: "green",
    LineKind.REMOVED: "red",
}
SPAN_STYLES = {
    SpanKind.ADDED: "bold reverse green",
    SpanKind.REMOVED: "bold reverse red",
}


class RichRenderer:
    """
    Paint render records with rich styles.

    Layout (widths, padding) comes from PlainRenderer so both renderers
    produce the same columns.
    """

    def __init__(self, budget: LayoutBudget):
        self.layout = PlainRenderer(budget)

    def render_record(self, record: RenderRecord) -> Text:
        if isinstance(record, LineRender):
            prefix = self.layout.prefix(record)
            text = Text(prefix, style="dim")
            text.append(record.text, style=LINE_STYLES[record.kind])
            for span in record.spans:
                style = SPAN_STYLES.get(span.kind)
                if style:
                    text.stylize(style, len(prefix) + span.start, len(prefix) + span.end)
            return text
        if isinstance(record, SplitRowRecord):
            text = Text(" ")
            left_kind = record.left.kind if record.left else LineKind.CONTEXT
            right_kind = record.right.kind if record.right else LineKind.CONTEXT
            text.append(self.layout.pane(record.left), style=LINE_STYLES[left_kind])
            text.append(SPLIT_SEPARATOR, style="dim")
            text.append(self.layout.pane(record.right).rstrip(), style=LINE_STYLES[right_kind])
            return text
        if isinstance(record, HunkHeaderRecord):
            return Text(record.text, style="cyan")
        if isinstance(record, NoticeRecord):
            return Text(record.text, style="yellow")
        if isinstance(record, OmittedRecord):
            return Text(record.text, style="dim italic")
        raise TypeError(f"Unknown render record: {record!r}")

    def render(self, records: Iterable[RenderRecord]) -> list[Text]:
        return [self.render_record(r) for r in records]
