"""Numbered code listing sized to the terminal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from termfit.core.dimensions import TerminalDimensions
from termfit.core.layout import BudgetConfig, compute_budget
from termfit.core.modes import RenderMode
from termfit.core.truncate import ELLIPSIS, truncate_end
from termfit.diff.engine import split_lines

GUTTER_SEPARATOR = " │ "

# Listings have no diff marker column
CODE_BUDGET = BudgetConfig(marker_width=0)


@dataclass(frozen=True)
class CodeView:
    """Fitted code listing."""
    lines: tuple[str, ...]
    total_lines: int
    omitted_lines: int = 0

    @property
    def summary(self) -> str:
        noun = "line" if self.total_lines == 1 else "lines"
        return f"{self.total_lines} {noun}"

    def render(self) -> list[str]:
        out = list(self.lines)
        if self.omitted_lines:
            out.append(f"{ELLIPSIS} {self.omitted_lines} more lines")
        out.append(self.summary)
        return out


def build_code_view(
    code: str,
    dims: TerminalDimensions,
    show_line_numbers: bool = True,
    max_lines: Optional[int] = None,
) -> CodeView:
    """
    Number and truncate code for display.

    Args:
        code: Source text (already tokenized/highlighted text is fine)
        dims: Current terminal dimensions
        show_line_numbers: Prefix each line with "N │ "
        max_lines: Show at most this many lines, then a "N more lines" marker
    """
    source = split_lines(code)
    shown = source if max_lines is None else source[:max(0, max_lines)]

    budget = compute_budget(
        dims.width,
        dims.tier,
        RenderMode.UNIFIED,
        len(shown),
        show_line_numbers,
        CODE_BUDGET,
    )
    # The gutter's own separator column is part of GUTTER_SEPARATOR
    width = max(1, budget.content_width - (len(GUTTER_SEPARATOR) - 1 if show_line_numbers else 0))

    lines: list[str] = []
    for number, text in enumerate(shown, start=1):
        fitted = truncate_end(text, width)
        if show_line_numbers:
            lines.append(f"{number:>{budget.digits}}{GUTTER_SEPARATOR}{fitted}")
        else:
            lines.append(fitted)

    return CodeView(
        lines=tuple(lines),
        total_lines=len(source),
        omitted_lines=len(source) - len(shown),
    )
