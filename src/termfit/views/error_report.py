"""Error report with a tier-dependent stack trace budget.

Stack lines shown (normal / verbose):

    NARROW   0 / 3
    COMPACT  0 / 5
    NORMAL   5 / 10
    WIDE     8 / all
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from typing import Optional, Union

from termfit.core.dimensions import TerminalDimensions, Tier
from termfit.core.truncate import ASCII_ELLIPSIS, truncate_end

STACK_LINES: dict[Tier, tuple[int, Optional[int]]] = {
    Tier.NARROW: (0, 3),
    Tier.COMPACT: (0, 5),
    Tier.NORMAL: (5, 10),
    Tier.WIDE: (8, None),
}
STACK_INDENT = 4


@dataclass(frozen=True)
class ErrorReport:
    """Fitted error report."""
    title: str
    message: str
    stack: tuple[str, ...]
    omitted_lines: int = 0

    def render(self) -> list[str]:
        out = [f"{self.title}: {self.message}" if self.message else self.title]
        out.extend(self.stack)
        if self.omitted_lines:
            out.append(f"{ASCII_ELLIPSIS} {self.omitted_lines} more lines")
        return out


def stack_budget(tier: Tier, verbose: bool) -> Optional[int]:
    """Number of stack lines to show; None means all."""
    normal, verbose_count = STACK_LINES[tier]
    return verbose_count if verbose else normal


def _stack_lines(error: BaseException) -> list[str]:
    if error.__traceback__ is None:
        return []
    lines: list[str] = []
    for chunk in traceback.format_tb(error.__traceback__):
        lines.extend(line for line in chunk.splitlines() if line.strip())
    return lines


def build_error_report(
    error: Union[BaseException, str],
    dims: TerminalDimensions,
    verbose: bool = False,
    show_stack: bool = True,
) -> ErrorReport:
    """
    Build an error report sized for the terminal.

    Strings have no stack. Stack lines are cut to fit the width except on
    wide terminals.
    """
    if isinstance(error, BaseException):
        title = type(error).__name__
        message = str(error)
        frames = _stack_lines(error) if show_stack else []
    else:
        title = "Error"
        message = str(error)
        frames = []

    budget = stack_budget(dims.tier, verbose)
    shown = frames if budget is None else frames[:budget]
    omitted = len(frames) - len(shown)

    if not dims.is_wide:
        width = max(1, dims.width - STACK_INDENT)
        shown = [truncate_end(line, width, ASCII_ELLIPSIS) for line in shown]
        message = truncate_end(message, max(1, dims.width - len(title) - 2), ASCII_ELLIPSIS)

    return ErrorReport(
        title=title,
        message=message,
        stack=tuple(shown),
        omitted_lines=omitted,
    )
