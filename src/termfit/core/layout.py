"""Column budgets for gutters, markers and content.

Every view that shows line-oriented content reserves some chrome before the
text itself:

    │ 12 + content........................ │
    ^ ^^^ ^^ ^                             ^
    | |   |  content_width                 border
    | |   marker (unified/inline only)
    | gutter: line number digits + separator
    border

Split mode gives each side its own gutter and divides the remaining width
between two panes with a fixed separator between them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from termfit.core.dimensions import Tier
from termfit.core.modes import RenderMode, resolve_mode


# Layout constants
BORDER_WIDTH = 2
SPLIT_SEPARATOR_WIDTH = 4
MARKER_WIDTH = 2
MIN_DIGITS = 2
MAX_DIGITS = 6

DEFAULT_FLOORS = {
    Tier.NARROW: 20,
    Tier.COMPACT: 30,
    Tier.NORMAL: 40,
    Tier.WIDE: 40,
}


@dataclass(frozen=True)
class BudgetConfig:
    """
    Per-view chrome sizes. Different views may use different floors.

    Floors may be passed as a mapping; they are stored as sorted
    (tier, width) pairs so the config stays hashable.
    """
    floors: Union[Mapping[Tier, int], tuple[tuple[Tier, int], ...]] = tuple(DEFAULT_FLOORS.items())
    min_digits: int = MIN_DIGITS
    max_digits: int = MAX_DIGITS
    border_width: int = BORDER_WIDTH
    separator_width: int = SPLIT_SEPARATOR_WIDTH
    marker_width: int = MARKER_WIDTH

    def __post_init__(self) -> None:
        pairs = self.floors.items() if isinstance(self.floors, Mapping) else self.floors
        object.__setattr__(self, "floors", tuple(sorted(pairs, key=lambda p: p[0].rank)))

    def floor_for(self, tier: Tier) -> int:
        return dict(self.floors).get(tier, DEFAULT_FLOORS[tier])


DEFAULT_BUDGET = BudgetConfig()


@dataclass(frozen=True)
class LayoutBudget:
    """Computed column allotment for one render call."""
    total_width: int
    tier: Tier
    mode: RenderMode
    digits: int
    gutter_width: int
    marker_width: int
    border_width: int
    separator_width: int
    content_width: int
    per_pane_width: Optional[int] = None

    @property
    def is_split(self) -> bool:
        return self.per_pane_width is not None

    @property
    def rendered_width(self) -> int:
        """Width actually occupied once floors are applied (may exceed total_width)."""
        if self.per_pane_width is not None:
            pane = self.gutter_width + self.per_pane_width
            return self.border_width + self.separator_width + 2 * pane
        return self.border_width + self.gutter_width + self.marker_width + self.content_width


def minimum_floor(tier: Tier, config: BudgetConfig = DEFAULT_BUDGET) -> int:
    """Smallest content width ever handed out for a tier."""
    return config.floor_for(tier)


def gutter_digits(max_line_number: int, config: BudgetConfig = DEFAULT_BUDGET) -> int:
    """Digits needed for the largest line number, clamped to the config bounds."""
    n = max(0, int(max_line_number))
    digits = math.ceil(math.log10(n + 1)) if n > 0 else 1
    return max(config.min_digits, min(config.max_digits, digits))


def compute_budget(
    total_width: int,
    tier: Tier,
    mode: RenderMode,
    max_line_number: int,
    show_line_numbers: bool = True,
    config: BudgetConfig = DEFAULT_BUDGET,
) -> LayoutBudget:
    """
    Compute column budgets for a render mode.

    Content widths never go below the tier floor, even when that means the
    panes overflow total_width on paper. A cramped layout is acceptable,
    a negative width is not.

    Args:
        total_width: Terminal width in columns
        tier: Tier the width was classified into
        mode: Effective render mode (AUTO is resolved first)
        max_line_number: Largest line number that will be displayed
        show_line_numbers: Whether a line number gutter is reserved
        config: Chrome sizes and floors for this view

    Returns:
        LayoutBudget with gutter, marker and content widths
    """
    total = max(0, int(total_width))
    if mode is RenderMode.AUTO:
        mode = resolve_mode(mode, total).effective

    digits = gutter_digits(max_line_number, config)
    gutter = digits + 1 if show_line_numbers else 0
    floor = minimum_floor(tier, config)

    if mode is RenderMode.SPLIT:
        available = total - config.border_width - config.separator_width
        per_pane = max(floor, available // 2 - gutter)
        return LayoutBudget(
            total_width=total,
            tier=tier,
            mode=mode,
            digits=digits,
            gutter_width=gutter,
            marker_width=0,
            border_width=config.border_width,
            separator_width=config.separator_width,
            content_width=per_pane,
            per_pane_width=per_pane,
        )

    marker = config.marker_width
    content = max(floor, total - gutter - marker - config.border_width)
    return LayoutBudget(
        total_width=total,
        tier=tier,
        mode=mode,
        digits=digits,
        gutter_width=gutter,
        marker_width=marker,
        border_width=config.border_width,
        separator_width=0,
        content_width=content,
    )
