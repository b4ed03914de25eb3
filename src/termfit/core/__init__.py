"""Core layout primitives - dimensions, truncation, budgets, modes."""

from termfit.core.dimensions import (
    DEFAULT_THRESHOLDS,
    FALLBACK_WIDTH,
    DimensionProvider,
    StaticDimensionProvider,
    TerminalDimensions,
    ThresholdConfig,
    Tier,
    classify,
    dimensions_for,
    read_dimensions,
)
from termfit.core.truncate import (
    ASCII_ELLIPSIS,
    ELLIPSIS,
    truncate,
    truncate_end,
    truncate_path,
    visible_len,
)
from termfit.core.layout import (
    BudgetConfig,
    LayoutBudget,
    compute_budget,
    gutter_digits,
    minimum_floor,
)
from termfit.core.modes import ModeResolution, RenderMode, resolve_mode
from termfit.core.options import RenderOptions

__all__ = [
    "DEFAULT_THRESHOLDS",
    "FALLBACK_WIDTH",
    "DimensionProvider",
    "StaticDimensionProvider",
    "TerminalDimensions",
    "ThresholdConfig",
    "Tier",
    "classify",
    "dimensions_for",
    "read_dimensions",
    "ASCII_ELLIPSIS",
    "ELLIPSIS",
    "truncate",
    "truncate_end",
    "truncate_path",
    "visible_len",
    "BudgetConfig",
    "LayoutBudget",
    "compute_budget",
    "gutter_digits",
    "minimum_floor",
    "ModeResolution",
    "RenderMode",
    "resolve_mode",
    "RenderOptions",
]
