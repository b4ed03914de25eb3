"""
termfit: fit structured text to the terminal width

Classify the terminal width into tiers, budget columns for gutters and
content, truncate without breaking characters, and lay diffs out in unified
or split form with automatic fallback.

Quick Start:
    >>> import termfit
    >>> result = termfit.diff("a\\nb\\nc", "a\\nx\\nc", width=100)
    >>> result.hunks[0].header
    '@@ -1,3 +1,3 @@'
    >>> termfit.truncate_path("/home/user/project/src/main.py", 20)
    '.../src/main.py'

Features:
    - Per-view breakpoint tiers (narrow, compact, normal, wide)
    - Column budgets for line-number gutters, diff markers and panes
    - Code-point safe truncation, including a path-aware variant
    - Unified, split and inline diffs with deterministic mode fallback
    - Status line, activity log, error report and code listing views
"""

__version__ = "0.1.0"

# Core types
from termfit.core.dimensions import (
    StaticDimensionProvider,
    TerminalDimensions,
    ThresholdConfig,
    Tier,
    classify,
    dimensions_for,
)
from termfit.core.layout import LayoutBudget, compute_budget
from termfit.core.modes import ModeResolution, RenderMode, resolve_mode
from termfit.core.options import RenderOptions
from termfit.core.truncate import truncate, truncate_end, truncate_path

# Diff
from termfit.diff.engine import DiffEngine, DiffResult, diff
from termfit.diff.hunks import Hunk, LineKind, LineRecord

__all__ = [
    # Version
    "__version__",
    # Core types
    "StaticDimensionProvider",
    "TerminalDimensions",
    "ThresholdConfig",
    "Tier",
    "classify",
    "dimensions_for",
    "LayoutBudget",
    "compute_budget",
    "ModeResolution",
    "RenderMode",
    "resolve_mode",
    "RenderOptions",
    "truncate",
    "truncate_end",
    "truncate_path",
    # Diff
    "DiffEngine",
    "DiffResult",
    "diff",
    "Hunk",
    "LineKind",
    "LineRecord",
]
