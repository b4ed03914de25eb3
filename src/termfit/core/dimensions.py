"""Terminal dimension classification.

Maps a raw column count to a discrete tier. Each consumer passes its own
breakpoints; the defaults are the ones the status line, logs and error views
are designed around:

- NARROW  (< 60):    Abbreviated labels, minimal detail
- COMPACT (60-99):   Essentials plus medium-priority detail
- NORMAL  (100-159): Full detail
- WIDE    (160+):    Everything, comfortable spacing
"""

from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Protocol, runtime_checkable


FALLBACK_WIDTH = 80
FALLBACK_HEIGHT = 24


class Tier(Enum):
    """Breakpoint tier, ordered from narrowest to widest."""
    NARROW = "narrow"
    COMPACT = "compact"
    NORMAL = "normal"
    WIDE = "wide"

    @property
    def rank(self) -> int:
        return _TIER_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank >= other.rank


_TIER_ORDER = (Tier.NARROW, Tier.COMPACT, Tier.NORMAL, Tier.WIDE)


@dataclass(frozen=True)
class ThresholdConfig:
    """Tier boundaries: each value is the first width of the next tier."""
    narrow: int = 60
    compact: int = 100
    normal: int = 160

    def __post_init__(self) -> None:
        if not (self.narrow < self.compact < self.normal):
            raise ValueError(
                f"Thresholds must be strictly increasing: "
                f"narrow={self.narrow}, compact={self.compact}, normal={self.normal}"
            )


DEFAULT_THRESHOLDS = ThresholdConfig()


def _floor_width(width: object) -> int:
    """Coerce any real width to a floored int; non-numbers and NaN become 0."""
    if isinstance(width, bool):
        return 0
    try:
        return operator.index(width)
    except TypeError:
        pass
    if not isinstance(width, (numbers.Real, Decimal)):
        return 0
    try:
        value = float(width)
    except OverflowError:
        return 0 if width < 0 else 2**31
    except ValueError:
        return 0
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return 0 if value < 0 else 2**31
    return math.floor(width)


def classify(width: float, cfg: ThresholdConfig = DEFAULT_THRESHOLDS) -> Tier:
    """
    Classify a terminal width into a tier.

    Never raises: zero, negative and non-numeric widths are the narrowest
    tier, fractional widths are floored.
    """
    cols = _floor_width(width)
    if cols < cfg.narrow:
        return Tier.NARROW
    if cols < cfg.compact:
        return Tier.COMPACT
    if cols < cfg.normal:
        return Tier.NORMAL
    return Tier.WIDE


@dataclass(frozen=True)
class TerminalDimensions:
    """Terminal size plus its tier for the current render call."""
    width: int
    height: int
    tier: Tier
    is_available: bool = True

    @property
    def is_narrow(self) -> bool:
        return self.tier is Tier.NARROW

    @property
    def is_compact(self) -> bool:
        return self.tier is Tier.COMPACT

    @property
    def is_normal(self) -> bool:
        return self.tier is Tier.NORMAL

    @property
    def is_wide(self) -> bool:
        return self.tier is Tier.WIDE


def dimensions_for(
    width: float,
    height: int = FALLBACK_HEIGHT,
    cfg: ThresholdConfig = DEFAULT_THRESHOLDS,
    is_available: bool = True,
) -> TerminalDimensions:
    """Build TerminalDimensions for a width, falling back when unavailable."""
    if not is_available:
        width, height = FALLBACK_WIDTH, FALLBACK_HEIGHT
    cols = max(0, _floor_width(width))
    return TerminalDimensions(
        width=cols,
        height=max(0, height),
        tier=classify(cols, cfg),
        is_available=is_available,
    )


@runtime_checkable
class DimensionProvider(Protocol):
    """Source of the current terminal size."""

    def get_size(self) -> tuple[int, int, bool]:
        """Return (width, height, is_available)."""
        ...


@dataclass(frozen=True)
class StaticDimensionProvider:
    """Provider that always reports the same size."""
    width: int = FALLBACK_WIDTH
    height: int = FALLBACK_HEIGHT
    is_available: bool = True

    def get_size(self) -> tuple[int, int, bool]:
        return self.width, self.height, self.is_available


def read_dimensions(
    provider: DimensionProvider,
    cfg: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> TerminalDimensions:
    """Ask a provider for its size and classify it."""
    width, height, available = provider.get_size()
    return dimensions_for(width, height, cfg, is_available=available)
