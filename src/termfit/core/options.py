"""Per-call render options."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Hashable, Optional

from termfit.core.dimensions import (
    DEFAULT_THRESHOLDS,
    FALLBACK_HEIGHT,
    FALLBACK_WIDTH,
    DimensionProvider,
    TerminalDimensions,
    ThresholdConfig,
    Tier,
    dimensions_for,
)
from termfit.core.modes import SPLIT_THRESHOLD, RenderMode


FIXED_WIDTH = 120
DEFAULT_CONTEXT_LINES = 3


@dataclass
class RenderOptions:
    """
    Everything a caller can tune for one render.

    Intentionally plain data (no provider objects, no callables) so it can be
    logged, cached or round-tripped through a dict.

    Example:
        >>> opts = (RenderOptions()
        ...     .with_mode("split")
        ...     .with_width(150)
        ...     .with_context(5))
    """

    mode: RenderMode = RenderMode.AUTO
    width: Optional[int] = None  # Explicit override, beats the provider
    context_lines: int = DEFAULT_CONTEXT_LINES
    show_line_numbers: bool = True
    max_rendered_lines: Optional[int] = None
    responsive: bool = True
    fixed_width: int = FIXED_WIDTH  # Used when responsive is off
    split_threshold: int = SPLIT_THRESHOLD
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS

    def __post_init__(self) -> None:
        self.mode = RenderMode.parse(self.mode)
        self.context_lines = max(0, int(self.context_lines))

    # Fluent builder methods
    def with_mode(self, mode: RenderMode | str) -> RenderOptions:
        """Set requested render mode."""
        self.mode = RenderMode.parse(mode)
        return self

    def with_width(self, width: Optional[int]) -> RenderOptions:
        """Set an explicit width (None to follow the terminal)."""
        self.width = width
        return self

    def with_context(self, lines: int) -> RenderOptions:
        """Set number of context lines around each change."""
        self.context_lines = max(0, int(lines))
        return self

    def with_line_numbers(self, show: bool = True) -> RenderOptions:
        self.show_line_numbers = show
        return self

    def with_max_lines(self, limit: Optional[int]) -> RenderOptions:
        """Cap the number of rendered content rows."""
        self.max_rendered_lines = limit
        return self

    def with_responsive(self, responsive: bool) -> RenderOptions:
        self.responsive = responsive
        return self

    def resolve_width(self, provider: Optional[DimensionProvider] = None) -> tuple[int, int, bool]:
        """
        Decide which width to lay out for.

        Order: explicit width, fixed width when not responsive, provider
        width when available, FALLBACK_WIDTH.

        Returns:
            Tuple of (width, height, is_available)
        """
        height = FALLBACK_HEIGHT
        available = True
        if provider is not None:
            p_width, p_height, available = provider.get_size()
            if available:
                height = p_height

        if self.width is not None:
            return max(0, int(self.width)), height, True
        if not self.responsive:
            return self.fixed_width, height, True
        if provider is not None and available:
            return max(0, int(p_width)), height, True
        return FALLBACK_WIDTH, FALLBACK_HEIGHT, False

    def dimensions(self, provider: Optional[DimensionProvider] = None) -> TerminalDimensions:
        """Resolve width and classify it with this option set's thresholds."""
        width, height, available = self.resolve_width(provider)
        dims = dimensions_for(width, height, self.thresholds)
        return dims if available else replace(dims, is_available=False)

    def cache_key(self, tier: Tier, content_hash: Hashable, width: int) -> tuple[Any, ...]:
        """Key a caller may memoize results under."""
        return (width, tier, content_hash, self.mode)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging/caching."""
        return {
            "mode": self.mode.value,
            "width": self.width,
            "context_lines": self.context_lines,
            "show_line_numbers": self.show_line_numbers,
            "max_rendered_lines": self.max_rendered_lines,
            "responsive": self.responsive,
            "fixed_width": self.fixed_width,
            "split_threshold": self.split_threshold,
            "thresholds": {
                "narrow": self.thresholds.narrow,
                "compact": self.thresholds.compact,
                "normal": self.thresholds.normal,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RenderOptions:
        """Deserialize from dictionary."""
        thresholds = data.get("thresholds")
        return cls(
            mode=data.get("mode", RenderMode.AUTO.value),
            width=data.get("width"),
            context_lines=data.get("context_lines", DEFAULT_CONTEXT_LINES),
            show_line_numbers=data.get("show_line_numbers", True),
            max_rendered_lines=data.get("max_rendered_lines"),
            responsive=data.get("responsive", True),
            fixed_width=data.get("fixed_width", FIXED_WIDTH),
            split_threshold=data.get("split_threshold", SPLIT_THRESHOLD),
            thresholds=ThresholdConfig(**thresholds) if thresholds else DEFAULT_THRESHOLDS,
        )
