"""Render mode selection with width-based fallback."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

SPLIT_THRESHOLD = 120


class RenderMode(Enum):
    """How diff content is laid out."""
    UNIFIED = "unified"   # Single column, +/- markers
    SPLIT = "split"       # Old and new side by side
    INLINE = "inline"     # Single column with character-level spans
    AUTO = "auto"         # Split when wide enough, unified otherwise

    @classmethod
    def parse(cls, value: RenderMode | str) -> RenderMode:
        """Accept a mode or its case-insensitive name."""
        if isinstance(value, RenderMode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Invalid render mode: {value!r} (expected one of {valid})") from None


@dataclass(frozen=True)
class ModeResolution:
    """Outcome of resolving a requested mode against the current width."""
    requested: RenderMode
    effective: RenderMode
    fallback: bool = False
    split_threshold: int = SPLIT_THRESHOLD

    @property
    def notice(self) -> Optional[str]:
        """User-facing explanation when a fallback happened."""
        if not self.fallback:
            return None
        return f"{self.requested.value} view requires {self.split_threshold}+ columns"


def resolve_mode(
    requested: RenderMode | str,
    width: int,
    split_threshold: int = SPLIT_THRESHOLD,
) -> ModeResolution:
    """
    Resolve a requested mode into the mode that will actually be rendered.

    The threshold is inclusive: width == split_threshold is wide enough
    for split view.
    """
    mode = RenderMode.parse(requested)
    wide_enough = width >= split_threshold

    if mode is RenderMode.AUTO:
        effective = RenderMode.SPLIT if wide_enough else RenderMode.UNIFIED
        return ModeResolution(mode, effective, False, split_threshold)
    if mode is RenderMode.SPLIT:
        if wide_enough:
            return ModeResolution(mode, RenderMode.SPLIT, False, split_threshold)
        logger.debug("Split view needs %d columns, have %d; using unified", split_threshold, width)
        return ModeResolution(mode, RenderMode.UNIFIED, True, split_threshold)
    if mode is RenderMode.UNIFIED or mode is RenderMode.INLINE:
        return ModeResolution(mode, mode, False, split_threshold)
    raise AssertionError(f"Unhandled render mode: {mode}")
