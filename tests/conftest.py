"""Shared fixtures for termfit tests."""

from typing import Callable

import pytest

from termfit.core.dimensions import StaticDimensionProvider, TerminalDimensions, dimensions_for


@pytest.fixture
def dims() -> Callable[[int], TerminalDimensions]:
    """Factory for TerminalDimensions at a given width."""
    def _make(width: int, height: int = 24) -> TerminalDimensions:
        return dimensions_for(width, height)
    return _make


@pytest.fixture
def unavailable_provider() -> StaticDimensionProvider:
    """Provider for output that is not attached to a terminal."""
    return StaticDimensionProvider(width=0, height=0, is_available=False)


@pytest.fixture
def abc_texts() -> tuple[str, str]:
    """Three-line texts where the middle line changed."""
    return "a\nb\nc", "a\nx\nc"
