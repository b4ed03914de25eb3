"""OS-backed terminal size provider."""

from __future__ import annotations

import os
from dataclasses import dataclass

from termfit.core.dimensions import FALLBACK_HEIGHT, FALLBACK_WIDTH


@dataclass(frozen=True)
class TerminalDimensionProvider:
    """Reads the size of the terminal attached to a file descriptor."""
    fd: int = 1

    def get_size(self) -> tuple[int, int, bool]:
        """Get current terminal dimensions, or the fallback when not a tty."""
        try:
            size = os.get_terminal_size(self.fd)
        except OSError:
            return FALLBACK_WIDTH, FALLBACK_HEIGHT, False
        return size.columns, size.lines, True
