"""Command line interface for termfit."""

from termfit.cli.app import create_app
from termfit.cli.main import main
from termfit.cli.terminal import TerminalDimensionProvider

__all__ = ["create_app", "main", "TerminalDimensionProvider"]
