"""Renderers for painting diff records."""

from termfit.render.plain import PlainRenderer, render_plain
from termfit.render.rich_console import RichRenderer

__all__ = ["PlainRenderer", "RichRenderer", "render_plain"]
