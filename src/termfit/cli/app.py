"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read(path: Path, console: Console) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        console.print(f"[red]Cannot read {path}: {e.strerror or e}[/]")
        raise typer.Exit(1)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termfit",
        help="Fit diffs and other structured text to the terminal width.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def root(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Fit diffs and other structured text to the terminal width."""
        _configure_logging(verbose)

    @app.command()
    def diff(
        old: Annotated[Path, typer.Argument(help="Original file")],
        new: Annotated[Path, typer.Argument(help="Changed file")],
        mode: Annotated[str, typer.Option("--mode", "-m", help="unified, split, inline or auto")] = "auto",
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Layout width (default: terminal)")] = None,
        context: Annotated[int, typer.Option("--context", "-c", help="Context lines around changes")] = 3,
        line_numbers: Annotated[bool, typer.Option("--line-numbers/--no-line-numbers", help="Show line number gutter")] = True,
        max_lines: Annotated[Optional[int], typer.Option("--max-lines", help="Stop after this many rows")] = None,
        fixed: Annotated[bool, typer.Option("--fixed", help="Ignore the terminal and use a fixed width")] = False,
        plain: Annotated[bool, typer.Option("--plain", "-p", help="Plain text output, no styling")] = False,
    ) -> None:
        """Show the difference between two files, laid out for the terminal."""
        from termfit.cli.terminal import TerminalDimensionProvider
        from termfit.core.options import RenderOptions
        from termfit.diff.engine import DiffEngine
        from termfit.render.plain import PlainRenderer
        from termfit.render.rich_console import RichRenderer

        try:
            options = RenderOptions(
                mode=mode,
                width=width,
                context_lines=context,
                show_line_numbers=line_numbers,
                max_rendered_lines=max_lines,
                responsive=not fixed,
            )
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--mode")

        old_text = _read(old, console)
        new_text = _read(new, console)
        result = DiffEngine().diff(old_text, new_text, options, TerminalDimensionProvider())

        if not result.has_changes:
            console.print(f"[dim]{old.name} and {new.name} are identical[/]")
            return

        if plain:
            for line in PlainRenderer(result.budget).render(result.records):
                typer.echo(line)
        else:
            console.print(f"[bold]--- {old}[/]")
            console.print(f"[bold]+++ {new}[/]")
            for text in RichRenderer(result.budget).render(result.records):
                console.print(text, soft_wrap=True)
            console.print(f"[dim]{result.stats}[/]")

    @app.command()
    def classify(
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Width to classify (default: terminal)")] = None,
        line_numbers: Annotated[int, typer.Option("--max-line", help="Largest line number for the gutter")] = 999,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the tier, mode and column budgets for a width."""
        from termfit.cli.terminal import TerminalDimensionProvider
        from termfit.core.layout import compute_budget
        from termfit.core.modes import RenderMode, resolve_mode
        from termfit.core.options import RenderOptions

        dims = RenderOptions(width=width).dimensions(TerminalDimensionProvider())
        resolution = resolve_mode(RenderMode.AUTO, dims.width)
        unified = compute_budget(dims.width, dims.tier, RenderMode.UNIFIED, line_numbers)
        split = compute_budget(dims.width, dims.tier, RenderMode.SPLIT, line_numbers)

        if json_output:
            data = {
                "width": dims.width,
                "height": dims.height,
                "tier": dims.tier.value,
                "available": dims.is_available,
                "auto_mode": resolution.effective.value,
                "unified_content_width": unified.content_width,
                "split_pane_width": split.per_pane_width,
                "gutter_width": unified.gutter_width,
            }
            typer.echo(json.dumps(data, indent=2))
            return

        console.print(f"[bold cyan]{dims.width} columns[/] → [bold]{dims.tier.value}[/]")
        if not dims.is_available:
            console.print("[yellow]Terminal size unavailable, using fallback width[/]")
        console.print(f"  [bold]Auto mode:[/]       {resolution.effective.value}")
        console.print(f"  [bold]Gutter:[/]          {unified.gutter_width}")
        console.print(f"  [bold]Unified content:[/] {unified.content_width}")
        console.print(f"  [bold]Split pane:[/]      {split.per_pane_width}")

    @app.command()
    def truncate(
        text: Annotated[str, typer.Argument(help="Text to truncate")],
        max_len: Annotated[int, typer.Option("--max", "-n", help="Maximum length")] = 40,
        path: Annotated[bool, typer.Option("--path", help="Treat text as a path")] = False,
        keep_start: Annotated[bool, typer.Option("--keep-start", help="Keep the beginning instead of the end")] = False,
        ascii_marker: Annotated[bool, typer.Option("--ascii", help="Use '...' instead of '…'")] = False,
    ) -> None:
        """Truncate text the same way the views do."""
        from termfit.core.truncate import (
            ASCII_ELLIPSIS,
            ELLIPSIS,
            truncate_end,
            truncate_path,
        )
        from termfit.core.truncate import truncate as truncate_tail

        marker = ASCII_ELLIPSIS if ascii_marker else ELLIPSIS
        if path:
            result = truncate_path(text, max_len)
        elif keep_start:
            result = truncate_end(text, max_len, marker)
        else:
            result = truncate_tail(text, max_len, marker)
        typer.echo(result)

    return app
