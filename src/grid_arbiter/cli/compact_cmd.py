"""grid-arbiter compact / bounds: Run the whole-layout passes on a file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from grid_arbiter.cli.common import (
    changed_ids,
    check_format,
    configure_logging,
    console,
    print_layout,
    read_layout,
)
from grid_arbiter.config import get_settings
from grid_arbiter.exceptions import GridArbiterError
from grid_arbiter.layout.bounds import correct_bounds
from grid_arbiter.layout.compaction import compact as compact_layout
from grid_arbiter.layout.geometry import clone_layout


def compact(
    layout_file: Annotated[Path, typer.Argument(help="Layout YAML or JSON file")],
    vertical: Annotated[
        bool | None, typer.Option("--vertical/--no-vertical", help="Pull items up into gaps")
    ] = None,
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output: table, yaml, or json")] = "table",
    verbose: Annotated[bool, typer.Option("--verbose", help="Debug logging")] = False,
) -> None:
    """Compact a layout and print the result."""
    configure_logging(verbose)
    try:
        check_format(fmt)
        settings = get_settings()
        if vertical is None:
            vertical = settings.grid_arbiter_vertical_compact

        layout = read_layout(layout_file)
        result = compact_layout(clone_layout(layout), vertical)
        print_layout(result, fmt, title="Compacted layout", changed=changed_ids(layout, result))

    except GridArbiterError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def bounds(
    layout_file: Annotated[Path, typer.Argument(help="Layout YAML or JSON file")],
    cols: Annotated[int | None, typer.Option("--cols", "-c", help="Grid column count")] = None,
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output: table, yaml, or json")] = "table",
    verbose: Annotated[bool, typer.Option("--verbose", help="Debug logging")] = False,
) -> None:
    """Clamp every item into the column count and print the result."""
    configure_logging(verbose)
    try:
        check_format(fmt)
        cols = get_settings().require_cols(cols)

        layout = read_layout(layout_file)
        result = correct_bounds(clone_layout(layout), cols)
        print_layout(result, fmt, title=f"Layout in {cols} columns", changed=changed_ids(layout, result))

    except GridArbiterError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
