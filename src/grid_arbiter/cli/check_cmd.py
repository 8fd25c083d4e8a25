"""grid-arbiter check: Validate a layout file and report overlaps."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from grid_arbiter.cli.common import configure_logging, console, read_layout
from grid_arbiter.config import get_settings
from grid_arbiter.exceptions import GridArbiterError
from grid_arbiter.layout.arbiter import GridArbiter


def check(
    layout_file: Annotated[Path, typer.Argument(help="Layout YAML or JSON file")],
    cols: Annotated[int | None, typer.Option("--cols", "-c", help="Grid column count")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Debug logging")] = False,
) -> None:
    """Validate a layout and list overlapping or out-of-bounds items.

    Exits 1 when the file is structurally invalid. Overlaps and overflow
    are reported but do not fail the command.
    """
    configure_logging(verbose)
    try:
        layout = read_layout(layout_file)
        arbiter = GridArbiter(layout, cols=cols, settings=get_settings())

        console.print(f"[green]Valid layout:[/green] {len(layout)} items, {arbiter.cols} columns")

        out_of_bounds = [
            item.i for item in layout if item.x < 0 or item.x + item.w > arbiter.cols
        ]
        for item_id in out_of_bounds:
            console.print(f"[yellow]Out of bounds:[/yellow] {item_id}")

        pairs = arbiter.collisions()
        if not pairs:
            console.print("No overlapping items.")
            return

        table = Table(title="Overlapping items")
        table.add_column("Item", style="cyan")
        table.add_column("Overlaps", style="cyan")
        table.add_column("Both static", style="dim")
        for a, b in pairs:
            both_static = arbiter.item(a).static and arbiter.item(b).static
            table.add_row(a, b, "yes" if both_static else "")
        console.print(table)

    except GridArbiterError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
