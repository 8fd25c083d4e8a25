"""grid-arbiter move / drop: Simulate a drag gesture on a layout file."""

from __future__ import annotations

import json
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
from grid_arbiter.layout.arbiter import GridArbiter
from grid_arbiter.layout.item import Pointer
from grid_arbiter.layout.serializer import LayoutSerializer


def move(
    layout_file: Annotated[Path, typer.Argument(help="Layout YAML or JSON file")],
    item_id: Annotated[str, typer.Argument(help="Id of the item to drag")],
    x: Annotated[int | None, typer.Option("--x", help="Target column")] = None,
    y: Annotated[int | None, typer.Option("--y", help="Target row")] = None,
    prevent_collision: Annotated[
        bool | None,
        typer.Option("--prevent-collision/--allow-collision", help="Reject moves onto other items"),
    ] = None,
    cols: Annotated[int | None, typer.Option("--cols", "-c", help="Grid column count")] = None,
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output: table, yaml, or json")] = "table",
    verbose: Annotated[bool, typer.Option("--verbose", help="Debug logging")] = False,
) -> None:
    """Drag an item to (x, y), cascade collisions, and compact."""
    configure_logging(verbose)
    try:
        check_format(fmt)
        if x is None and y is None:
            console.print("[yellow]Specify --x and/or --y[/yellow]")
            raise typer.Exit(1)

        layout = read_layout(layout_file)
        arbiter = GridArbiter(
            layout, cols=cols, prevent_collision=prevent_collision, settings=get_settings()
        )
        result = arbiter.drag(item_id, x=x, y=y)
        print_layout(result, fmt, title=f"After moving {item_id}", changed=changed_ids(layout, result))

    except GridArbiterError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def drop(
    layout_file: Annotated[Path, typer.Argument(help="Layout YAML or JSON file")],
    item_id: Annotated[str, typer.Argument(help="Id of the dragged item")],
    px: Annotated[float, typer.Option("--px", help="Pointer column, in grid units")],
    py: Annotated[float, typer.Option("--py", help="Pointer row, in grid units")],
    preview: Annotated[bool, typer.Option("--preview", help="Only show the placeholder")] = False,
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output: table, yaml, or json")] = "table",
    verbose: Annotated[bool, typer.Option("--verbose", help="Debug logging")] = False,
) -> None:
    """Drop an item with the pointer at (px, py): swap or split the target."""
    configure_logging(verbose)
    try:
        check_format(fmt)
        layout = read_layout(layout_file)
        arbiter = GridArbiter(layout, settings=get_settings())
        placeholder = arbiter.placeholder(item_id, Pointer(x=px, y=py))

        if placeholder is None:
            console.print("[yellow]No drop target under the pointer.[/yellow]")
            return

        if preview:
            data = LayoutSerializer.placeholder_to_dict(placeholder)
            if fmt == "table":
                console.print(
                    f"Drop [cyan]{item_id}[/cyan] on [cyan]{placeholder.i}[/cyan] "
                    f"({placeholder.pos.value}): ({placeholder.x},{placeholder.y}) "
                    f"{placeholder.w}x{placeholder.h}"
                )
            else:
                console.print_json(json.dumps(data))
            return

        result = arbiter.drop(item_id, placeholder)
        print_layout(
            result,
            fmt,
            title=f"After dropping {item_id} ({placeholder.pos.value} of {placeholder.i})",
            changed=changed_ids(layout, result),
        )

    except GridArbiterError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
