"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from grid_arbiter.config import get_settings
from grid_arbiter.layout.item import Layout
from grid_arbiter.layout.serializer import LayoutSerializer

console = Console()

VALID_FORMATS = ("table", "yaml", "json")


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def check_format(fmt: str) -> None:
    if fmt not in VALID_FORMATS:
        console.print(f"[red]Invalid format '{fmt}'. Choose from: {', '.join(VALID_FORMATS)}[/red]")
        raise typer.Exit(1)


def read_layout(path: Path) -> Layout:
    """Load a layout file, choosing the parser from the extension."""
    if not path.exists():
        console.print(f"[red]File not found:[/red] {path}")
        raise typer.Exit(1)

    text = path.read_text()
    if path.suffix.lower() == ".json":
        return LayoutSerializer.from_json(text, context_name=path.name)
    return LayoutSerializer.from_yaml(text, context_name=path.name)


def print_layout(layout: Layout, fmt: str, title: str = "Layout", changed: set[str] | None = None) -> None:
    if fmt == "json":
        console.print_json(LayoutSerializer.to_json(layout))
        return
    if fmt == "yaml":
        console.print(Syntax(LayoutSerializer.to_yaml(layout), "yaml", theme="monokai"))
        return

    changed = changed or set()
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("w", justify="right")
    table.add_column("h", justify="right")
    table.add_column("Static", style="dim")
    table.add_column("Changed", style="green")

    for item in layout:
        table.add_row(
            item.i,
            str(item.x),
            str(item.y),
            str(item.w),
            str(item.h),
            "yes" if item.static else "",
            "*" if item.i in changed else "",
        )
    console.print(table)


def changed_ids(before: Layout, after: Layout) -> set[str]:
    """Ids whose region differs between two layouts."""
    old = {item.i: item.region() for item in before}
    return {item.i for item in after if old.get(item.i) != item.region()}
