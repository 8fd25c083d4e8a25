"""Main CLI application for grid-arbiter."""

from __future__ import annotations

import typer

from grid_arbiter import __version__

app = typer.Typer(
    name="grid-arbiter",
    help="Collision, compaction and drag-drop arbitration for dashboard grid layouts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"grid-arbiter {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version.", callback=version_callback, is_eager=True
    ),
) -> None:
    """grid-arbiter: Arrange dashboard panels on an integer grid."""


# Import and register commands
from grid_arbiter.cli.check_cmd import check  # noqa: E402
from grid_arbiter.cli.compact_cmd import bounds, compact  # noqa: E402
from grid_arbiter.cli.move_cmd import drop, move  # noqa: E402

app.command("check")(check)
app.command("compact")(compact)
app.command("bounds")(bounds)
app.command("move")(move)
app.command("drop")(drop)


def main() -> None:
    """Entry point for the CLI."""
    app()
