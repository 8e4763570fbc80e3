"""sysfetch - Typer command-line application."""

import logging
from typing import Annotated, Optional

import typer

from sysfetch.collector import collect_snapshot
from sysfetch.render import Layout, render
from sysfetch.sources import default_sources

__version__ = "0.1.0"

app = typer.Typer(
    name="sysfetch",
    help="Show host facts beside an ASCII-art logo",
    add_completion=False,
)


def version_callback(value: bool):
    """Display version and exit."""
    if value:
        typer.echo(f"sysfetch v{__version__}")
        raise typer.Exit()


@app.command()
def fetch(
    layout: Annotated[
        Layout,
        typer.Option(help="How the logo and facts are laid out"),
    ] = Layout.FIXED_GUTTER,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log why facts fell back to stderr"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
):
    """Print the OS, kernel, uptime, CPU and memory of this host.

    Facts that cannot be read are shown as 'unknown'; the command always
    succeeds.
    """
    logging.basicConfig(format="%(name)s: %(message)s")
    logging.getLogger("sysfetch").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )

    snapshot = collect_snapshot(default_sources())
    render(snapshot, layout)


def main() -> None:
    """Entry point for the sysfetch command."""
    app()


if __name__ == "__main__":
    main()
