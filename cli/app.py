"""
splicekit - Decode, encode and inspect SPLICE drum machine patterns.

A CLI for looking inside .splice files and converting them.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from splicekit import __version__
from cli.commands.info import info
from cli.commands.show import show
from cli.commands.tracks import tracks
from cli.commands.dump import dump
from cli.commands.validate import validate
from cli.commands.convert import convert

console = Console()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# Main app
app = typer.Typer(
    name="splicekit",
    help="Decode, encode and inspect SPLICE drum machine pattern files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="print")(show)
app.command(name="tracks")(tracks)
app.command(name="dump")(dump)
app.command(name="validate")(validate)
app.command(name="convert")(convert)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]splicekit[/bold] version {__version__}")
    console.print("[dim]Decoder/encoder for SPLICE drum machine pattern files[/dim]")


def configure_logging(level: str) -> None:
    """Route library logging through rich on stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-l", help=f"Log level ({', '.join(LOG_LEVELS)})"
    ),
) -> None:
    """
    splicekit - Inspect and convert SPLICE drum patterns.

    [bold]Quick Start:[/bold]

        splicekit info pattern.splice       # Header and step grid
        splicekit print pattern.splice      # Classic text rendering

    [bold]Analysis Commands:[/bold]

        splicekit tracks pattern.splice     # Track record layout
        splicekit dump pattern.splice       # Annotated hex dump
        splicekit validate pattern.splice   # Structural checks

    [bold]Utility Commands:[/bold]

        splicekit convert pattern.splice    # .splice <-> .json

    Use --help with any command for more details.
    """
    if log_level.upper() not in LOG_LEVELS:
        console.print(f"[red]Error: Unknown log level: {escape(log_level)}[/red]")
        raise typer.Exit(1)
    configure_logging(log_level)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
