"""
Print command - plain text rendering of a pattern.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from splicekit.formats.splice.reader import SpliceReader
from splicekit.utils.validation import SpliceError

console = Console(stderr=True)
app = typer.Typer()


@app.command()
def show(
    file: Path = typer.Argument(..., help="SPLICE file to print"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show traceback on errors"),
) -> None:
    """
    Print a pattern in the classic text form.

    Output looks like:

        Saved with HW Version: 0.808-alpha
        Tempo: 120
        (0) kick	|x---|x---|x---|x---|
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    try:
        pattern = SpliceReader.read(file)
    except SpliceError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    # Plain echo: names may contain rich markup characters
    typer.echo(str(pattern), nl=False)


if __name__ == "__main__":
    app()
