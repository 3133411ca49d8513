"""
Info command - display pattern summary and step grid.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from splicekit.analysis.splice_analyzer import SpliceAnalyzer
from cli.display.tables import display_pattern_info

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="SPLICE file to inspect"),
) -> None:
    """
    Show the header fields and step grid of a .splice file.

    Examples:

        splicekit info pattern_1.splice
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    analysis = SpliceAnalyzer().analyze_file(file)

    if analysis.errors:
        for issue in analysis.errors:
            console.print(f"[red]Error: {escape(issue.message)}[/red]")
        raise typer.Exit(1)

    display_pattern_info(analysis)

    for issue in analysis.warnings:
        console.print(f"[yellow]Warning: {escape(issue.message)}[/yellow]")


if __name__ == "__main__":
    app()
