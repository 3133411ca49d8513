"""
Dump command - annotated hex dump of a SPLICE file.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from splicekit.analysis.splice_analyzer import SpliceAnalyzer
from cli.display.hex_view import create_legend, display_hex_dump

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help="SPLICE file to dump"),
    lines: int = typer.Option(64, "--lines", "-n", help="Maximum lines to show"),
    legend: bool = typer.Option(True, "--legend/--no-legend", help="Show region legend"),
) -> None:
    """
    Annotated hex dump of a .splice file.

    Each line is tagged with the region it belongs to (MAGIC, SIZE,
    VERSION, TEMPO, TRK n, ...). Works on damaged files too: bytes that
    cannot be placed are tagged "?".

    Examples:

        splicekit dump pattern_1.splice

        splicekit dump pattern_1.splice --no-legend
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        data = f.read()

    analysis = SpliceAnalyzer().analyze_bytes(data, str(file))

    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(str(file))}\n[bold]Size:[/bold] {len(data)} bytes",
            title="[bold]SPLICE Dump[/bold]",
            border_style="blue",
            expand=False,
        )
    )
    display_hex_dump(analysis, data, max_lines=lines)

    if legend:
        console.print()
        console.print(create_legend(analysis))

    for issue in analysis.errors:
        console.print(f"[red]Error: {escape(issue.message)}[/red]")


if __name__ == "__main__":
    app()
