"""
Validate command - check SPLICE file integrity and structure.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich import box

from splicekit.analysis.splice_analyzer import SpliceAnalysis, SpliceAnalyzer

console = Console()
app = typer.Typer()


def display_validation(analysis: SpliceAnalysis, valid: bool, verbose: bool = False) -> None:
    """Display validation results."""
    status = "[green]VALID[/green]" if valid else "[red]INVALID[/red]"
    border = "green" if valid else "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(analysis.filepath)}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Errors: [red]{len(analysis.errors)}[/red]  "
            f"Warnings: [yellow]{len(analysis.warnings)}[/yellow]  "
            f"Info: [blue]{len(analysis.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if analysis.errors or analysis.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=8)
        table.add_column("Area", style="cyan", width=10)
        table.add_column("Offset", style="dim", width=6)
        table.add_column("Message", width=44)

        for issue in analysis.errors:
            table.add_row(
                "[red]ERROR[/red]", escape(issue.area), f"0x{issue.offset:02X}", escape(issue.message)
            )

        for issue in analysis.warnings:
            table.add_row(
                "[yellow]WARN[/yellow]",
                escape(issue.area),
                f"0x{issue.offset:02X}",
                escape(issue.message),
            )

        console.print(table)

    if analysis.info and (verbose or not (analysis.errors or analysis.warnings)):
        info_table = Table(title="Validation Checks", box=box.SIMPLE, show_header=False)
        info_table.add_column("", width=60)

        for issue in analysis.info:
            info_table.add_row(f"[green]OK[/green] {escape(issue.area)}: {escape(issue.message)}")

        console.print(info_table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="SPLICE file to validate"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show all validation details"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate a SPLICE pattern file structure and content.

    Checks for:

    - "SPLICE" magic and a complete 50-byte header
    - Size field consistent with the file length
    - Complete track records within the size budget
    - Zero reserved bytes and 0x00/0x01 step bytes
    - Duplicate track ids

    Examples:

        splicekit validate pattern_1.splice

        splicekit validate pattern_1.splice --strict
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    analysis = SpliceAnalyzer().analyze_file(file)

    valid = analysis.valid
    if strict and analysis.warnings:
        valid = False

    display_validation(analysis, valid, verbose)

    if not valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
