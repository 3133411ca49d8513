"""
Tracks command - track record layout and per-step detail.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from splicekit.analysis.splice_analyzer import SpliceAnalyzer
from cli.display.tables import display_track_table, display_track_detail

console = Console()
app = typer.Typer()


@app.command()
def tracks(
    file: Path = typer.Argument(..., help="SPLICE file to inspect"),
    track: Optional[int] = typer.Option(None, "--track", "-t", help="Show one track id in detail"),
) -> None:
    """
    Show the track records of a .splice file.

    Lists id, name, file offset, record size and steps for every track.
    With --track, shows the raw step bytes of the matching track(s).

    Examples:

        splicekit tracks pattern_1.splice

        splicekit tracks pattern_1.splice --track 3
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    analysis = SpliceAnalyzer().analyze_file(file)

    for issue in analysis.errors:
        console.print(f"[red]Error: {escape(issue.message)}[/red]")

    if track is None:
        if analysis.tracks:
            display_track_table(analysis)
    else:
        matches = [t for t in analysis.tracks if t.id == track]
        if not matches:
            console.print(f"[red]Error: No track with id {track}[/red]")
            raise typer.Exit(1)
        for info in matches:
            display_track_detail(info)

    if analysis.errors:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
