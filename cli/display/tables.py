"""
Rich table displays for pattern information.

Provides formatted output for SPLICE file analysis.
"""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.markup import escape

from splicekit.analysis.splice_analyzer import SpliceAnalysis, TrackInfo
from cli.display.formatters import density_bar, format_size_field, format_tempo, step_grid


console = Console()


def display_pattern_info(analysis: SpliceAnalysis) -> None:
    """Display header summary and step grid for a SPLICE file."""

    status = "[green]Valid[/green]" if analysis.valid else "[red]Invalid[/red]"
    version = escape(analysis.version) if analysis.version else "N/A"

    header_content = f"""[bold]Version:[/bold] {version}
[bold]Tempo:[/bold] {format_tempo(analysis.tempo)}
[bold]Size Field:[/bold] {format_size_field(analysis.size_field, analysis.track_bytes)}
[bold]File Size:[/bold] {analysis.filesize} bytes (expected {analysis.expected_filesize})
[bold]Tracks:[/bold] {len(analysis.tracks)}
[bold]Status:[/bold] {status}"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]SPLICE Pattern Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    display_step_grid(analysis)


def display_step_grid(analysis: SpliceAnalysis) -> None:
    """Display every track's steps as a grid."""
    grid = Table(title="Steps", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    grid.add_column("ID", style="dim", justify="right", width=5)
    grid.add_column("Name", style="cyan", width=14)
    grid.add_column("1   5   9   13", width=22)

    for track in analysis.tracks:
        grid.add_row(str(track.id), escape(track.name), step_grid(track.steps))

    console.print(grid)


def display_track_table(analysis: SpliceAnalysis) -> None:
    """Display record layout for every track."""
    table = Table(
        title="Track Records", box=box.ROUNDED, show_header=True, header_style="bold green"
    )
    table.add_column("#", style="dim", width=3)
    table.add_column("ID", justify="right", width=5)
    table.add_column("Name", style="cyan", width=14)
    table.add_column("Offset", style="dim", width=8)
    table.add_column("Size", justify="right", width=5)
    table.add_column("Steps", width=22)
    table.add_column("Density", width=30)

    for track in analysis.tracks:
        steps = step_grid(track.steps)
        if track.non_canonical_steps:
            steps.append(" !", style="bold yellow")
        table.add_row(
            str(track.index),
            str(track.id),
            escape(track.name),
            f"0x{track.offset:02X}",
            str(track.size),
            steps,
            density_bar(track.active_count, len(track.steps), width=12),
        )

    console.print(table)

    total = sum(t.size for t in analysis.tracks)
    console.print(
        f"[dim]{len(analysis.tracks)} records, {total} of {analysis.track_bytes} "
        "budgeted track bytes[/dim]"
    )


def display_track_detail(track: TrackInfo) -> None:
    """Display one track record in detail, including raw step bytes."""
    content = f"""[bold]ID:[/bold] {track.id}
[bold]Name:[/bold] {escape(track.name)} ({len(track.name.encode("utf-8"))} bytes)
[bold]Offset:[/bold] 0x{track.offset:02X}
[bold]Record Size:[/bold] {track.size} bytes
[bold]Active Steps:[/bold] {track.active_count} of {len(track.steps)}"""

    console.print(
        Panel(content, title=f"[bold]Track {track.index}[/bold]", border_style="cyan", expand=False)
    )

    table = Table(box=box.SIMPLE, show_header=True, header_style="dim")
    table.add_column("Step", justify="right", width=5)
    table.add_column("Raw", width=6)
    table.add_column("State", width=8)

    for i, (raw, step) in enumerate(zip(track.raw_steps, track.steps)):
        if i in track.non_canonical_steps:
            state = "[yellow]off (!)[/yellow]"
        else:
            state = "[green]on[/green]" if step else "[dim]off[/dim]"
        table.add_row(str(i + 1), f"0x{raw:02X}", state)

    console.print(table)
