"""
Convert command - conversion between .splice and JSON.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from splicekit.formats.splice.reader import SpliceReader
from splicekit.formats.splice.writer import SpliceWriter
from splicekit.models.pattern import Pattern
from splicekit.utils.validation import SpliceError

console = Console()
app = typer.Typer()


@app.command()
def convert(
    source: Path = typer.Argument(..., help="Source file (.splice or .json)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show traceback on errors"),
) -> None:
    """
    Convert between SPLICE binary and JSON.

    Direction follows the source suffix:

    - .splice -> .json
    - .json -> .splice

    Examples:

        splicekit convert pattern_1.splice -o pattern_1.json

        splicekit convert pattern_1.json
    """
    if not source.exists():
        console.print(f"[red]Error: Source file not found: {escape(str(source))}[/red]")
        raise typer.Exit(1)

    suffix = source.suffix.lower()
    if suffix == SpliceReader.FILE_EXTENSION:
        output_path = output or source.with_suffix(".json")
    elif suffix == ".json":
        output_path = output or source.with_suffix(SpliceReader.FILE_EXTENSION)
    else:
        console.print(f"[red]Error: Unknown file type: {escape(suffix)}[/red]")
        console.print("Supported formats: .splice, .json")
        raise typer.Exit(1)

    if output_path.exists() and not force:
        console.print(
            f"[red]Error: Output exists: {escape(str(output_path))} (use --force)[/red]"
        )
        raise typer.Exit(1)

    try:
        if suffix == ".json":
            with open(source, "r", encoding="utf-8") as f:
                pattern = Pattern.from_dict(json.load(f))
            SpliceWriter.write(pattern, output_path)
        else:
            pattern = SpliceReader.read(source)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(pattern.to_dict(), f, indent=2)
                f.write("\n")
    except (SpliceError, ValueError, TypeError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    console.print(
        f"[green]Converted:[/green] {escape(str(source))} -> {escape(str(output_path))}"
    )
    console.print(
        f"[dim]{len(pattern.tracks)} tracks, "
        f"output size: {output_path.stat().st_size} bytes[/dim]"
    )


if __name__ == "__main__":
    app()
