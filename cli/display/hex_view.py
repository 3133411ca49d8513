"""
Hex dump display utilities.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box
from rich.markup import escape

from splicekit.analysis.splice_analyzer import SpliceAnalysis

console = Console()


def format_hex_line(analysis: SpliceAnalysis, data: bytes, offset: int) -> Text:
    """
    Format one dump line, coloring each byte by the region it belongs to.

    Returns Rich Text object with colored output.
    """
    region = analysis.region_for_offset(offset)
    tag = region.name if region else "?"

    text = Text()
    text.append(f"0x{offset:03X} ", style="dim")
    text.append(f"[{tag:9s}] ", style=region.color if region else "white")

    for i, byte in enumerate(data):
        byte_region = analysis.region_for_offset(offset + i)
        style = byte_region.color if byte_region else "white"
        if byte == 0x00:
            style = "dim"
        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    return text


def display_hex_dump(
    analysis: SpliceAnalysis,
    data: bytes,
    max_lines: int = 64,
) -> None:
    """
    Display an annotated hex dump.

    Lines break at region boundaries so every line belongs to one region;
    long regions wrap at 16 bytes.
    """
    lines = 0
    for start, chunk in _chunks(analysis, data):
        if lines >= max_lines:
            console.print(f"[dim]... {len(data) - start} more bytes ...[/dim]")
            break

        text = format_hex_line(analysis, chunk, start)
        text.append(" " * (3 * (16 - len(chunk))))
        text.append(" ")
        for byte in chunk:
            if 32 <= byte < 127:
                text.append(chr(byte), style="green")
            else:
                text.append(".", style="dim")
        console.print(text)
        lines += 1


def _chunks(analysis: SpliceAnalysis, data: bytes, width: int = 16):
    offset = 0
    while offset < len(data):
        region = analysis.region_for_offset(offset)
        end = region.end if region else len(data)
        stop = min(offset + width, end, len(data))
        yield offset, data[offset:stop]
        offset = stop


def create_legend(analysis: SpliceAnalysis) -> Table:
    """Create a legend for the hex dump colors."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Region", width=10)
    table.add_column("Description", width=44)

    for region in analysis.regions:
        table.add_row(
            Text(region.name, style=region.color),
            f"{escape(region.description)} "
            f"({region.size} bytes, 0x{region.start:02X}-0x{region.end - 1:02X})",
        )

    return table
