"""
Display formatting utilities for CLI output.

Provides step grids, density bars and other formatting helpers.
"""

import struct
from typing import Sequence

from rich.text import Text

from splicekit.utils.validation import format_float32


def step_grid(
    steps: Sequence[bool],
    on_char: str = "x",
    off_char: str = "-",
    on_style: str = "bold green",
    off_style: str = "dim",
) -> Text:
    """
    Render 16 steps as a colored grid in bars of four.

    Returns:
        Rich Text like "|x---|x---|x---|x---|"
    """
    text = Text("|", style="dim")
    for i, step in enumerate(steps):
        if step:
            text.append(on_char, style=on_style)
        else:
            text.append(off_char, style=off_style)
        if (i + 1) % 4 == 0:
            text.append("|", style="dim")
    return text


def density_bar(
    used: int,
    total: int,
    width: int = 16,
    filled_char: str = "█",
    empty_char: str = "░",
) -> str:
    """
    Create a density/usage bar with percentage.

    Returns:
        Formatted string like "[████░░░░░░░░░░░░]  25% (4/16)"
    """
    if total <= 0:
        return f"[{empty_char * width}]   0% (0/0)"

    fill_count = int((used / total) * width)
    empty_count = width - fill_count
    percent = int((used / total) * 100)

    bar = filled_char * fill_count + empty_char * empty_count

    return f"[{bar}] {percent:3d}% ({used}/{total})"


def format_tempo(tempo: float) -> str:
    """
    Format tempo with its stored float32 bytes.

    Returns:
        "120 BPM (raw: 00 00 F0 42)"
    """
    raw = struct.pack("<f", tempo)
    return f"{format_float32(tempo)} BPM (raw: {raw.hex(' ').upper()})"


def format_size_field(size: int, track_bytes: int) -> str:
    """
    Format the header size field.

    Returns:
        "197 (0xC5) = 36 + 161 track bytes"
    """
    return f"{size} (0x{size:02X}) = 36 + {track_bytes} track bytes"


def hex_bytes(data: bytes, limit: int = 16) -> str:
    """Space separated uppercase hex, truncated with an ellipsis."""
    shown = " ".join(f"{b:02X}" for b in data[:limit])
    if len(data) > limit:
        shown += " …"
    return shown
