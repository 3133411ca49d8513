"""
CLI display modules.
"""

from cli.display.tables import (
    display_pattern_info,
    display_step_grid,
    display_track_table,
    display_track_detail,
)
from cli.display.hex_view import display_hex_dump, create_legend

__all__ = [
    "display_pattern_info",
    "display_step_grid",
    "display_track_table",
    "display_track_detail",
    "display_hex_dump",
    "create_legend",
]
