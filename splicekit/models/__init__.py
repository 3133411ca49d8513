"""Data models for SPLICE pattern representation."""

from splicekit.models.pattern import Pattern
from splicekit.models.track import Track, STEP_COUNT

__all__ = [
    "Pattern",
    "Track",
    "STEP_COUNT",
]
