"""Utility functions for splicekit."""

from splicekit.utils.validation import (
    FormatError,
    FormatErrorKind,
    RangeError,
    RangeErrorKind,
    SpliceError,
)

__all__ = [
    "FormatError",
    "FormatErrorKind",
    "RangeError",
    "RangeErrorKind",
    "SpliceError",
]
