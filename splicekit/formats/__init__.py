"""Format handlers for SPLICE drum pattern files."""

from splicekit.formats.splice import SpliceReader, SpliceWriter

__all__ = ["SpliceReader", "SpliceWriter"]
