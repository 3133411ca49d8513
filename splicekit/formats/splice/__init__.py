"""SPLICE format handlers."""

from pathlib import Path
from typing import Union

from splicekit.formats.splice.header import SpliceHeader
from splicekit.formats.splice.reader import SpliceReader
from splicekit.formats.splice.stream import BoundedSource, ByteInput, ExactSource, TruncatedRead
from splicekit.formats.splice.track_record import TrackRecord
from splicekit.formats.splice.writer import SpliceWriter
from splicekit.models.pattern import Pattern


def decode(source: ByteInput) -> Pattern:
    """Decode a pattern from bytes or a binary stream."""
    return SpliceReader().parse_stream(source)


def encode(pattern: Pattern) -> bytes:
    """Encode a pattern to SPLICE bytes."""
    return SpliceWriter().to_bytes(pattern)


def decode_file(path: Union[str, Path]) -> Pattern:
    """Decode the .splice file at path."""
    return SpliceReader.read(path)


def encode_to_file(path: Union[str, Path], pattern: Pattern) -> None:
    """Encode pattern and write it to path."""
    SpliceWriter.write(pattern, path)


__all__ = [
    "SpliceHeader",
    "SpliceReader",
    "SpliceWriter",
    "TrackRecord",
    "ExactSource",
    "BoundedSource",
    "TruncatedRead",
    "decode",
    "encode",
    "decode_file",
    "encode_to_file",
]
