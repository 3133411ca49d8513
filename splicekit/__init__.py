"""
splicekit - Decoder and encoder for SPLICE drum machine pattern files.

This library provides tools to:
- Read .splice pattern files into Pattern objects
- Write Pattern objects back to byte-identical .splice files
- Inspect and validate the binary layout of a file

Example usage:
    from splicekit import Pattern, Track, decode_file, encode

    pattern = decode_file("pattern_1.splice")
    print(pattern)

    pattern.add_track(Track(id=9, name="rim", steps=[1, 0, 0, 0] * 4))
    data = encode(pattern)
"""

__version__ = "0.1.0"
__author__ = "splicekit Contributors"

from splicekit.formats.splice import (
    SpliceReader,
    SpliceWriter,
    decode,
    decode_file,
    encode,
    encode_to_file,
)
from splicekit.models.pattern import Pattern
from splicekit.models.track import Track
from splicekit.utils.validation import FormatError, RangeError, SpliceError

__all__ = [
    "SpliceReader",
    "SpliceWriter",
    "decode",
    "decode_file",
    "encode",
    "encode_to_file",
    "Pattern",
    "Track",
    "FormatError",
    "RangeError",
    "SpliceError",
]
