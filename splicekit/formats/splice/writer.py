"""
SPLICE file writer.

Writes Pattern objects to the .splice binary format.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from splicekit.formats.splice.header import SpliceHeader
from splicekit.formats.splice.track_record import TrackRecord
from splicekit.models.pattern import Pattern

logger = logging.getLogger(__name__)


class SpliceWriter:
    """
    Writer for SPLICE drum pattern files.

    Every track is encoded before the header so the header can carry the
    total size. Any RangeError is raised before output exists.

    Example:
        pattern = Pattern(version="0.808-alpha", tempo=120.0)
        pattern.add_track(Track(id=0, name="kick"))
        SpliceWriter.write(pattern, "kick.splice")
    """

    def __init__(self):
        self.records: List[TrackRecord] = []
        self.header: Optional[SpliceHeader] = None

    @classmethod
    def write(cls, pattern: Pattern, filepath: Union[str, Path]) -> None:
        """
        Write a Pattern to a .splice file.

        Args:
            pattern: Pattern to write
            filepath: Output file path
        """
        writer = cls()
        data = writer.to_bytes(pattern)

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "wb") as f:
            f.write(data)

    def to_bytes(self, pattern: Pattern) -> bytes:
        """
        Convert Pattern to SPLICE binary format.

        Args:
            pattern: Pattern to convert

        Returns:
            Complete file data

        Raises:
            RangeError: If any field does not fit the format
        """
        self.records = [TrackRecord.from_track(track) for track in pattern.tracks]
        track_bytes = sum(record.byte_size for record in self.records)

        self.header = SpliceHeader.for_pattern(pattern, track_bytes)
        parts = [self.header.pack()]
        parts.extend(record.pack() for record in self.records)

        data = b"".join(parts)
        logger.debug(
            "Encoded %d tracks, size field %d, %d bytes total",
            len(self.records),
            self.header.size,
            len(data),
        )
        return data
