"""
SPLICE file reader.

Reads .splice binary files and converts them to the Pattern model.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from splicekit.formats.splice.header import SpliceHeader
from splicekit.formats.splice.stream import BoundedSource, ByteInput, ExactSource
from splicekit.formats.splice.track_record import TrackRecord
from splicekit.models.pattern import Pattern
from splicekit.utils.validation import validate_splice_header

logger = logging.getLogger(__name__)


class SpliceReader:
    """
    Reader for SPLICE drum pattern files.

    Decoding is header first, then track records from a source bounded by
    the header's byte budget until that budget is exhausted.

    Example:
        pattern = SpliceReader.read("pattern_1.splice")
        print(f"Version: {pattern.version}, Tempo: {pattern.tempo:g}")
    """

    FILE_EXTENSION = ".splice"

    def __init__(self):
        self.header: Optional[SpliceHeader] = None
        self.records: List[TrackRecord] = []
        self.trailing_bytes: int = 0

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Pattern:
        """
        Read a .splice file and return a Pattern.

        Args:
            filepath: Path to .splice file

        Returns:
            Parsed Pattern object
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Pattern:
        """
        Parse a .splice file.

        Raises:
            FileNotFoundError: If the file does not exist
            FormatError: If the contents are not a valid SPLICE file
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            return self.parse_stream(f)

    def parse_bytes(self, data: bytes) -> Pattern:
        """Parse SPLICE data held in memory."""
        pattern = self.parse_stream(data)
        self.trailing_bytes = max(len(data) - self.end_offset, 0)
        if self.trailing_bytes:
            logger.debug("Ignoring %d bytes after the track data", self.trailing_bytes)
        return pattern

    def parse_stream(self, stream: ByteInput) -> Pattern:
        """
        Parse SPLICE data from a binary stream or bytes.

        Bytes after the track budget are left unread.

        Returns:
            Parsed Pattern object

        Raises:
            FormatError: On bad magic, a short header or a cut-off track
        """
        source = ExactSource.wrap(stream)
        self.header, self.records = self._parse_records(source)
        return self._build_pattern()

    def _parse_records(self, source: ExactSource) -> Tuple[SpliceHeader, List[TrackRecord]]:
        header = SpliceHeader.from_source(source)

        bounded = BoundedSource(source, header.track_bytes)
        records = []
        while True:
            record = TrackRecord.from_source(bounded)
            if record is None:
                break
            records.append(record)

        logger.debug("Decoded %d tracks from %d bytes", len(records), header.track_bytes)
        return header, records

    def _build_pattern(self) -> Pattern:
        pattern = Pattern(version=self.header.version, tempo=self.header.tempo)
        for record in self.records:
            pattern.add_track(record.to_track())
        return pattern

    @property
    def end_offset(self) -> int:
        """Offset just past the last track byte of the parsed file."""
        if self.header is None:
            return 0
        return SpliceHeader.HEADER_SIZE + self.header.track_bytes

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file starts with the SPLICE magic.

        Args:
            filepath: Path to check

        Returns:
            True if the file looks like a SPLICE file
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        with open(filepath, "rb") as f:
            magic = f.read(len(SpliceHeader.MAGIC))

        return validate_splice_header(magic)

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a .splice file without full parsing.

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": False,
            "size": len(data),
        }

        if len(data) >= len(SpliceHeader.MAGIC):
            info["magic"] = data[: len(SpliceHeader.MAGIC)].decode("ascii", errors="replace")
            info["valid"] = data[: len(SpliceHeader.MAGIC)] == SpliceHeader.MAGIC

        size_offset = SpliceHeader.OFFSETS["size"]
        if len(data) > size_offset:
            info["size_field"] = data[size_offset]
            info["expected_size"] = SpliceHeader.MAGIC_FIELD_SIZE + 1 + data[size_offset]

        return info
