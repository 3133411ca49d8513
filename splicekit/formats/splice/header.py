"""
SPLICE file header.

Header Structure (50 bytes, little-endian):
    Offset  Size    Description
    0x00    13      Magic "SPLICE" + 7 reserved bytes
    0x0D    1       Size of version + tempo + track data
    0x0E    32      Version string, zero padded
    0x2E    4       Tempo (float32)

The size byte is the only length information in the file. There is no
track count: track data simply runs for ``size - 36`` bytes.
"""

import logging
import struct
from dataclasses import dataclass

from splicekit.formats.splice.stream import ExactSource
from splicekit.models.pattern import Pattern
from splicekit.utils.validation import (
    FormatError,
    FormatErrorKind,
    decode_text,
    validate_payload_size,
    validate_tempo,
    validate_version,
)

logger = logging.getLogger(__name__)


@dataclass
class SpliceHeader:
    """
    Decoded SPLICE header fields.

    Attributes:
        version: Version text with the zero padding removed
        tempo: Tempo as stored (float32 precision)
        size: Raw size field value
        reserved: The 7 bytes after the magic (zero when written by us)
    """

    version: str
    tempo: float
    size: int
    reserved: bytes = bytes(7)

    MAGIC = b"SPLICE"
    MAGIC_FIELD_SIZE = 13
    VERSION_FIELD_SIZE = 32
    TEMPO_FIELD_SIZE = 4
    PAYLOAD_OVERHEAD = VERSION_FIELD_SIZE + TEMPO_FIELD_SIZE  # 36
    MAX_SIZE = 0xFF

    STRUCT = struct.Struct("<13sB32sf")
    HEADER_SIZE = STRUCT.size  # 50

    # Offset table
    OFFSETS = {
        "magic": 0x00,
        "reserved": 0x06,
        "size": 0x0D,
        "version": 0x0E,
        "tempo": 0x2E,
        "tracks": 0x32,
    }

    @property
    def track_bytes(self) -> int:
        """Number of bytes of track data following the header."""
        return self.size - self.PAYLOAD_OVERHEAD

    @classmethod
    def check_magic(cls, data: bytes) -> None:
        """
        Reject data that cannot start with the SPLICE magic.

        Only the bytes present are compared, so a short buffer that is a
        prefix of the magic passes and is left for the length check.

        Raises:
            FormatError: MALFORMED_MAGIC
        """
        prefix = data[: len(cls.MAGIC)]
        if prefix != cls.MAGIC[: len(prefix)]:
            raise FormatError(
                FormatErrorKind.MALFORMED_MAGIC,
                f"expected {cls.MAGIC!r}, got {prefix!r}",
                offset=0,
            )

    @classmethod
    def unpack(cls, data: bytes) -> "SpliceHeader":
        """
        Parse a header from the start of data.

        Args:
            data: At least HEADER_SIZE bytes

        Returns:
            Parsed header

        Raises:
            FormatError: On bad magic, short data or size underflow
        """
        cls.check_magic(data)

        if len(data) < cls.HEADER_SIZE:
            raise FormatError(
                FormatErrorKind.TRUNCATED_HEADER,
                f"header needs {cls.HEADER_SIZE} bytes, got {len(data)}",
                offset=len(data),
            )

        magic_field, size, version_field, tempo = cls.STRUCT.unpack_from(data)

        if size < cls.PAYLOAD_OVERHEAD:
            raise FormatError(
                FormatErrorKind.TRUNCATED_HEADER,
                f"size field {size} is smaller than the {cls.PAYLOAD_OVERHEAD}-byte "
                "version and tempo fields",
                offset=cls.OFFSETS["size"],
            )

        header = cls(
            version=decode_text(version_field.rstrip(b"\x00")),
            tempo=tempo,
            size=size,
            reserved=magic_field[len(cls.MAGIC) :],
        )
        logger.debug(
            "Parsed header: version=%r tempo=%g size=%d track_bytes=%d",
            header.version,
            header.tempo,
            header.size,
            header.track_bytes,
        )
        return header

    @classmethod
    def from_source(cls, source: ExactSource) -> "SpliceHeader":
        """Read and parse the header from a byte source."""
        data = source.read_available(cls.HEADER_SIZE)
        return cls.unpack(data)

    @classmethod
    def for_pattern(cls, pattern: Pattern, track_bytes: int) -> "SpliceHeader":
        """
        Build the header for a pattern whose tracks encode to track_bytes.

        Raises:
            RangeError: If the payload does not fit the size byte
        """
        size = cls.PAYLOAD_OVERHEAD + track_bytes
        validate_payload_size(size, cls.MAX_SIZE)
        return cls(version=pattern.version, tempo=pattern.tempo, size=size)

    def pack(self) -> bytes:
        """
        Serialize the header.

        Returns:
            HEADER_SIZE bytes

        Raises:
            RangeError: If a field does not fit its width
        """
        validate_payload_size(self.size, self.MAX_SIZE)
        version = validate_version(self.version, self.VERSION_FIELD_SIZE)
        tempo = validate_tempo(self.tempo)

        # struct pads both string fields with zeros
        return self.STRUCT.pack(self.MAGIC, self.size, version, tempo)
