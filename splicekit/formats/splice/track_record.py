"""
SPLICE track record.

Record Structure (little-endian):
    Offset  Size    Description
    0x00    4       Track id (uint32)
    0x04    1       Name length n
    0x05    n       Name
    0x05+n  16      Step flags, 0x01 = on

Records follow the header back to back until the header's byte budget is
used up.
"""

import logging
import struct
from dataclasses import dataclass
from typing import Optional

from splicekit.formats.splice.stream import BoundedSource, ExactSource, TruncatedRead
from splicekit.models.track import STEP_COUNT, Track
from splicekit.utils.validation import (
    FormatError,
    FormatErrorKind,
    decode_text,
    validate_track_id,
    validate_track_name,
)

logger = logging.getLogger(__name__)

STEP_ON = 0x01
STEP_OFF = 0x00


@dataclass
class TrackRecord:
    """
    Wire form of one track.

    Attributes:
        id: Track id
        name_bytes: Encoded name
        raw_steps: The 16 step bytes exactly as stored
        offset: Absolute file offset of the record, when decoded
    """

    id: int
    name_bytes: bytes
    raw_steps: bytes
    offset: Optional[int] = None

    STEP_COUNT = STEP_COUNT
    MAX_NAME_LENGTH = 0xFF
    MAX_TRACK_ID = 0xFFFFFFFF

    PREFIX = struct.Struct("<IB")

    @property
    def byte_size(self) -> int:
        """id + name length + name + steps."""
        return self.PREFIX.size + len(self.name_bytes) + self.STEP_COUNT

    @property
    def steps(self) -> tuple:
        # Only an exact 0x01 counts as on; 0x02-0xFF read as off.
        return tuple(b == STEP_ON for b in self.raw_steps)

    @property
    def non_canonical_steps(self) -> list:
        """Indices of step bytes that are neither 0x00 nor 0x01."""
        return [i for i, b in enumerate(self.raw_steps) if b not in (STEP_OFF, STEP_ON)]

    def to_track(self) -> Track:
        return Track(id=self.id, name=decode_text(self.name_bytes), steps=self.steps)

    @classmethod
    def from_track(cls, track: Track) -> "TrackRecord":
        """
        Build a record from a Track.

        Raises:
            RangeError: If the name or id do not fit their fields
        """
        name_bytes = validate_track_name(track.name, cls.MAX_NAME_LENGTH)
        validate_track_id(track.id, cls.MAX_TRACK_ID)
        raw_steps = bytes(STEP_ON if step else STEP_OFF for step in track.steps)
        return cls(id=track.id, name_bytes=name_bytes, raw_steps=raw_steps)

    @classmethod
    def from_source(cls, source: ExactSource) -> Optional["TrackRecord"]:
        """
        Read the next record.

        Returns:
            The record, or None once the source (or its budget) is used up

        Raises:
            FormatError: TRUNCATED_TRACK if the record is cut off or the
                stream ends before the budget does
        """
        start = source.offset
        first = source.read_available(1)
        if not first:
            if isinstance(source, BoundedSource) and not source.exhausted:
                raise FormatError(
                    FormatErrorKind.TRUNCATED_TRACK,
                    f"header promised {source.remaining} more bytes of track data",
                    offset=start,
                )
            return None

        try:
            rest = source.read(cls.PREFIX.size - 1)
            track_id, name_length = cls.PREFIX.unpack(first + rest)
            name_bytes = source.read(name_length)
            raw_steps = source.read(cls.STEP_COUNT)
        except TruncatedRead as e:
            raise FormatError(
                FormatErrorKind.TRUNCATED_TRACK,
                f"track record starting at 0x{start:02X} is cut off: {e}",
                offset=e.offset + len(e.data),
            ) from e

        record = cls(id=track_id, name_bytes=name_bytes, raw_steps=raw_steps, offset=start)
        if record.non_canonical_steps:
            logger.debug(
                "Track %d has non-canonical step bytes at %s, decoded as off",
                track_id,
                record.non_canonical_steps,
            )
        return record

    def pack(self) -> bytes:
        """Serialize the record."""
        return (
            self.PREFIX.pack(self.id, len(self.name_bytes))
            + self.name_bytes
            + bytes(self.raw_steps)
        )
