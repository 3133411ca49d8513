"""
Error types and field validation for SPLICE pattern data.
"""

import math
import struct
from enum import Enum
from typing import Optional

_FLOAT32 = struct.Struct("<f")


class FormatErrorKind(Enum):
    """Ways input bytes can fail to match the SPLICE layout."""

    MALFORMED_MAGIC = "malformed-magic"
    TRUNCATED_HEADER = "truncated-header"
    TRUNCATED_TRACK = "truncated-track"


class RangeErrorKind(Enum):
    """Ways a pattern value can fail to fit the fixed-width fields."""

    NAME_TOO_LONG = "name-too-long"
    PAYLOAD_TOO_LARGE = "payload-too-large"
    VERSION_TOO_LONG = "version-too-long"
    TEMPO_OUT_OF_RANGE = "tempo-out-of-range"
    TRACK_ID_OUT_OF_RANGE = "track-id-out-of-range"
    STEP_COUNT = "step-count"


class SpliceError(Exception):
    """Base class for all SPLICE codec errors."""

    pass


class FormatError(SpliceError, ValueError):
    """Raised when input bytes do not conform to the SPLICE layout."""

    def __init__(self, kind: FormatErrorKind, message: str, offset: Optional[int] = None):
        self.kind = kind
        self.offset = offset
        if offset is not None:
            message = f"{message} (at offset 0x{offset:02X})"
        super().__init__(f"{kind.value}: {message}")


class RangeError(SpliceError, ValueError):
    """Raised when a pattern value cannot be represented in the format."""

    def __init__(self, kind: RangeErrorKind, message: str):
        self.kind = kind
        super().__init__(f"{kind.value}: {message}")


def encode_text(value: str) -> bytes:
    """Encode version/name text the way it is stored on the wire."""
    return value.encode("utf-8")


def decode_text(data: bytes) -> str:
    """Decode wire text; invalid sequences become U+FFFD."""
    return data.decode("utf-8", errors="replace")


def validate_version(version: str, field_size: int = 32) -> bytes:
    """
    Validate a pattern version string.

    Args:
        version: Version text
        field_size: Width of the version field in bytes

    Returns:
        Encoded version bytes (unpadded)

    Raises:
        RangeError: If the encoded version does not fit the field
    """
    data = encode_text(version)
    if len(data) > field_size:
        raise RangeError(
            RangeErrorKind.VERSION_TOO_LONG,
            f"version must be at most {field_size} bytes, got {len(data)} ({version!r})",
        )
    return data


def validate_track_name(name: str, max_length: int = 255) -> bytes:
    """
    Validate a track name against the one-byte length field.

    Returns:
        Encoded name bytes

    Raises:
        RangeError: If the encoded name is longer than max_length
    """
    data = encode_text(name)
    if len(data) > max_length:
        raise RangeError(
            RangeErrorKind.NAME_TOO_LONG,
            f"track name must be at most {max_length} bytes, got {len(data)}",
        )
    return data


def validate_track_id(track_id: int, max_id: int = 0xFFFFFFFF) -> None:
    """
    Validate a track id (unsigned 32-bit).

    Raises:
        RangeError: If the id is not an integer, negative or too large
    """
    if not isinstance(track_id, int) or isinstance(track_id, bool):
        raise RangeError(
            RangeErrorKind.TRACK_ID_OUT_OF_RANGE,
            f"track id must be an integer, got {track_id!r}",
        )
    if not 0 <= track_id <= max_id:
        raise RangeError(
            RangeErrorKind.TRACK_ID_OUT_OF_RANGE,
            f"track id must be 0-{max_id}, got {track_id}",
        )


def float32(value: float) -> float:
    """Round a value to the nearest 32-bit float (OverflowError if too large)."""
    return _FLOAT32.unpack(_FLOAT32.pack(float(value)))[0]


def validate_tempo(tempo: float) -> float:
    """
    Round a tempo to the float32 value stored in the file.

    Raises:
        RangeError: If the magnitude is beyond float32 range
    """
    try:
        return float32(tempo)
    except OverflowError:
        raise RangeError(
            RangeErrorKind.TEMPO_OUT_OF_RANGE,
            f"tempo {tempo!r} cannot be stored as a 32-bit float",
        ) from None


def format_float32(value: float) -> str:
    """
    Format a float32 value with the fewest digits that read back exactly.

    Uses exponent notation below 1e-4 and from 1e6 up, like "%g".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    try:
        value = float32(value)
    except OverflowError:
        return f"{value:g}"

    for digits in range(1, 10):
        text = f"{value:.{digits - 1}e}"
        try:
            if float32(float(text)) == value:
                break
        except OverflowError:
            # rounded past float32 max
            continue

    exponent = int(text.split("e")[1])
    if -4 <= exponent < 6:
        return f"{value:.{max(digits - 1 - exponent, 0)}f}"
    return text


def validate_payload_size(size: int, max_size: int = 255) -> None:
    """
    Validate the header size field value.

    Raises:
        RangeError: If the payload does not fit the one-byte size field
    """
    if size > max_size:
        raise RangeError(
            RangeErrorKind.PAYLOAD_TOO_LARGE,
            f"version+tempo+tracks payload is {size} bytes, format limit is {max_size}",
        )


def validate_steps(steps, step_count: int = 16) -> tuple:
    """
    Normalize a step sequence to a tuple of booleans.

    Raises:
        RangeError: If the sequence does not have exactly step_count entries
    """
    normalized = tuple(bool(step) for step in steps)
    if len(normalized) != step_count:
        raise RangeError(
            RangeErrorKind.STEP_COUNT,
            f"track must have exactly {step_count} steps, got {len(normalized)}",
        )
    return normalized


def validate_splice_header(data: bytes) -> bool:
    """
    Check whether data starts with the SPLICE magic.

    Args:
        data: File data (at least 6 bytes)

    Returns:
        True if the magic is present
    """
    if len(data) < 6:
        return False

    return data[:6] == b"SPLICE"
