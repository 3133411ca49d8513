"""
Byte sources for the SPLICE codec.

The codec never touches the file system itself. It reads from an object
with a ``read(n)`` method (an open binary file, ``io.BytesIO``) and needs
every read to return exactly ``n`` bytes. ``ExactSource`` adds that rule on
top of a plain stream and ``BoundedSource`` caps it at a fixed byte budget,
which is how the reader knows where the track section ends.
"""

import io
from typing import BinaryIO, Union

ByteInput = Union[bytes, bytearray, memoryview, BinaryIO]


class TruncatedRead(EOFError):
    """Raised when fewer bytes are available than requested."""

    def __init__(self, requested: int, data: bytes, offset: int):
        self.requested = requested
        self.data = data
        self.offset = offset
        super().__init__(
            f"wanted {requested} bytes at offset {offset}, only {len(data)} available"
        )


class ExactSource:
    """
    Wrap a binary stream so that reads are all-or-nothing.

    Tracks the absolute offset of the next byte so errors can point at
    where the data ran out.
    """

    def __init__(self, stream: BinaryIO, offset: int = 0):
        self._stream = stream
        self.offset = offset

    @classmethod
    def wrap(cls, source: Union[ByteInput, "ExactSource"]) -> "ExactSource":
        """Accept bytes-like data, a stream, or an existing source."""
        if isinstance(source, ExactSource):
            return source
        if isinstance(source, (bytes, bytearray, memoryview)):
            return cls(io.BytesIO(bytes(source)))
        return cls(source)

    def _read_raw(self, n: int) -> bytes:
        # Streams may return short reads before EOF, keep asking until they stop.
        chunks = []
        remaining = n
        while remaining > 0:
            chunk = self._stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def read_available(self, n: int) -> bytes:
        """Read up to n bytes without failing on a short read."""
        data = self._read_raw(n)
        self.offset += len(data)
        return data

    def read(self, n: int) -> bytes:
        """
        Read exactly n bytes.

        Raises:
            TruncatedRead: If the stream ends first
        """
        start = self.offset
        data = self.read_available(n)
        if len(data) < n:
            raise TruncatedRead(n, data, start)
        return data


class BoundedSource(ExactSource):
    """
    A source that yields at most ``limit`` bytes of an underlying source.

    Reading past the limit is a truncation, exactly like reading past the
    end of the stream.
    """

    def __init__(self, parent: ExactSource, limit: int):
        super().__init__(parent._stream, parent.offset)
        self._parent = parent
        self.remaining = limit

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    def read_available(self, n: int) -> bytes:
        allowed = min(n, max(self.remaining, 0))
        data = self._parent.read_available(allowed)
        self.remaining -= len(data)
        self.offset = self._parent.offset
        return data
