"""Tests for whole-file SPLICE decoding and encoding."""

import io

import pytest

from splicekit import decode, decode_file, encode, encode_to_file
from splicekit.formats.splice.reader import SpliceReader
from splicekit.formats.splice.writer import SpliceWriter
from splicekit.models.pattern import Pattern
from splicekit.models.track import Track
from splicekit.utils.validation import FormatError, FormatErrorKind, RangeError, RangeErrorKind

KICK_STEPS = (True, False, False, False) * 4


def kick_pattern():
    pattern = Pattern(version="0.808-alpha", tempo=120.0)
    pattern.add_track(Track(id=0, name="kick", steps=KICK_STEPS))
    return pattern


class TestGoldenBytes:
    """Test cases against known byte layouts."""

    def test_encode_reference_file(self, pattern_1, splice_data):
        """Encoding the reference pattern matches pattern_1.splice exactly."""
        assert encode(pattern_1) == splice_data

    def test_decode_reference_file(self, pattern_1, splice_file):
        """Decoding pattern_1.splice yields the reference pattern."""
        assert decode_file(splice_file) == pattern_1

    def test_single_kick_track(self):
        """Test the one-track kick layout byte for byte."""
        expected = (
            b"SPLICE"
            + bytes(7)
            + bytes([36 + 25])
            + b"0.808-alpha"
            + bytes(21)
            + bytes.fromhex("0000f042")
            + bytes.fromhex("00000000" "04" "6b69636b" + "01000000" * 4)
        )
        assert encode(kick_pattern()) == expected

    def test_empty_pattern(self):
        """A pattern with no tracks is just the header."""
        data = encode(Pattern(version="", tempo=0.0))

        assert len(data) == 50
        assert data[13] == 36
        assert decode(data) == Pattern(version="", tempo=0.0)


class TestRoundTrip:
    """Test cases for decode(encode(p)) == p."""

    @pytest.mark.parametrize(
        "pattern",
        [
            Pattern(version="0.808-alpha", tempo=120.0),
            Pattern(version="v" * 32, tempo=98.5),
            Pattern(version="0.808-alpha", tempo=98.4),
            Pattern(version="0.708-alpha", tempo=1234.567),
            Pattern(version="", tempo=-12.25, tracks=[Track(id=2**32 - 1, name="")]),
            Pattern(
                version="0.909",
                tempo=240.0,
                tracks=[
                    Track(id=7, name="ハイハット", steps=[1, 0] * 8),
                    Track(id=7, name="dup-id", steps=[0, 1] * 8),
                    Track(id=3, name="all", steps=[1] * 16),
                ],
            ),
        ],
    )
    def test_roundtrip(self, pattern):
        """Test that encode followed by decode returns the original pattern."""
        assert decode(encode(pattern)) == pattern

    def test_roundtrip_reference(self, splice_data):
        """Decode then encode reproduces the reference file."""
        assert encode(decode(splice_data)) == splice_data

    def test_track_order_preserved(self, pattern_1):
        """Tracks come back in file order."""
        decoded = decode(encode(pattern_1))
        assert [t.name for t in decoded.tracks] == [
            "kick",
            "snare",
            "clap",
            "hh-open",
            "hh-close",
            "cowbell",
        ]


class TestDecodeErrors:
    """Test cases for malformed input."""

    @pytest.mark.parametrize("prefix", [b"splice", b"SPLICF", b"\x00" * 6, b"RIFF\x00\x00"])
    def test_malformed_magic(self, splice_data, prefix):
        """Wrong magic fails regardless of the rest of the file."""
        with pytest.raises(FormatError) as exc_info:
            decode(prefix + splice_data[6:])

        assert exc_info.value.kind is FormatErrorKind.MALFORMED_MAGIC

    @pytest.mark.parametrize("length", [0, 6, 14, 49])
    def test_truncated_header(self, splice_data, length):
        """Files shorter than the header fail with truncated-header."""
        with pytest.raises(FormatError) as exc_info:
            decode(splice_data[:length])

        assert exc_info.value.kind is FormatErrorKind.TRUNCATED_HEADER

    @pytest.mark.parametrize("length", [50, 51, 60, 75, 210])
    def test_truncated_track(self, splice_data, length):
        """Files shorter than the size field declares fail with truncated-track."""
        with pytest.raises(FormatError) as exc_info:
            decode(splice_data[:length])

        assert exc_info.value.kind is FormatErrorKind.TRUNCATED_TRACK

    def test_budget_inside_record(self, splice_data):
        """A size field that ends inside a record fails."""
        data = bytearray(splice_data)
        data[13] = 36 + 25 + 5

        with pytest.raises(FormatError) as exc_info:
            decode(bytes(data))

        assert exc_info.value.kind is FormatErrorKind.TRUNCATED_TRACK

    def test_size_underflow(self, splice_data):
        """Size field below 36 is a header error."""
        data = bytearray(splice_data)
        data[13] = 20

        with pytest.raises(FormatError) as exc_info:
            decode(bytes(data))

        assert exc_info.value.kind is FormatErrorKind.TRUNCATED_HEADER


class TestByteBudget:
    """Test cases for the size-field track boundary."""

    def test_smaller_budget_stops_early(self, splice_data):
        """Only the tracks covered by the size field are read."""
        data = bytearray(splice_data)
        data[13] = 36 + 25

        pattern = decode(bytes(data))

        assert [t.name for t in pattern.tracks] == ["kick"]

    def test_zero_budget(self, splice_data):
        """Size 36 means no tracks at all."""
        data = bytearray(splice_data)
        data[13] = 36

        assert decode(bytes(data)).tracks == []

    def test_trailing_bytes_ignored(self, splice_data, pattern_1):
        """Bytes after the budget are not decoded."""
        reader = SpliceReader()
        pattern = reader.parse_bytes(splice_data + b"garbage")

        assert pattern == pattern_1
        assert reader.trailing_bytes == 7

    def test_stream_left_after_track_data(self, splice_data):
        """Decoding from a stream stops reading at the end of the budget."""
        stream = io.BytesIO(splice_data + b"next")
        decode(stream)

        assert stream.tell() == len(splice_data)
        assert stream.read() == b"next"

    def test_lenient_step_decode(self, splice_data):
        """A 0x02 step byte decodes as off."""
        data = bytearray(splice_data)
        assert data[59] == 0x01  # kick step 1
        data[59] = 0x02

        pattern = decode(bytes(data))

        assert pattern.tracks[0].steps[0] is False
        assert pattern.tracks[0].steps[4] is True


class TestEncodeErrors:
    """Test cases for patterns that do not fit the format."""

    def test_payload_at_ceiling(self):
        """36 + 219 track bytes is exactly 255 and encodes."""
        pattern = Pattern(version="v", tempo=1.0, tracks=[Track(id=0, name="n" * 198)])
        data = encode(pattern)

        assert data[13] == 255
        assert decode(data) == pattern

    def test_payload_over_ceiling(self):
        """One byte over 255 is a range error."""
        pattern = Pattern(version="v", tempo=1.0, tracks=[Track(id=0, name="n" * 199)])

        with pytest.raises(RangeError) as exc_info:
            encode(pattern)

        assert exc_info.value.kind is RangeErrorKind.PAYLOAD_TOO_LARGE

    def test_name_too_long(self):
        """Name over 255 bytes is reported before the payload check."""
        pattern = Pattern(tracks=[Track(id=0, name="n" * 300)])

        with pytest.raises(RangeError) as exc_info:
            encode(pattern)

        assert exc_info.value.kind is RangeErrorKind.NAME_TOO_LONG

    def test_many_tracks_over_ceiling(self, pattern_1):
        """Adding tracks past the ceiling fails."""
        for i in range(3):
            pattern_1.add_track(Track(id=10 + i, name="extra"))

        with pytest.raises(RangeError):
            encode(pattern_1)

    def test_failed_write_leaves_no_file(self, tmp_path):
        """A range error never produces a partial file."""
        target = tmp_path / "bad.splice"
        pattern = Pattern(version="v" * 40)

        with pytest.raises(RangeError):
            encode_to_file(target, pattern)

        assert not target.exists()


class TestFileHelpers:
    """Test cases for reader/writer file entry points."""

    def test_write_and_read(self, tmp_path, pattern_1):
        """Test writing a file and reading it back."""
        target = tmp_path / "sub" / "out.splice"
        SpliceWriter.write(pattern_1, target)

        assert SpliceReader.read(target) == pattern_1

    def test_read_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            SpliceReader.read(tmp_path / "missing.splice")

    def test_can_read(self, splice_file, tmp_path):
        """can_read checks the magic only."""
        other = tmp_path / "other.bin"
        other.write_bytes(b"RIFF....")

        assert SpliceReader.can_read(splice_file)
        assert not SpliceReader.can_read(other)
        assert not SpliceReader.can_read(tmp_path / "missing.splice")

    def test_get_file_info(self, splice_file):
        """Test quick file info."""
        info = SpliceReader.get_file_info(splice_file)

        assert info["valid"] is True
        assert info["size"] == 211
        assert info["size_field"] == 0xC5
        assert info["expected_size"] == 211
