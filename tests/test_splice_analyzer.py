"""Tests for the SPLICE analyzer."""

from splicekit import encode
from splicekit.analysis.splice_analyzer import SpliceAnalyzer
from splicekit.models.track import Track


class TestSpliceAnalyzer:
    """Test cases for lenient file analysis."""

    def test_reference_file(self, splice_file, pattern_1):
        """The reference file is valid with six tracks."""
        analysis = SpliceAnalyzer().analyze_file(splice_file)

        assert analysis.valid
        assert not analysis.warnings
        assert analysis.version == "0.808-alpha"
        assert analysis.tempo == 120.0
        assert analysis.size_field == 0xC5
        assert analysis.expected_filesize == 211
        assert analysis.pattern == pattern_1

    def test_track_offsets(self, splice_data):
        """Record offsets and sizes follow the header."""
        analysis = SpliceAnalyzer().analyze_bytes(splice_data)

        offsets = [t.offset for t in analysis.tracks]
        sizes = [t.size for t in analysis.tracks]

        assert offsets[0] == 50
        assert sizes == [25, 26, 25, 28, 29, 28]
        assert offsets[1] == 75
        assert sum(sizes) == analysis.track_bytes

    def test_regions_cover_file(self, splice_data):
        """Every byte of a valid file belongs to a region."""
        analysis = SpliceAnalyzer().analyze_bytes(splice_data)

        assert analysis.region_for_offset(0).name == "MAGIC"
        assert analysis.region_for_offset(13).name == "SIZE"
        assert analysis.region_for_offset(50).name == "TRK 0"
        assert all(analysis.region_for_offset(i) is not None for i in range(len(splice_data)))

    def test_bad_magic(self, splice_data):
        """Bad magic is an error, not an exception."""
        analysis = SpliceAnalyzer().analyze_bytes(b"XXXXXX" + splice_data[6:])

        assert not analysis.valid
        assert analysis.errors[0].area == "Header"
        assert "malformed-magic" in analysis.errors[0].message
        assert analysis.pattern is None

    def test_truncated_file(self, splice_data):
        """A short file reports the size mismatch and the cut record."""
        analysis = SpliceAnalyzer().analyze_bytes(splice_data[:100])

        assert not analysis.valid
        areas = [e.area for e in analysis.errors]
        assert "File Size" in areas
        assert "Tracks" in areas
        assert len(analysis.tracks) == 1

    def test_trailing_bytes_warning(self, splice_data):
        """Bytes after the track data are a warning."""
        analysis = SpliceAnalyzer().analyze_bytes(splice_data + bytes(4))

        assert analysis.valid
        assert analysis.trailing_bytes == 4
        assert analysis.region_for_offset(211).name == "TRAILING"
        assert any("ignored" in w.message for w in analysis.warnings)

    def test_non_canonical_steps_warning(self, splice_data):
        """Step bytes other than 0/1 are reported."""
        data = bytearray(splice_data)
        data[59] = 0x02

        analysis = SpliceAnalyzer().analyze_bytes(bytes(data))

        assert analysis.valid
        assert analysis.tracks[0].non_canonical_steps == [0]
        assert analysis.warnings[0].area == "Steps"
        assert analysis.warnings[0].offset == 59

    def test_reserved_bytes_warning(self, splice_data):
        """Non-zero reserved bytes are reported."""
        data = bytearray(splice_data)
        data[8] = 0x7F

        analysis = SpliceAnalyzer().analyze_bytes(bytes(data))

        assert analysis.valid
        assert analysis.warnings[0].area == "Reserved"

    def test_duplicate_ids_warning(self, pattern_1):
        """Duplicate track ids are reported once."""
        pattern_1.add_track(Track(id=0, name="kick2"))
        analysis = SpliceAnalyzer().analyze_bytes(encode(pattern_1))

        duplicates = [w for w in analysis.warnings if "used by" in w.message]
        assert len(duplicates) == 1
