"""
SPLICE file analyzer.

Walks a .splice file without giving up at the first problem and collects:
- Header fields and the raw size bookkeeping
- The offset and size of every track record
- Byte regions for annotated hex dumps
- Validation issues (errors, warnings and info)

The strict codec lives in splicekit.formats.splice; this module reuses its
header and record parsers and turns their FormatErrors into issues.
"""

import io
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from splicekit.formats.splice.header import SpliceHeader
from splicekit.formats.splice.reader import SpliceReader
from splicekit.formats.splice.stream import BoundedSource, ExactSource
from splicekit.formats.splice.track_record import TrackRecord
from splicekit.models.pattern import Pattern
from splicekit.utils.validation import FormatError

logger = logging.getLogger(__name__)


@dataclass
class Region:
    """A named byte range of the file."""

    start: int
    end: int
    name: str
    description: str
    color: str = "white"

    @property
    def size(self) -> int:
        return self.end - self.start


@dataclass
class TrackInfo:
    """Layout information for one decoded track record."""

    index: int
    id: int
    name: str
    offset: int
    size: int
    steps: Tuple[bool, ...]
    raw_steps: bytes
    non_canonical_steps: List[int] = field(default_factory=list)

    @property
    def active_count(self) -> int:
        return sum(self.steps)


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str
    expected: str = ""
    actual: str = ""


@dataclass
class SpliceAnalysis:
    """Complete SPLICE file analysis result."""

    filepath: str
    filesize: int
    valid: bool = False

    # Header
    version: str = ""
    tempo: float = 0.0
    size_field: Optional[int] = None
    reserved: bytes = b""

    # Tracks
    tracks: List[TrackInfo] = field(default_factory=list)
    trailing_bytes: int = 0

    regions: List[Region] = field(default_factory=list)
    issues: List[ValidationIssue] = field(default_factory=list)
    pattern: Optional[Pattern] = None

    @property
    def track_bytes(self) -> Optional[int]:
        if self.size_field is None:
            return None
        return self.size_field - SpliceHeader.PAYLOAD_OVERHEAD

    @property
    def expected_filesize(self) -> Optional[int]:
        if self.size_field is None:
            return None
        return SpliceHeader.MAGIC_FIELD_SIZE + 1 + self.size_field

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def info(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == "info"]

    def region_for_offset(self, offset: int) -> Optional[Region]:
        for region in self.regions:
            if region.start <= offset < region.end:
                return region
        return None


# Fixed header regions: start, end, name, description, color
HEADER_REGIONS: List[Tuple[int, int, str, str, str]] = [
    (0x00, 0x06, "MAGIC", 'File magic "SPLICE"', "bright_blue"),
    (0x06, 0x0D, "RESERVED", "Reserved (zero)", "dim"),
    (0x0D, 0x0E, "SIZE", "Size of version+tempo+tracks", "cyan"),
    (0x0E, 0x2E, "VERSION", "Version string (zero padded)", "green"),
    (0x2E, 0x32, "TEMPO", "Tempo (float32 LE)", "yellow"),
]

TRACK_COLORS = ["magenta", "blue", "red", "cyan", "green", "yellow"]


class SpliceAnalyzer:
    """
    Analyze SPLICE files.

    Example:
        analysis = SpliceAnalyzer().analyze_file("pattern_1.splice")
        for issue in analysis.errors:
            print(issue.message)
    """

    def __init__(self):
        self.data: bytes = b""
        self._issues: List[ValidationIssue] = []

    def analyze_file(self, filepath: Union[str, Path]) -> SpliceAnalysis:
        """Analyze the file at filepath."""
        with open(filepath, "rb") as f:
            data = f.read()
        return self.analyze_bytes(data, str(filepath))

    def analyze_bytes(self, data: bytes, filepath: str = "<bytes>") -> SpliceAnalysis:
        """
        Analyze SPLICE data.

        Never raises FormatError; problems end up in analysis.issues.
        """
        self.data = data
        self._issues = []

        analysis = SpliceAnalysis(filepath=filepath, filesize=len(data))
        analysis.regions = self._header_regions()

        header = self._analyze_header(analysis)
        if header is not None:
            self._analyze_tracks(analysis, header)
            self._check_trailing(analysis)
            self._check_duplicate_ids(analysis)
            if not any(i.severity == "error" for i in self._issues):
                analysis.pattern = SpliceReader().parse_bytes(self.data)

        analysis.issues = self._issues
        analysis.valid = not analysis.errors
        logger.debug(
            "Analyzed %s: %d errors, %d warnings",
            filepath,
            len(analysis.errors),
            len(analysis.warnings),
        )
        return analysis

    def _add_issue(
        self,
        severity: str,
        area: str,
        offset: int,
        message: str,
        expected: str = "",
        actual: str = "",
    ) -> None:
        """Add a validation issue."""
        self._issues.append(
            ValidationIssue(
                severity=severity,
                area=area,
                offset=offset,
                message=message,
                expected=expected,
                actual=actual,
            )
        )

    def _header_regions(self) -> List[Region]:
        end = min(len(self.data), SpliceHeader.HEADER_SIZE)
        regions = []
        for start, stop, name, desc, color in HEADER_REGIONS:
            if start >= end:
                break
            regions.append(Region(start, min(stop, end), name, desc, color))
        return regions

    def _analyze_header(self, analysis: SpliceAnalysis) -> Optional[SpliceHeader]:
        size_offset = SpliceHeader.OFFSETS["size"]
        if len(self.data) > size_offset:
            analysis.size_field = self.data[size_offset]

        try:
            header = SpliceHeader.unpack(self.data)
        except FormatError as e:
            self._add_issue("error", "Header", e.offset or 0, str(e))
            return None

        self._add_issue("info", "Header", 0, "Header magic is valid")

        analysis.version = header.version
        analysis.tempo = header.tempo
        analysis.reserved = header.reserved

        if any(header.reserved):
            self._add_issue(
                "warning",
                "Reserved",
                SpliceHeader.OFFSETS["reserved"],
                "Reserved header bytes are not zero (ignored on decode)",
                "00 " * 6 + "00",
                header.reserved.hex(" ").upper(),
            )

        expected = analysis.expected_filesize
        if len(self.data) < expected:
            self._add_issue(
                "error",
                "File Size",
                len(self.data),
                "File is shorter than the size field declares",
                f"{expected} bytes",
                f"{len(self.data)} bytes",
            )
        else:
            self._add_issue(
                "info",
                "File Size",
                size_offset,
                f"Size field {header.size} covers {header.track_bytes} bytes of track data",
            )

        return header

    def _analyze_tracks(self, analysis: SpliceAnalysis, header: SpliceHeader) -> None:
        source = ExactSource(io.BytesIO(self.data[SpliceHeader.HEADER_SIZE :]))
        source.offset = SpliceHeader.HEADER_SIZE
        bounded = BoundedSource(source, header.track_bytes)

        records = []
        while True:
            try:
                record = TrackRecord.from_source(bounded)
            except FormatError as e:
                self._add_issue("error", "Tracks", e.offset or 0, str(e))
                break
            if record is None:
                break

            index = len(records)
            records.append(record)
            info = TrackInfo(
                index=index,
                id=record.id,
                name=record.to_track().name,
                offset=record.offset,
                size=record.byte_size,
                steps=record.steps,
                raw_steps=record.raw_steps,
                non_canonical_steps=record.non_canonical_steps,
            )
            analysis.tracks.append(info)
            analysis.regions.append(
                Region(
                    record.offset,
                    record.offset + record.byte_size,
                    f"TRK {index}",
                    f"Track {record.id} ({info.name})",
                    TRACK_COLORS[index % len(TRACK_COLORS)],
                )
            )

            if info.non_canonical_steps:
                steps_offset = record.offset + record.byte_size - TrackRecord.STEP_COUNT
                self._add_issue(
                    "warning",
                    "Steps",
                    steps_offset + info.non_canonical_steps[0],
                    f"Track {record.id}: step bytes other than 0x00/0x01 "
                    f"at steps {info.non_canonical_steps} (read as off)",
                    "0x00 or 0x01",
                    " ".join(f"0x{record.raw_steps[i]:02X}" for i in info.non_canonical_steps),
                )

        if records:
            self._add_issue("info", "Tracks", SpliceHeader.HEADER_SIZE, f"{len(records)} tracks")

    def _check_trailing(self, analysis: SpliceAnalysis) -> None:
        end = analysis.expected_filesize
        if len(self.data) > end:
            analysis.trailing_bytes = len(self.data) - end
            analysis.regions.append(
                Region(end, len(self.data), "TRAILING", "Ignored bytes after track data", "dim")
            )
            self._add_issue(
                "warning",
                "File Size",
                end,
                f"{analysis.trailing_bytes} bytes after the track data are ignored",
                f"{end} bytes",
                f"{len(self.data)} bytes",
            )

    def _check_duplicate_ids(self, analysis: SpliceAnalysis) -> None:
        counts = Counter(t.id for t in analysis.tracks)
        for track in analysis.tracks:
            if counts[track.id] > 1:
                self._add_issue(
                    "warning",
                    "Tracks",
                    track.offset,
                    f"Track id {track.id} is used by {counts[track.id]} tracks",
                )
                counts[track.id] = 0

