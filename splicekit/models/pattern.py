"""
Pattern data model - the top-level container for SPLICE pattern data.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from splicekit.models.track import Track
from splicekit.utils.validation import format_float32, validate_tempo


@dataclass
class Pattern:
    """
    Complete drum pattern.

    A Pattern is what a .splice file holds: the version string of the
    hardware that saved it, a tempo, and the instrument tracks in
    playback order.

    Attributes:
        version: Hardware/software version (at most 32 bytes encoded)
        tempo: Beats per minute, rounded to float32 as stored on the wire
        tracks: Tracks in file order
    """

    version: str = ""
    tempo: float = 120.0
    tracks: List[Track] = field(default_factory=list)

    def __post_init__(self):
        self.tempo = validate_tempo(self.tempo)

    def add_track(self, track: Track) -> None:
        """Append a track; order is preserved."""
        self.tracks.append(track)

    def get_track(self, track_id: int) -> Optional[Track]:
        """Get the first track with the given id."""
        for track in self.tracks:
            if track.id == track_id:
                return track
        return None

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    def __str__(self) -> str:
        lines = [
            f"Saved with HW Version: {self.version}",
            f"Tempo: {format_float32(self.tempo)}",
        ]
        for track in self.tracks:
            lines.append(f"({track.id}) {track.name}\t{track.step_string()}")
        return "\n".join(lines) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "version": self.version,
            "tempo": self.tempo,
            "tracks": [track.to_dict() for track in self.tracks],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pattern":
        """Build a Pattern from the to_dict() layout."""
        return cls(
            version=str(data.get("version", "")),
            tempo=float(data.get("tempo", 120.0)),
            tracks=[Track.from_dict(t) for t in data.get("tracks", [])],
        )
