"""
Track data model for SPLICE patterns.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from splicekit.utils.validation import validate_steps

STEP_COUNT = 16


def _silent_steps() -> Tuple[bool, ...]:
    return (False,) * STEP_COUNT


@dataclass
class Track:
    """
    A single instrument lane within a pattern.

    Attributes:
        id: Track identifier (unsigned 32-bit on the wire)
        name: Instrument name (at most 255 bytes encoded)
        steps: Exactly 16 on/off flags, step 0 first
    """

    id: int = 0
    name: str = ""
    steps: Tuple[bool, ...] = field(default_factory=_silent_steps)

    def __post_init__(self):
        """Normalize steps to a 16-tuple of bools."""
        self.steps = validate_steps(self.steps, STEP_COUNT)

    @property
    def active_steps(self) -> List[int]:
        """Indices of the steps that sound."""
        return [i for i, step in enumerate(self.steps) if step]

    @property
    def is_silent(self) -> bool:
        """Check if no step is on."""
        return not any(self.steps)

    def step_string(self, on: str = "x", off: str = "-") -> str:
        """
        Render steps in four bars of four.

        Returns:
            String like "|x---|x---|x---|x---|"
        """
        out = "|"
        for i, step in enumerate(self.steps):
            out += on if step else off
            if (i + 1) % 4 == 0:
                out += "|"
        return out

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "steps": [int(s) for s in self.steps]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Track":
        return cls(
            id=int(data.get("id", 0)),
            name=str(data.get("name", "")),
            steps=tuple(bool(s) for s in data.get("steps", _silent_steps())),
        )

    @classmethod
    def from_string(cls, track_id: int, name: str, grid: str) -> "Track":
        """
        Build a track from a step grid such as "x---|x---|x---|x---".

        Bar separators and whitespace are ignored; "x" or "X" is on.
        """
        cells = [c for c in grid if c not in "| "]
        return cls(id=track_id, name=name, steps=tuple(c in "xX" for c in cells))
