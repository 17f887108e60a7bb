from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .notes import NoteWithOctave
from .scales import ScaleType


@dataclass(frozen=True)
class Scale:
    """A concrete root + scale type (e.g., A4 minor).

    The degrees are derived on every call and never cached.
    """

    root: NoteWithOctave
    scale_type: ScaleType

    def __str__(self) -> str:
        return f"{self.root} {self.scale_type}"

    def notes(self) -> List[NoteWithOctave]:
        """Return the 7 degrees in ascending order, root first.

        Degrees that cross C land in the next octave, e.g. the third of
        B3 major is D#4.
        """
        return [self.root.transpose(interval) for interval in self.scale_type.intervals]

    def degree(self, deg: int) -> NoteWithOctave:
        """Return the note for a 1-based diatonic degree (1..7)."""
        intervals = self.scale_type.intervals
        if deg < 1 or deg > len(intervals):
            raise ValueError(f"degree must be 1..{len(intervals)}")
        return self.root.transpose(intervals[deg - 1])

    def frequencies(self) -> List[float]:
        return [n.frequency() for n in self.notes()]

    def transpose(self, new_root: NoteWithOctave) -> "Scale":
        return Scale(new_root, self.scale_type)
