from __future__ import annotations

"""Scale types and their interval tables for 12-TET.

Intervals are semitone offsets from the tonic, ascending, starting at 0.
"""

from enum import Enum
from typing import Dict, Tuple

from .errors import InvalidScaleType


class ScaleType(Enum):
    MAJOR = "Major"
    MINOR = "Minor"

    def __str__(self) -> str:
        return self.value

    @property
    def intervals(self) -> Tuple[int, ...]:
        """Semitone offsets of the 7 diatonic degrees."""
        return SCALE_INTERVALS[self]

    @staticmethod
    def parse(text: str) -> "ScaleType":
        """Parse ``major``/``maj``/``minor``/``min`` (exact, lowercase)."""
        scale_type = _ALIASES.get(text)
        if scale_type is None:
            raise InvalidScaleType(text)
        return scale_type


SCALE_INTERVALS: Dict[ScaleType, Tuple[int, ...]] = {
    ScaleType.MAJOR: (0, 2, 4, 5, 7, 9, 11),
    # natural minor
    ScaleType.MINOR: (0, 2, 3, 5, 7, 8, 10),
}

_ALIASES: Dict[str, ScaleType] = {
    "major": ScaleType.MAJOR,
    "maj": ScaleType.MAJOR,
    "minor": ScaleType.MINOR,
    "min": ScaleType.MINOR,
}

SCALE_TYPE_NAMES = tuple(_ALIASES)


def parse_scale_type(text: str) -> ScaleType:
    return ScaleType.parse(text)
