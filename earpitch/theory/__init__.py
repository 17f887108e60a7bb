"""Pitch model: notes, frequencies and scales."""

from .errors import (  # noqa: F401
    InvalidFrequency,
    InvalidNote,
    InvalidOctave,
    InvalidScaleType,
    OutOfRange,
    ParseError,
    PitchError,
    RangeError,
)
from .notes import Note, NoteWithOctave, parse_note  # noqa: F401
from .scales import ScaleType, parse_scale_type  # noqa: F401
from .scale import Scale  # noqa: F401
