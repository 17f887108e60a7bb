"""earpitch: note/frequency arithmetic and scales for ear-training tools."""

from __future__ import annotations

__version__ = "0.1.0"

from .theory import (  # noqa: F401
    InvalidFrequency,
    InvalidNote,
    InvalidOctave,
    InvalidScaleType,
    Note,
    NoteWithOctave,
    OutOfRange,
    ParseError,
    PitchError,
    RangeError,
    Scale,
    ScaleType,
    parse_note,
    parse_scale_type,
)

__all__ = [
    "__version__",
    "Note",
    "NoteWithOctave",
    "Scale",
    "ScaleType",
    "parse_note",
    "parse_scale_type",
    "PitchError",
    "ParseError",
    "RangeError",
    "InvalidNote",
    "InvalidOctave",
    "InvalidScaleType",
    "InvalidFrequency",
    "OutOfRange",
]
