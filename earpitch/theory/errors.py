from __future__ import annotations

"""Exceptions raised by the pitch model.

All of them derive from ValueError so callers that already guard theory
helpers with ``except ValueError`` keep working.
"""


class PitchError(ValueError):
    """Base class for every pitch-model failure."""


class ParseError(PitchError):
    """Text could not be turned into a note, octave or scale type."""

    def __init__(self, token: str, message: str) -> None:
        super().__init__(message)
        self.token = token


class InvalidNote(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(token, f"Invalid note: {token!r}")


class InvalidOctave(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(token, f"Invalid octave: {token!r}")


class InvalidScaleType(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(token, f"Invalid scale type: {token!r}")


class RangeError(PitchError):
    """A frequency cannot be mapped back to a note."""


class InvalidFrequency(RangeError):
    def __init__(self, frequency: float) -> None:
        super().__init__(f"Frequency must be positive, got {frequency}")
        self.frequency = frequency


class OutOfRange(RangeError):
    def __init__(self, octave: int) -> None:
        super().__init__(f"Octave {octave} is out of reasonable range (0-10)")
        self.octave = octave
