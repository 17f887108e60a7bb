from __future__ import annotations

"""Pitch classes, octave-qualified notes and 12-TET frequency conversion.

A4 = 440 Hz is the reference pitch. Octaves follow scientific pitch notation,
so the octave number changes between B and the following C (B3 -> C4).

Two semitone index spaces live here and are kept apart on purpose:

* ``_A_RELATIVE`` (0 = A ... 11 = G#) is only used when mapping a frequency
  back to a pitch class.
* ``_C_RELATIVE`` (0 = C ... 11 = B) is the canonical pitch-class order used
  for semitone arithmetic and scale generation.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .errors import InvalidFrequency, InvalidNote, InvalidOctave, OutOfRange


REFERENCE_FREQUENCY = 440.0  # A4
REFERENCE_OCTAVE = 4
DEFAULT_OCTAVE = 4
MIN_OCTAVE = 0
MAX_OCTAVE = 10

_ASCII_DIGITS = "0123456789"


class Note(Enum):
    """The 12 equal-tempered pitch classes, spelled with sharps."""

    C = "C"
    C_SHARP = "C#"
    D = "D"
    D_SHARP = "D#"
    E = "E"
    F = "F"
    F_SHARP = "F#"
    G = "G"
    G_SHARP = "G#"
    A = "A"
    A_SHARP = "A#"
    B = "B"

    def __str__(self) -> str:
        return self.value

    def to_frequency(self, octave: int) -> float:
        """Return the frequency in Hz of this pitch class in ``octave``.

        No range check is made: any integer octave yields a frequency.
        Octaves too high for a float give ``math.inf``.
        """
        semitones = (octave - REFERENCE_OCTAVE) * 12 + _OFFSET_FROM_A[self]
        try:
            return REFERENCE_FREQUENCY * 2.0 ** (semitones / 12.0)
        except OverflowError:
            return math.inf

    @staticmethod
    def from_frequency(frequency: float) -> "NoteWithOctave":
        """Return the nearest note to ``frequency``.

        Raises:
            InvalidFrequency: frequency is not a positive finite number.
            OutOfRange: the nearest note lies outside octaves 0..10.
        """
        if not math.isfinite(frequency) or frequency <= 0:
            raise InvalidFrequency(frequency)
        semitones = 12.0 * math.log2(frequency / REFERENCE_FREQUENCY)
        rounded = _round_half_away_from_zero(semitones)

        # Octaves change between B and C, not at A; A sits 9 semitones above C
        octave = REFERENCE_OCTAVE + (rounded + 9) // 12
        if octave < MIN_OCTAVE or octave > MAX_OCTAVE:
            raise OutOfRange(octave)

        note = _A_RELATIVE[rounded % 12]
        return NoteWithOctave(note=note, octave=octave)

    def to_semitone(self) -> int:
        """Pitch class index with C = 0 ... B = 11."""
        return _C_RELATIVE.index(self)

    @staticmethod
    def from_semitone(semitone: int) -> "Note":
        """Inverse of ``to_semitone``; the index is taken modulo 12."""
        return _C_RELATIVE[semitone % 12]

    @staticmethod
    def parse(token: str) -> "Note":
        """Parse a note name such as ``C``, ``F#`` or ``Bb`` (case-sensitive)."""
        note = _SPELLINGS.get(token)
        if note is None:
            raise InvalidNote(token)
        return note


# Signed distance from A within the same octave number.
_OFFSET_FROM_A: Dict[Note, int] = {
    Note.C: -9,
    Note.C_SHARP: -8,
    Note.D: -7,
    Note.D_SHARP: -6,
    Note.E: -5,
    Note.F: -4,
    Note.F_SHARP: -3,
    Note.G: -2,
    Note.G_SHARP: -1,
    Note.A: 0,
    Note.A_SHARP: 1,
    Note.B: 2,
}

_A_RELATIVE: Tuple[Note, ...] = (
    Note.A,
    Note.A_SHARP,
    Note.B,
    Note.C,
    Note.C_SHARP,
    Note.D,
    Note.D_SHARP,
    Note.E,
    Note.F,
    Note.F_SHARP,
    Note.G,
    Note.G_SHARP,
)

_C_RELATIVE: Tuple[Note, ...] = (
    Note.C,
    Note.C_SHARP,
    Note.D,
    Note.D_SHARP,
    Note.E,
    Note.F,
    Note.F_SHARP,
    Note.G,
    Note.G_SHARP,
    Note.A,
    Note.A_SHARP,
    Note.B,
)

_SPELLINGS: Dict[str, Note] = {
    # naturals
    "C": Note.C,
    "D": Note.D,
    "E": Note.E,
    "F": Note.F,
    "G": Note.G,
    "A": Note.A,
    "B": Note.B,
    # sharps
    "C#": Note.C_SHARP,
    "D#": Note.D_SHARP,
    "F#": Note.F_SHARP,
    "G#": Note.G_SHARP,
    "A#": Note.A_SHARP,
    # flats, resolved to the sharp spelling
    "Db": Note.C_SHARP,
    "Eb": Note.D_SHARP,
    "Gb": Note.F_SHARP,
    "Ab": Note.G_SHARP,
    "Bb": Note.A_SHARP,
}


def _round_half_away_from_zero(value: float) -> int:
    # round() is half-to-even; compare the fraction instead of adding 0.5
    magnitude = abs(value)
    whole = int(math.floor(magnitude))
    if magnitude - whole >= 0.5:
        whole += 1
    return whole if value >= 0 else -whole


@dataclass(frozen=True)
class NoteWithOctave:
    """A pitch class in a concrete octave, e.g. A#3."""

    note: Note
    octave: int

    def __str__(self) -> str:
        return f"{self.note}{self.octave}"

    def frequency(self) -> float:
        return self.note.to_frequency(self.octave)

    def midi(self) -> int:
        """MIDI note number, C4 = 60."""
        return (self.octave + 1) * 12 + self.note.to_semitone()

    def transpose(self, semitones: int) -> "NoteWithOctave":
        """Shift by a signed number of semitones, rolling the octave at C."""
        total = self.octave * 12 + self.note.to_semitone() + semitones
        return NoteWithOctave(note=Note.from_semitone(total), octave=total // 12)

    @staticmethod
    def parse(text: str) -> "NoteWithOctave":
        """Parse ``C4``, ``A#3``, ``Bb2`` or a bare ``C`` (octave 4).

        The text is split at its first ASCII digit: the part before is the
        note name, the rest must be a non-negative integer octave.

        Raises:
            InvalidNote: the note name is not one of the 17 known spellings.
            InvalidOctave: the octave part is not made of digits only.
        """
        split = next((i for i, ch in enumerate(text) if ch in _ASCII_DIGITS), None)
        if split is None:
            return NoteWithOctave(note=Note.parse(text), octave=DEFAULT_OCTAVE)

        note_token, octave_token = text[:split], text[split:]
        note = Note.parse(note_token)
        if not all(ch in _ASCII_DIGITS for ch in octave_token):
            raise InvalidOctave(octave_token)
        return NoteWithOctave(note=note, octave=int(octave_token))


def parse_note(text: str) -> NoteWithOctave:
    """Module-level alias for ``NoteWithOctave.parse``."""
    return NoteWithOctave.parse(text)
