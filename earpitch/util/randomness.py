from __future__ import annotations

"""Randomness helpers for picking drill notes and seeding."""

import os
from typing import Optional

import numpy as np

from ..theory.notes import Note, NoteWithOctave


_NATURALS = [n for n in Note if not n.value.endswith("#")]


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a numpy Generator, seeded from the SEED env var if set."""
    if seed is None:
        env_seed = os.environ.get("SEED")
        if env_seed is not None:
            try:
                seed = int(env_seed)
            except ValueError:
                seed = None
    return np.random.default_rng(seed)


def random_note(
    rng: np.random.Generator,
    min_octave: int,
    max_octave: int,
    allow_accidentals: bool = True,
) -> NoteWithOctave:
    """Choose a note uniformly from octaves min_octave..max_octave (inclusive)."""
    if min_octave > max_octave:
        raise ValueError("min_octave must not exceed max_octave")
    pool = list(Note) if allow_accidentals else _NATURALS
    note = pool[int(rng.integers(len(pool)))]
    octave = int(rng.integers(min_octave, max_octave + 1))
    return NoteWithOctave(note=note, octave=octave)
