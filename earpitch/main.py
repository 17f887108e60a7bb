from __future__ import annotations

"""CLI entry point for earpitch.

One-shot commands only; each prints its result and exits.
"""

import argparse
import math
import sys
from typing import Any, Dict, List, Optional

from . import __version__
from .config.config import load_config, validate_config
from .theory.errors import PitchError, RangeError
from .theory.notes import Note, NoteWithOctave
from .theory.scale import Scale
from .theory.scales import ScaleType
from .util.randomness import make_rng, random_note


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="earpitch", description="Note/frequency calculator")
    p.add_argument("--config", type=str, default=None, help="Path to YAML config")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    sub = p.add_subparsers(dest="command")

    freq = sub.add_parser("freq", help="Frequency of one or more notes (e.g. C4, A#3, Bb2)")
    freq.add_argument("notes", nargs="+")

    note = sub.add_parser("note", help="Nearest note to one or more frequencies in Hz")
    note.add_argument("frequencies", nargs="+", type=float)

    scale = sub.add_parser("scale", help="Degrees of a scale with their frequencies")
    scale.add_argument("root")
    scale.add_argument("scale_type", nargs="?", default=None, help="major|maj|minor|min")

    rnd = sub.add_parser("random", help="Pick random notes from the configured range")
    rnd.add_argument("--count", type=int, default=1)

    return p.parse_args(argv)


def _hz(value: float, precision: int) -> str:
    return f"{value:.{precision}f} Hz"


def _frequency_of(n: NoteWithOctave) -> float:
    freq = n.frequency()
    if not math.isfinite(freq):
        raise RangeError(f"Frequency of {n} is too large to represent")
    return freq


def _cmd_freq(args: argparse.Namespace, cfg: Dict[str, Any]) -> None:
    precision = cfg["display"]["precision"]
    for text in args.notes:
        n = NoteWithOctave.parse(text)
        print(f"{n} = {_hz(_frequency_of(n), precision)}")


def _cmd_note(args: argparse.Namespace, cfg: Dict[str, Any]) -> None:
    precision = cfg["display"]["precision"]
    for hz in args.frequencies:
        n = Note.from_frequency(hz)
        print(f"{_hz(hz, precision)} -> {n}")


def _cmd_scale(args: argparse.Namespace, cfg: Dict[str, Any]) -> None:
    precision = cfg["display"]["precision"]
    root = NoteWithOctave.parse(args.root)
    scale_type = ScaleType.parse(args.scale_type or cfg["scale"]["default_type"])
    scale = Scale(root, scale_type)
    degrees = [(n, _frequency_of(n)) for n in scale.notes()]
    print(scale)
    for n, freq in degrees:
        print(f"  {str(n):<4} {_hz(freq, precision)}")


def _cmd_random(args: argparse.Namespace, cfg: Dict[str, Any]) -> None:
    rnd = cfg["random"]
    precision = cfg["display"]["precision"]
    rng = make_rng()
    for _ in range(max(args.count, 0)):
        n = random_note(rng, rnd["min_octave"], rnd["max_octave"], rnd["allow_accidentals"])
        print(f"{n} = {_hz(_frequency_of(n), precision)}")


_COMMANDS = {
    "freq": _cmd_freq,
    "note": _cmd_note,
    "scale": _cmd_scale,
    "random": _cmd_random,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.version:
        print(f"earpitch {__version__}")
        return 0
    if args.command is None:
        print("ERROR: no command given (try --help)", file=sys.stderr)
        return 1

    cfg = validate_config(load_config(args.config))

    try:
        _COMMANDS[args.command](args, cfg)
    except PitchError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
