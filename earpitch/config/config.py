from __future__ import annotations

"""Configuration loading and validation for earpitch.

This module loads YAML configuration, applies defaults, and validates
values used by the CLI.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import sys

import yaml

from ..theory.notes import MAX_OCTAVE, MIN_OCTAVE
from ..theory.scales import SCALE_TYPE_NAMES


DEFAULT_PRECISION = 2
DEFAULT_SCALE_TYPE = "major"
DEFAULT_MIN_OCTAVE = 3
DEFAULT_MAX_OCTAVE = 5


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"ERROR: Could not parse config file {path}: {e}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"ERROR: Config file {path} must contain a mapping", file=sys.stderr)
        sys.exit(1)
    return data


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def _valid_octave(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and MIN_OCTAVE <= value <= MAX_OCTAVE


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Unsupported values are reported with a warning and replaced by their
    default; nothing here is fatal.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    # Shallow defaults for missing sections
    for section in ("display", "scale", "random"):
        if not isinstance(cfg.get(section), dict):
            cfg[section] = {}

    display = cfg["display"]
    scale = cfg["scale"]
    rnd = cfg["random"]

    display.setdefault("precision", DEFAULT_PRECISION)
    scale.setdefault("default_type", DEFAULT_SCALE_TYPE)
    rnd.setdefault("min_octave", DEFAULT_MIN_OCTAVE)
    rnd.setdefault("max_octave", DEFAULT_MAX_OCTAVE)
    rnd.setdefault("allow_accidentals", True)

    precision = display.get("precision")
    if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0:
        print(f"WARNING: Invalid display precision '{precision}', using {DEFAULT_PRECISION}.")
        display["precision"] = DEFAULT_PRECISION

    scale_type = scale.get("default_type")
    if scale_type not in SCALE_TYPE_NAMES:
        print(f"WARNING: Unsupported scale type '{scale_type}', using '{DEFAULT_SCALE_TYPE}'.")
        scale["default_type"] = DEFAULT_SCALE_TYPE

    if not _valid_octave(rnd.get("min_octave")):
        print(f"WARNING: Invalid random.min_octave '{rnd.get('min_octave')}', using {DEFAULT_MIN_OCTAVE}.")
        rnd["min_octave"] = DEFAULT_MIN_OCTAVE
    if not _valid_octave(rnd.get("max_octave")):
        print(f"WARNING: Invalid random.max_octave '{rnd.get('max_octave')}', using {DEFAULT_MAX_OCTAVE}.")
        rnd["max_octave"] = DEFAULT_MAX_OCTAVE
    if rnd["min_octave"] > rnd["max_octave"]:
        rnd["min_octave"], rnd["max_octave"] = rnd["max_octave"], rnd["min_octave"]

    if not isinstance(rnd.get("allow_accidentals"), bool):
        print(f"WARNING: Invalid random.allow_accidentals '{rnd.get('allow_accidentals')}', using True.")
        rnd["allow_accidentals"] = True

    return cfg
