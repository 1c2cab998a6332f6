# utilities.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Sequence

from debug import Debug
from enigma import Enigma
from errors import (
    ConfigurationError,
    ConfigurationFileError,
    InvalidIndexError,
    InvalidInputCharacterError,
    MissingRotorPositionError,
    NonNumericCharacterError,
)
from keyboard_and_plugboard import ALPHABET, SIZE, Keyboard, Plugboard
from rotor_and_reflector import Reflector, Rotor
from wheels import reflector_table, rotor_values

# ────────────────────────────────────────────────────────────────────────
#  0. Token helpers
# ────────────────────────────────────────────────────────────────────────


def read_tokens(path: str | Path) -> List[str]:
    """Return the whitespace separated tokens of a configuration file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationFileError(f"Unable to open {path}: {exc}") from exc
    return text.split()


def parse_index(token: str, source: str = "<input>") -> int:
    """Digits only, then range-checked into [0, 25]."""
    if not token.isascii() or not token.isdigit():
        raise NonNumericCharacterError(
            f"Error in {source}: encountered non numeric token {token!r}"
        )
    value = int(token)
    if value >= SIZE:
        raise InvalidIndexError(
            f"Error in {source}: invalid index {value}; "
            f"number must be between and including 0 to {SIZE - 1}"
        )
    return value


def parse_indices(tokens: Sequence[str], source: str = "<input>") -> List[int]:
    return [parse_index(tok, source) for tok in tokens]


def _coerce_index(value: Any, source: str) -> int:
    """JSON numbers arrive as ints; anything else goes through the token path."""
    if isinstance(value, bool):
        raise NonNumericCharacterError(f"Error in {source}: {value!r} is not a number")
    if isinstance(value, int):
        if not (0 <= value < SIZE):
            raise InvalidIndexError(
                f"Error in {source}: invalid index {value}; "
                f"number must be between and including 0 to {SIZE - 1}"
            )
        return value
    return parse_index(str(value), source)


# ────────────────────────────────────────────────────────────────────────
#  1. File loaders
# ────────────────────────────────────────────────────────────────────────


def load_plugboard(path: str | Path, debug: Debug | None = None) -> Plugboard:
    values = parse_indices(read_tokens(path), str(path))
    _log(debug, f"{path}: {len(values) // 2} plugboard pair(s)")
    return Plugboard.from_values(values, debug)


def load_reflector(path: str | Path, debug: Debug | None = None) -> Reflector:
    values = parse_indices(read_tokens(path), str(path))
    _log(debug, f"{path}: reflector with {len(values)} numbers")
    return Reflector.from_values(values, debug)


def load_rotor(path: str | Path, position: int = 0, debug: Debug | None = None) -> Rotor:
    values = parse_indices(read_tokens(path), str(path))
    _log(debug, f"{path}: rotor with {max(len(values) - SIZE, 0)} notch(es)")
    return Rotor.from_values(values, position, debug)


def load_positions(path: str | Path, count: int) -> List[int]:
    """Starting positions, leftmost rotor first; at least *count* of them."""
    positions = parse_indices(read_tokens(path), str(path))
    if len(positions) < count:
        raise MissingRotorPositionError(
            f"Error in {path}: {count} rotor(s) defined, "
            f"but {len(positions)} position(s) found"
        )
    return positions


def build_machine(
    plugboard_path: str | Path,
    reflector_path: str | Path,
    rotor_paths: Sequence[str | Path],
    positions_path: str | Path,
    debug: Debug | None = None,
) -> Enigma:
    """Assemble a machine from the classic set of configuration files.

    Rotor files are listed leftmost first, matching the positions file.
    """
    plugboard = load_plugboard(plugboard_path, debug)
    reflector = load_reflector(reflector_path, debug)
    rotors = [load_rotor(p, debug=debug) for p in rotor_paths]
    positions = load_positions(positions_path, len(rotors))
    return Enigma(plugboard, reflector, rotors, positions, debug)


# ────────────────────────────────────────────────────────────────────────
#  2. JSON configuration
# ────────────────────────────────────────────────────────────────────────

REQUIRED_KEYS = {"plugboard", "reflector", "rotors", "positions"}


def load_config(path: str | Path) -> dict:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigurationFileError(f"Unable to read {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: top level must be a JSON object")
    missing = REQUIRED_KEYS - data.keys()
    if missing:
        raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")
    return data


def _letter_index(letter: str, source: str) -> int:
    try:
        return Keyboard.forward(letter.upper())
    except InvalidInputCharacterError:
        raise InvalidIndexError(f"Error in {source}: {letter!r} is not a letter A - Z") from None


def _flat_values(raw: Any, source: str) -> List[int]:
    """Accept ``[a, b, c, d]`` or ``[[a, b], [c, d]]`` or ``["AB", "CD"]``."""
    values: List[int] = []
    for item in raw:
        if isinstance(item, str) and item.isalpha():
            values.extend(_letter_index(ch, source) for ch in item)
        elif isinstance(item, (list, tuple)):
            values.extend(_coerce_index(v, source) for v in item)
        else:
            values.append(_coerce_index(item, source))
    return values


def _rotor_from_config(entry: Any, debug: Debug | None) -> Rotor:
    if isinstance(entry, str):
        return Rotor.from_values(rotor_values(entry), debug=debug)
    if isinstance(entry, dict):
        wiring = _flat_values(entry.get("wiring", []), "rotor wiring")
        notches = _flat_values(entry.get("notches", []), "rotor notches")
        if len(wiring) < SIZE:
            return Rotor.from_values(wiring, debug=debug)     # reports incompleteness
        return Rotor(wiring, notches, debug=debug)
    return Rotor.from_values(_flat_values(entry, "rotor"), debug=debug)


def _positions_from_config(raw: Any) -> List[int]:
    if isinstance(raw, str):
        return [_letter_index(ch, "positions") for ch in raw]
    return [_coerce_index(v, "positions") for v in raw]


def build_from_config(cfg: dict, debug: Debug | None = None) -> Enigma:
    """Build a machine from a loaded JSON dictionary."""
    plugboard = Plugboard.from_values(_flat_values(cfg["plugboard"], "plugboard"), debug)

    refl = cfg["reflector"]
    if isinstance(refl, str):
        reflector = Reflector.from_table(reflector_table(refl), debug)
    else:
        reflector = Reflector.from_values(_flat_values(refl, "reflector"), debug)

    rotors = [_rotor_from_config(entry, debug) for entry in cfg["rotors"]]
    positions = _positions_from_config(cfg["positions"])
    _log(debug, f"config: {len(rotors)} rotor(s), positions {positions}")
    return Enigma(plugboard, reflector, rotors, positions, debug)


# ────────────────────────────────────────────────────────────────────────
#  3. Text preprocessing
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(msg: str) -> str:
    """Upper‑case and drop anything the keyboard has no key for."""
    return "".join(ch for ch in msg.upper() if ch in ALPHABET)


def _log(debug: Debug | None, message: str) -> None:
    if debug is not None:
        debug.log("loader", message)


__all__ = [
    "read_tokens",
    "parse_index",
    "load_plugboard",
    "load_reflector",
    "load_rotor",
    "load_positions",
    "build_machine",
    "load_config",
    "build_from_config",
    "preprocess_message",
]
