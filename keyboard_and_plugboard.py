# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Iterable, Sequence

from debug import Debug
from errors import (
    ConfigurationError,
    IncorrectPlugboardParameterCountError,
    InvalidIndexError,
    InvalidInputCharacterError,
    PlugboardDuplicateMappingError,
    PlugboardSelfMappingError,
)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SIZE = len(ALPHABET)
UNMAPPED = -1


def check_position(value: int, what: str = "position") -> int:
    if not (0 <= value < SIZE):
        raise InvalidIndexError(
            f"Invalid {what} {value}; must be between and including 0 to {SIZE - 1}"
        )
    return value


def pair_table(
    pairs: Iterable[tuple[int, int]],
    self_error: type[ConfigurationError],
    dup_error: type[ConfigurationError],
) -> list[int]:
    """Turn 2-cycles into a lookup table; unlisted slots hold UNMAPPED."""
    table = [UNMAPPED] * SIZE
    for a, b in pairs:
        check_position(a)
        check_position(b)
        if a == b:
            raise self_error(f"Tried to map {a} with itself")
        if table[a] != UNMAPPED or table[b] != UNMAPPED:
            raise dup_error(f"{a} or {b} already has a mapping")
        table[a], table[b] = b, a
    return table


def split_pairs(values: Sequence[int]) -> list[tuple[int, int]]:
    """[a, b, c, d, e] -> [(a, b), (c, d)]; a trailing odd value is dropped."""
    return list(zip(values[::2], values[1::2]))


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    alphabet: str = ALPHABET

    # letter → integer signal
    @staticmethod
    def forward(letter: str) -> int:
        if len(letter) != 1 or not ("A" <= letter <= "Z"):
            raise InvalidInputCharacterError(
                f"Input characters must be upper case letters A - Z; found {letter!r}"
            )
        return ord(letter) - ord("A")

    # integer signal → letter
    @staticmethod
    def backward(signal: int) -> str:
        return ALPHABET[check_position(signal, "signal")]


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(
        self,
        pairs: Iterable[tuple[int, int]] = (),
        debug: Debug | None = None,
    ) -> None:
        table = pair_table(
            pairs, PlugboardSelfMappingError, PlugboardDuplicateMappingError
        )
        # unplugged positions pass straight through
        self.mapping: tuple[int, ...] = tuple(
            i if t == UNMAPPED else t for i, t in enumerate(table)
        )
        self.debug = debug or Debug.quiet()

    @classmethod
    def from_values(cls, values: Sequence[int], debug: Debug | None = None) -> "Plugboard":
        """Build from the flat plugboard file format: ``a b c d ...``."""
        pairs = split_pairs(values)
        pair_table(pairs, PlugboardSelfMappingError, PlugboardDuplicateMappingError)
        if len(values) % 2:
            raise IncorrectPlugboardParameterCountError(
                f"Odd number of plugboard parameters ({len(values)})"
            )
        return cls(pairs, debug)

    # one private helper does the job for both directions
    def _map(self, signal: int) -> int:
        mapped = self.mapping[signal]
        self.debug.log("plugboard", f"{signal}->{mapped}")
        return mapped

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    def encode_in(self, letter: str) -> int:
        """Letter from the keyboard → substituted position."""
        return self.forward(Keyboard.forward(letter))

    def encode_out(self, signal: int) -> str:
        """Position from the rotors → substituted lamp letter."""
        return Keyboard.backward(self.backward(signal))

    @property
    def pairs(self) -> list[tuple[int, int]]:
        return [(a, b) for a, b in enumerate(self.mapping) if a < b]

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [ALPHABET[a] + ALPHABET[b] for a, b in self.pairs]
        return f"<Plugboard {' '.join(swaps)}>"
