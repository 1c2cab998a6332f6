# rotor_and_reflector.py
from __future__ import annotations

from collections.abc import Iterable, Sequence

from debug import Debug
from errors import (
    IncompleteRotorMappingError,
    IncorrectReflectorParameterCountError,
    InvalidReflectorMappingError,
    InvalidRotorMappingError,
)
from keyboard_and_plugboard import (
    ALPHABET,
    SIZE,
    UNMAPPED,
    check_position,
    pair_table,
    split_pairs,
)


# ── position arithmetic ───────────────────────────────────────────
def shift_in(signal: int, offset: int) -> int:
    return (signal + offset) % SIZE


def shift_out(signal: int, offset: int) -> int:
    """``signal - offset`` wrapped back into [0, SIZE)."""
    diff = signal - offset
    return diff + SIZE if diff < 0 else diff


class Rotor:
    def __init__(
        self,
        mapping: Sequence[int],
        notches: Iterable[int] = (),
        position: int = 0,
        debug: Debug | None = None,
    ) -> None:
        if len(mapping) < SIZE:
            raise IncompleteRotorMappingError(
                f"Rotor has only {len(mapping)} numbers; {SIZE} are required"
            )
        if len(mapping) > SIZE:
            raise InvalidRotorMappingError(
                f"Rotor wiring has {len(mapping)} entries; expected {SIZE}"
            )

        seen: set[int] = set()
        for value in mapping:
            check_position(value)
            if value in seen:
                raise InvalidRotorMappingError(f"{value} appears more than once")
            seen.add(value)

        # integer lookup tables
        self._fwd: tuple[int, ...] = tuple(mapping)
        rev = [0] * SIZE
        for i, wired in enumerate(self._fwd):
            rev[wired] = i
        self._rev: tuple[int, ...] = tuple(rev)

        self.notches: frozenset[int] = frozenset(check_position(n, "notch") for n in notches)
        self._position = check_position(position)
        self.debug = debug or Debug.quiet()

    @classmethod
    def from_values(
        cls, values: Sequence[int], position: int = 0, debug: Debug | None = None
    ) -> "Rotor":
        """Rotor file format: 26 wiring entries followed by any notch positions."""
        if len(values) < SIZE:
            raise IncompleteRotorMappingError(
                f"Rotor has only {len(values)} numbers; {SIZE} are required"
            )
        return cls(values[:SIZE], values[SIZE:], position, debug)

    @property
    def mapping(self) -> tuple[int, ...]:
        return self._fwd

    @property
    def position(self) -> int:
        return self._position

    # ── stepping --------------------------------------------------
    # Only a RotorStack drives these, on its own copies of the rotors.
    def advance(self) -> None:
        self._position = (self._position + 1) % SIZE
        self.debug.log("rotor", f"Rotor pos {self._position}")

    def has_notch_at_current_pos(self) -> bool:
        return self._position in self.notches

    def set_position(self, position: int) -> None:
        self._position = check_position(position)

    # ── signal paths ---------------------------------------------
    def forward_map(self, signal: int) -> int:
        shift = shift_in(signal, self._position)
        return shift_out(self._fwd[shift], self._position)

    def backward_map(self, signal: int) -> int:
        shift = shift_in(signal, self._position)
        return shift_out(self._rev[shift], self._position)

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor pos={self._position} notches={sorted(self.notches)}>"


class Reflector:
    def __init__(
        self, pairs: Iterable[tuple[int, int]], debug: Debug | None = None
    ) -> None:
        table = pair_table(
            pairs, InvalidReflectorMappingError, InvalidReflectorMappingError
        )
        unmapped = table.count(UNMAPPED)
        if unmapped:
            raise IncorrectReflectorParameterCountError(
                f"Reflector maps {SIZE - unmapped} positions; all {SIZE} must be paired"
            )
        self._map: tuple[int, ...] = tuple(table)
        self.debug = debug or Debug.quiet()

    @classmethod
    def from_values(cls, values: Sequence[int], debug: Debug | None = None) -> "Reflector":
        """Build from the flat reflector file format: 13 pairs, 26 numbers."""
        pairs = split_pairs(values)
        pair_table(pairs, InvalidReflectorMappingError, InvalidReflectorMappingError)
        if len(values) != SIZE:
            raise IncorrectReflectorParameterCountError(
                f"Reflector has {len(values)} numbers; expected {SIZE}"
            )
        return cls(pairs, debug)

    @classmethod
    def from_table(cls, table: Sequence[int], debug: Debug | None = None) -> "Reflector":
        """Build from a full lookup table (``table[i]`` is the partner of ``i``)."""
        if len(table) != SIZE:
            raise IncorrectReflectorParameterCountError(
                f"Reflector table has {len(table)} entries; expected {SIZE}"
            )
        # ensure involution property (t[i] = j ⇒ t[j] = i) and no self-maps
        for i, j in enumerate(table):
            check_position(j)
            if i == j or table[j] != i:
                raise InvalidReflectorMappingError(
                    "Reflector wiring must be an involution with no fixed points"
                )
        return cls([(i, j) for i, j in enumerate(table) if i < j], debug)

    @property
    def mapping(self) -> tuple[int, ...]:
        return self._map

    def reflect(self, signal: int) -> int:
        mapped = self._map[signal]
        self.debug.log("reflector", f"{signal}->{mapped}")
        return mapped

    def __repr__(self) -> str:
        pairs = [ALPHABET[i] + ALPHABET[j] for i, j in enumerate(self._map) if i < j]
        return f"<Reflector {' '.join(pairs)}>"
