# rotor_stack.py
from __future__ import annotations

import copy
from collections.abc import Iterable, Sequence

from debug import Debug
from rotor_and_reflector import Rotor


class RotorStack:
    """Rotors in signal-entry order: index 0 is the rightmost, fastest wheel.

    The stack keeps its own copies of the rotors it is given, so it is the one
    place rotor positions ever change.
    """

    def __init__(self, rotors: Iterable[Rotor] = (), debug: Debug | None = None) -> None:
        self._rotors: tuple[Rotor, ...] = tuple(copy.copy(r) for r in rotors)
        self.debug = debug or Debug.quiet()

    def __len__(self) -> int:
        return len(self._rotors)

    @property
    def positions(self) -> tuple[int, ...]:
        """Current offsets, rightmost rotor first."""
        return tuple(r.position for r in self._rotors)

    def set_positions(self, positions: Sequence[int]) -> None:
        if len(positions) != len(self._rotors):
            raise ValueError(
                f"Expected {len(self._rotors)} positions, got {len(positions)}"
            )
        for rotor, pos in zip(self._rotors, positions):
            rotor.set_position(pos)

    # ── stepping logic  ─────────────────────────────────────────

    def step(self) -> None:
        """Advance rotors for one key-press.

        The rightmost rotor always moves. Then, right to left, every rotor
        resting on a notch kicks its left neighbour, whether or not it moved
        on this key-press.
        """
        if self._rotors:
            self._rotors[0].advance()
        for i in range(len(self._rotors) - 1):
            if self._rotors[i].has_notch_at_current_pos():
                self._rotors[i + 1].advance()
        self.debug.log("stepping", f"Rotor pos {list(self.positions)}")

    # ── signal paths ─────────────────────────────────────────────

    def forward(self, signal: int) -> int:
        """Right to left, towards the reflector."""
        for i, rotor in enumerate(self._rotors):
            signal = rotor.forward_map(signal)
            self.debug.log("rotor", f"Output from rotor {i} at position {signal}")
        return signal

    def backward(self, signal: int) -> int:
        """Left to right, back from the reflector."""
        for i in range(len(self._rotors) - 1, -1, -1):
            signal = self._rotors[i].backward_map(signal)
            self.debug.log("rotor", f"Output from rotor {i} at position {signal}")
        return signal

    def __repr__(self) -> str:
        return f"<RotorStack positions={list(self.positions)}>"
