# enigma.py  ─────────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from errors import MissingRotorPositionError
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import Reflector, Rotor
from rotor_stack import RotorStack


class Enigma:
    """Plugboard → rotors → reflector → rotors → plugboard, one key at a time.

    ``rotors`` and ``positions`` are given leftmost first, the way an operator
    reads them off the machine. Current enters the rightmost rotor first, so
    the stack is assembled in reverse.
    """

    def __init__(
        self,
        plugboard: Plugboard,
        reflector: Reflector,
        rotors: Sequence[Rotor] = (),
        positions: Sequence[int] = (),
        debug: Debug | None = None,
    ) -> None:
        if len(positions) < len(rotors):
            raise MissingRotorPositionError(
                f"{len(rotors)} rotor(s) defined, but {len(positions)} position(s) found"
            )

        self.debug = debug or Debug.quiet()
        self.pb = plugboard
        self.reflector = reflector
        self._start: tuple[int, ...] = tuple(positions[: len(rotors)])
        self._stack = RotorStack(reversed(rotors), self.debug)
        self.reset()

    # ── key helpers ─────────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, ...]:
        """Current rotor offsets, leftmost first."""
        return self._stack.positions[::-1]

    def reset(self, positions: Sequence[int] | None = None) -> None:
        """Turn every rotor back to *positions* (default: the starting key)."""
        key = self._start if positions is None else tuple(positions)
        if len(key) < len(self._stack):
            raise MissingRotorPositionError(
                f"{len(self._stack)} rotor(s) defined, but {len(key)} position(s) given"
            )
        self._stack.set_positions(key[: len(self._stack)][::-1])

    # ── encipher one symbol  ────────────────────────────────────

    def process(self, letter: str) -> str:
        signal_in = Keyboard.forward(letter)     # reject before any rotor moves
        self.debug.log("keyboard", f"{letter} -> {signal_in}")
        self._stack.step()

        signal = self.pb.forward(signal_in)
        self.debug.log("encipher", f"Output from plugboard at position {signal}")

        signal = self._stack.forward(signal)
        signal = self.reflector.reflect(signal)
        self.debug.log("encipher", f"Output from reflector at position {signal}")
        signal = self._stack.backward(signal)

        out_ch = self.pb.encode_out(signal)
        self.debug.log("encipher", f"{letter} -> {out_ch}")
        return out_ch

    def encrypt(self, text: str) -> str:
        return "".join(self.process(ch) for ch in text)

    decrypt = encrypt       # reciprocal machine

    def __repr__(self) -> str:
        return f"<Enigma rotors={len(self._stack)} positions={list(self.positions)}>"
