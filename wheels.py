# wheels.py
"""Historical Enigma I / M3 wheel wirings.

Notch letters are the window letters a rotor *lands on* when it kicks its
left neighbour, i.e. one past the classic turnover letter (rotor I turns
over Q→R, so its notch here is R).
"""
from __future__ import annotations

from typing import Dict, List, Tuple

from errors import UnknownWheelError
from keyboard_and_plugboard import Keyboard

# name → (wiring, notch letters)
ROTORS: Dict[str, Tuple[str, str]] = {
    "I":    ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "R"),
    "II":   ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "F"),
    "III":  ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "W"),
    "IV":   ("ESOVPZJAYQUIRHXLNFTGKDCMWB", "K"),
    "V":    ("VZBRGITYUPSDNHLXAWMJQOFECK", "A"),
    "VI":   ("JPGVOUMFYQBENHZRDKASXLICTW", "AN"),
    "VII":  ("NZJHGRCXMYSWBOUFAIVLPEKQDT", "AN"),
    "VIII": ("FKQHTLXOCBJSPDZRAMEWNIUYGV", "AN"),
}

REFLECTORS: Dict[str, str] = {
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
}


def _positions(letters: str) -> List[int]:
    return [Keyboard.forward(ch) for ch in letters]


def rotor_values(name: str) -> List[int]:
    """Wiring followed by notches, the same shape as a rotor file."""
    try:
        wiring, notches = ROTORS[name.upper()]
    except KeyError:
        raise UnknownWheelError(
            f"Unknown rotor {name!r}. Expected one of {list(ROTORS)}"
        ) from None
    return _positions(wiring) + _positions(notches)


def reflector_table(name: str) -> List[int]:
    try:
        wiring = REFLECTORS[name.upper()]
    except KeyError:
        raise UnknownWheelError(
            f"Unknown reflector {name!r}. Expected one of {list(REFLECTORS)}"
        ) from None
    return _positions(wiring)


__all__ = ["ROTORS", "REFLECTORS", "rotor_values", "reflector_table"]
