from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pytest

from keyboard_and_plugboard import Plugboard
from rotor_and_reflector import Reflector, Rotor
from wheels import reflector_table, rotor_values

IDENTITY = list(range(26))
# 0↔1, 2↔3, …, 24↔25
NEIGHBOUR_PAIRS = list(range(26))


@pytest.fixture
def identity_rotor() -> Rotor:
    return Rotor(IDENTITY)


@pytest.fixture
def neighbour_reflector() -> Reflector:
    return Reflector.from_values(NEIGHBOUR_PAIRS)


@pytest.fixture
def empty_plugboard() -> Plugboard:
    return Plugboard()


@pytest.fixture
def historic_parts():
    """Rotors I, II, III (leftmost first) and reflector B, no plugs."""
    rotors = [Rotor.from_values(rotor_values(n)) for n in ("I", "II", "III")]
    return Plugboard(), Reflector.from_table(reflector_table("B")), rotors


@pytest.fixture
def write(tmp_path: Path) -> Callable[[str, Sequence[int] | str], Path]:
    def _write(name: str, values: Sequence[int] | str) -> Path:
        path = tmp_path / name
        text = values if isinstance(values, str) else " ".join(str(v) for v in values)
        path.write_text(text + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def identity_files(write) -> list[Path]:
    """PLUGBOARD REFLECTOR ROTOR POSITIONS for the identity golden machine."""
    return [
        write("plain.pb", ""),
        write("neighbour.rf", NEIGHBOUR_PAIRS),
        write("identity.rot", IDENTITY),
        write("zero.pos", [0]),
    ]
