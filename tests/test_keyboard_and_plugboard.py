import pytest

from errors import (
    IncorrectPlugboardParameterCountError,
    InvalidIndexError,
    InvalidInputCharacterError,
    PlugboardDuplicateMappingError,
    PlugboardSelfMappingError,
)
from keyboard_and_plugboard import Keyboard, Plugboard


def test_keyboard_round_trips_letters():
    assert Keyboard.forward("A") == 0
    assert Keyboard.forward("Z") == 25
    assert Keyboard.backward(7) == "H"


@pytest.mark.parametrize("bad", ["a", "1", " ", "AB", "", "Ä"])
def test_keyboard_rejects_anything_but_capital_letters(bad):
    with pytest.raises(InvalidInputCharacterError) as exc:
        Keyboard.forward(bad)
    assert exc.value.code == 2


def test_keyboard_rejects_out_of_range_signal():
    with pytest.raises(InvalidIndexError):
        Keyboard.backward(26)


def test_empty_plugboard_is_identity(empty_plugboard):
    assert empty_plugboard.mapping == tuple(range(26))
    assert empty_plugboard.encode_in("Q") == 16
    assert empty_plugboard.encode_out(16) == "Q"


def test_plugboard_swaps_both_ways():
    pb = Plugboard([(0, 1), (7, 20)])
    assert pb.encode_in("A") == 1
    assert pb.encode_in("B") == 0
    assert pb.encode_out(1) == "A"
    assert pb.encode_out(20) == "H"
    assert pb.encode_in("C") == 2
    assert pb.pairs == [(0, 1), (7, 20)]


def test_plugboard_mapping_is_an_involution():
    pb = Plugboard.from_values([3, 9, 12, 0, 25, 4])
    for x in range(26):
        assert pb.mapping[pb.mapping[x]] == x


def test_plugboard_self_mapping_is_rejected():
    with pytest.raises(PlugboardSelfMappingError) as exc:
        Plugboard.from_values([4, 4])
    assert exc.value.code == 5


def test_plugboard_duplicate_mapping_is_rejected():
    with pytest.raises(PlugboardDuplicateMappingError) as exc:
        Plugboard.from_values([3, 8, 1, 3])
    assert exc.value.code == 5


def test_plugboard_odd_parameter_count_is_rejected():
    with pytest.raises(IncorrectPlugboardParameterCountError) as exc:
        Plugboard.from_values([0, 1, 2])
    assert exc.value.code == 6


def test_plugboard_rejects_out_of_range_values():
    with pytest.raises(InvalidIndexError):
        Plugboard([(0, 26)])


def test_plugboard_repr_lists_swaps():
    assert repr(Plugboard([(1, 0), (2, 5)])) == "<Plugboard AB CF>"
