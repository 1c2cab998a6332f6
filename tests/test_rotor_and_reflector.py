import pytest

from errors import (
    IncompleteRotorMappingError,
    IncorrectReflectorParameterCountError,
    InvalidIndexError,
    InvalidReflectorMappingError,
    InvalidRotorMappingError,
)
from rotor_and_reflector import Reflector, Rotor, shift_in, shift_out
from wheels import REFLECTORS, ROTORS, reflector_table, rotor_values

from conftest import IDENTITY, NEIGHBOUR_PAIRS


def test_shift_out_wraps_negative_differences():
    assert shift_out(3, 5) == 24
    assert shift_out(5, 5) == 0
    assert shift_out(25, 0) == 25
    assert shift_in(25, 3) == 2


@pytest.mark.parametrize("name", sorted(ROTORS))
def test_backward_inverts_forward_for_every_offset(name):
    rotor = Rotor.from_values(rotor_values(name))
    for pos in range(26):
        rotor.set_position(pos)
        for x in range(26):
            assert rotor.backward_map(rotor.forward_map(x)) == x
            assert rotor.forward_map(rotor.backward_map(x)) == x


def test_forward_map_applies_offset_on_both_sides():
    rotor = Rotor.from_values(rotor_values("I"))
    assert rotor.forward_map(0) == 4          # A -> E
    rotor.set_position(1)
    assert rotor.forward_map(0) == 9          # K shifted back by one
    rotor.set_position(25)
    assert rotor.forward_map(0) == 10         # J (9) - 25 wraps to 10
    assert rotor.backward_map(10) == 0


def test_identity_rotor_is_transparent_at_any_offset(identity_rotor):
    for pos in range(26):
        identity_rotor.set_position(pos)
        assert [identity_rotor.forward_map(x) for x in range(26)] == IDENTITY


def test_advance_wraps_around():
    rotor = Rotor(IDENTITY, position=25)
    rotor.advance()
    assert rotor.position == 0


def test_notch_is_checked_at_the_current_position():
    rotor = Rotor(IDENTITY, notches=[3], position=2)
    assert not rotor.has_notch_at_current_pos()
    rotor.advance()
    assert rotor.position == 3
    assert rotor.has_notch_at_current_pos()
    rotor.advance()
    assert not rotor.has_notch_at_current_pos()


def test_from_values_splits_wiring_and_notches():
    rotor = Rotor.from_values(IDENTITY + [4, 17, 4], position=6)
    assert rotor.mapping == tuple(IDENTITY)
    assert rotor.notches == {4, 17}
    assert rotor.position == 6


def test_rotor_with_too_few_entries_is_incomplete():
    with pytest.raises(IncompleteRotorMappingError) as exc:
        Rotor.from_values(IDENTITY[:25])
    assert exc.value.code == 7


def test_rotor_with_repeated_entry_is_invalid():
    wiring = IDENTITY[:]
    wiring[5] = 4
    with pytest.raises(InvalidRotorMappingError):
        Rotor(wiring)


def test_rotor_rejects_out_of_range_values():
    with pytest.raises(InvalidIndexError):
        Rotor(IDENTITY[:25] + [26])
    with pytest.raises(InvalidIndexError):
        Rotor(IDENTITY, notches=[30])


def test_rotor_constructor_rejects_overlong_wiring():
    with pytest.raises(InvalidRotorMappingError):
        Rotor(IDENTITY + [0])


# ── reflector ────────────────────────────────────────────────────


def test_neighbour_reflector_swaps_adjacent_positions(neighbour_reflector):
    assert neighbour_reflector.reflect(0) == 1
    assert neighbour_reflector.reflect(1) == 0
    assert neighbour_reflector.reflect(25) == 24


@pytest.mark.parametrize("name", sorted(REFLECTORS))
def test_reflectors_are_fixed_point_free_involutions(name):
    reflector = Reflector.from_table(reflector_table(name))
    for x in range(26):
        assert reflector.reflect(x) != x
        assert reflector.reflect(reflector.reflect(x)) == x


def test_reflector_self_pair_is_invalid():
    values = NEIGHBOUR_PAIRS[:]
    values[1] = 0
    with pytest.raises(InvalidReflectorMappingError) as exc:
        Reflector.from_values(values)
    assert exc.value.code == 9


def test_reflector_reused_position_is_invalid():
    values = NEIGHBOUR_PAIRS[:]
    values[3] = 0
    with pytest.raises(InvalidReflectorMappingError):
        Reflector.from_values(values)


@pytest.mark.parametrize("count", [0, 24, 25, 27])
def test_reflector_needs_exactly_26_numbers(count):
    values = (NEIGHBOUR_PAIRS + [0])[:count]
    with pytest.raises(IncorrectReflectorParameterCountError) as exc:
        Reflector.from_values(values)
    assert exc.value.code == 10


def test_reflector_table_with_fixed_point_is_invalid():
    with pytest.raises(InvalidReflectorMappingError):
        Reflector.from_table(IDENTITY)
