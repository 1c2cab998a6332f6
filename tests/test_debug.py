import logging

import pytest

from debug import COMPONENTS, Debug
from enigma import Enigma
from keyboard_and_plugboard import Plugboard
from main import Config
from rotor_and_reflector import Reflector, Rotor

from conftest import IDENTITY, NEIGHBOUR_PAIRS


def _machine(dbg):
    rotor = Rotor(IDENTITY, debug=dbg)
    return Enigma(Plugboard(debug=dbg), Reflector.from_values(NEIGHBOUR_PAIRS, dbg), [rotor], [0], dbg)


def test_active_component_is_logged(caplog):
    dbg = Debug("stepping", "reflector")
    with caplog.at_level(logging.DEBUG, logger="ENIGMA"):
        _machine(dbg).process("A")
    assert "[STEPPING] Rotor pos [1]" in caplog.text
    assert "[REFLECTOR] 0->1" in caplog.text
    assert "[PLUGBOARD]" not in caplog.text


def test_no_names_activates_every_component():
    dbg = Debug()
    assert all(dbg.is_on(c) for c in COMPONENTS)


def test_cli_debug_list_selects_components():
    assert Config(debug=["rotor"]).make_debug().active == {"rotor"}
    assert Config(debug=[]).make_debug().active == set(COMPONENTS)


def test_quiet_debug_never_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="ENIGMA"):
        _machine(Debug.quiet()).process("A")
    assert caplog.text == ""


def test_unknown_component_is_rejected():
    with pytest.raises(ValueError, match="lamps"):
        Debug("rotor", "lamps")
