# errors.py
"""Error codes and the exception hierarchy of the simulator."""
from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    NO_ERROR = 0
    INSUFFICIENT_NUMBER_OF_PARAMETERS = 1
    INVALID_INPUT_CHARACTER = 2
    INVALID_INDEX = 3
    NON_NUMERIC_CHARACTER = 4
    IMPOSSIBLE_PLUGBOARD_CONFIGURATION = 5
    INCORRECT_NUMBER_OF_PLUGBOARD_PARAMETERS = 6
    INVALID_ROTOR_MAPPING = 7
    NO_ROTOR_STARTING_POSITION = 8
    INVALID_REFLECTOR_MAPPING = 9
    INCORRECT_NUMBER_OF_REFLECTOR_PARAMETERS = 10
    ERROR_OPENING_CONFIGURATION_FILE = 11
    UNKNOWN_WHEEL = 12


class EnigmaError(Exception):
    """Base class for every failure the simulator reports."""

    code: ErrorCode = ErrorCode.NO_ERROR


class InsufficientParametersError(EnigmaError):
    code = ErrorCode.INSUFFICIENT_NUMBER_OF_PARAMETERS


class InvalidInputCharacterError(EnigmaError, ValueError):
    """A message character outside A–Z reached the keyboard."""

    code = ErrorCode.INVALID_INPUT_CHARACTER


# ── configuration ────────────────────────────────────────────────
class ConfigurationError(EnigmaError, ValueError):
    """Raised while loading or validating a machine configuration."""


class ConfigurationFileError(ConfigurationError):
    code = ErrorCode.ERROR_OPENING_CONFIGURATION_FILE


class InvalidIndexError(ConfigurationError):
    code = ErrorCode.INVALID_INDEX


class NonNumericCharacterError(ConfigurationError):
    code = ErrorCode.NON_NUMERIC_CHARACTER


class PlugboardSelfMappingError(ConfigurationError):
    code = ErrorCode.IMPOSSIBLE_PLUGBOARD_CONFIGURATION


class PlugboardDuplicateMappingError(ConfigurationError):
    code = ErrorCode.IMPOSSIBLE_PLUGBOARD_CONFIGURATION


class IncorrectPlugboardParameterCountError(ConfigurationError):
    code = ErrorCode.INCORRECT_NUMBER_OF_PLUGBOARD_PARAMETERS


class InvalidRotorMappingError(ConfigurationError):
    code = ErrorCode.INVALID_ROTOR_MAPPING


class IncompleteRotorMappingError(InvalidRotorMappingError):
    """Fewer than 26 wiring entries."""


class MissingRotorPositionError(ConfigurationError):
    code = ErrorCode.NO_ROTOR_STARTING_POSITION


class InvalidReflectorMappingError(ConfigurationError):
    code = ErrorCode.INVALID_REFLECTOR_MAPPING


class IncorrectReflectorParameterCountError(ConfigurationError):
    code = ErrorCode.INCORRECT_NUMBER_OF_REFLECTOR_PARAMETERS


class UnknownWheelError(ConfigurationError):
    code = ErrorCode.UNKNOWN_WHEEL


__all__ = [
    "ErrorCode",
    "EnigmaError",
    "InsufficientParametersError",
    "InvalidInputCharacterError",
    "ConfigurationError",
    "ConfigurationFileError",
    "InvalidIndexError",
    "NonNumericCharacterError",
    "PlugboardSelfMappingError",
    "PlugboardDuplicateMappingError",
    "IncorrectPlugboardParameterCountError",
    "InvalidRotorMappingError",
    "IncompleteRotorMappingError",
    "MissingRotorPositionError",
    "InvalidReflectorMappingError",
    "IncorrectReflectorParameterCountError",
    "UnknownWheelError",
]
