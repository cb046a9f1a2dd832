"""Password Policies exceptions module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique

from errors import BaseDomainException


@unique
class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    CHARACTER_RULES_SYNTAX_ERROR = 1
    UNKNOWN_CHARACTER_CLASS_ERROR = 2
    INVALID_CHARACTER_COUNT_ERROR = 3
    POLICY_INVARIANT_ERROR = 4
    DICTIONARY_LOAD_ERROR = 5
    POLICY_SETTINGS_ERROR = 6


class ConfigError(BaseDomainException):
    """Base exception class for structurally invalid password policies."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR


class CharacterRulesSyntaxError(ConfigError):
    """Exception raised when a rule is not a `Name:Count` pair."""

    code = ErrorCodes.CHARACTER_RULES_SYNTAX_ERROR


class UnknownCharacterClassError(ConfigError):
    """Exception raised when a character class name is not recognized."""

    code = ErrorCodes.UNKNOWN_CHARACTER_CLASS_ERROR


class InvalidCharacterCountError(ConfigError):
    """Exception raised when a rule count is not a non-negative integer."""

    code = ErrorCodes.INVALID_CHARACTER_COUNT_ERROR


class PolicyInvariantError(ConfigError):
    """Exception raised when policy parameters contradict each other."""

    code = ErrorCodes.POLICY_INVARIANT_ERROR


class DictionaryLoadError(ConfigError):
    """Exception raised when a dictionary source can not be read."""

    code = ErrorCodes.DICTIONARY_LOAD_ERROR


class PolicySettingsError(ConfigError):
    """Exception raised when settings from environment are invalid."""

    code = ErrorCodes.POLICY_SETTINGS_ERROR
