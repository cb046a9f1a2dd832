"""Password Validator.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re
from dataclasses import dataclass
from datetime import datetime
from itertools import groupby
from typing import Any, Callable, Iterable, Self, TypeAlias

from .dataclasses import CharacterClassRule
from .dictionary import PasswordDictionary
from .enums import ErrorKind
from .settings import PasswordValidatorSettings
from .utils import count_password_age_days

_CheckType: TypeAlias = Callable[..., bool]


@dataclass
class _Checker:
    """Checker dataclass."""

    check: _CheckType
    args: list[Any]
    error_kind: ErrorKind


class PasswordPolicyValidator:
    """Builder for password validation rules.

    This class accumulates checks and validates a password against them.
    Every check runs, so ``error_kinds`` lists all violated rules.
    """

    _checkers: list[_Checker]
    _password_validator_settings: PasswordValidatorSettings

    error_kinds: list[ErrorKind]

    def __init__(
        self,
        password_validator_settings: PasswordValidatorSettings,
    ) -> None:
        """Initialize a new validator instance.

        Sets up internal storage for checkers.
        """
        self._checkers: list[_Checker] = []
        self._password_validator_settings = password_validator_settings
        self.error_kinds: list[ErrorKind] = []

    def __add_checker(
        self,
        check: _CheckType,
        error_kind: ErrorKind,
        args: list,
    ) -> None:
        self._checkers.append(
            _Checker(
                check=check,
                args=args,
                error_kind=error_kind,
            ),
        )

    def __run_checker(self, checker: _Checker, password: str) -> None:
        result = checker.check(
            password,
            self._password_validator_settings,
            *checker.args,
        )
        if result is False and checker.error_kind not in self.error_kinds:
            self.error_kinds.append(checker.error_kind)

    def validate(self, password: str) -> bool:
        """Validate the given password against the configured schema.

        Runs all registered checks and collects violated rules,
        each error kind is reported once.

        :param str password: Password to validate.
        :return: bool.

        :Example:
            .. code-block:: python

                assert not (
                    PasswordPolicyValidator(settings)
                    .min_length(3)
                    .validate("13")
                )
                assert (
                    PasswordPolicyValidator(settings)
                    .min_length(3)
                    .validate("abc")
                )
        """  # fmt: skip
        self.error_kinds = []
        for checker in self._checkers:
            self.__run_checker(checker, password)

        return not bool(self.error_kinds)

    def min_length(self, length: int) -> Self:
        """Require minimum password length.

        :param int length: Minimal allowed length.
        :return: PasswordPolicyValidator.
        """
        self.__add_checker(
            check=self._validate_min_length,
            error_kind=ErrorKind.TOO_SHORT,
            args=[length],
        )
        return self

    @staticmethod
    def _validate_min_length(password: str, _: Any, length: int) -> bool:
        """Validate minimum password length."""
        return len(password) >= length

    def max_length(self, length: int) -> Self:
        """Require maximum count of characters.

        :param int length: Maximum length allowed.
        :return PasswordPolicyValidator: Updated validator object.
        """
        self.__add_checker(
            check=self._validate_max_length,
            error_kind=ErrorKind.TOO_LONG,
            args=[length],
        )
        return self

    @staticmethod
    def _validate_max_length(password: str, _: Any, length: int) -> bool:
        """Validate maximum password length."""
        return len(password) <= length

    def min_characteristics(
        self,
        character_rules: Iterable[CharacterClassRule],
        count: int,
    ) -> Self:
        """Require a number of character rules to be satisfied.

        :param Iterable[CharacterClassRule] character_rules: rules to count.
        :param int count: Number of rules that must be met.
        :return PasswordPolicyValidator: Updated validator object.

        :Example:
            .. code-block:: python

                rules = character_rules_4dot0()
                assert not (
                    PasswordPolicyValidator(settings)
                    .min_characteristics(rules, 2)
                    .validate("p")
                )
        """  # fmt: skip
        self.__add_checker(
            check=self._validate_min_characteristics,
            error_kind=ErrorKind.INSUFFICIENT_CHARACTERISTICS,
            args=[tuple(character_rules), count],
        )
        return self

    def _validate_min_characteristics(
        self,
        password: str,
        settings: PasswordValidatorSettings,
        character_rules: tuple[CharacterClassRule, ...],
        count: int,
    ) -> bool:
        """Validate number of satisfied character rules in password."""
        satisfied = sum(
            1
            for rule in character_rules
            if self.count_characters(password, settings, rule)
            >= rule.min_count
        )
        return satisfied >= count

    @staticmethod
    def count_characters(
        password: str,
        settings: PasswordValidatorSettings,
        rule: CharacterClassRule,
    ) -> int:
        """Count characters of the rule class in password."""
        regexp = settings.regexp_for(rule.character_class)
        return len(re.findall(regexp, password))

    def max_repeating_characters(self, count: int) -> Self:
        """Require maximum count of repeating symbols in row.

        Whitespace breaks a run and never forms one.

        :param int count: Number of repeating symbols in a row.
        :return PasswordPolicyValidator: Updated validator object.

        :Example:
            .. code-block:: python

                validator = (
                    PasswordPolicyValidator(settings)
                    .max_repeating_characters(3)
                )
                assert validator.validate("000 000")
                assert not validator.validate("0000")
        """  # fmt: skip
        self.__add_checker(
            check=self._validate_max_repeating_characters,
            error_kind=ErrorKind.REPEATED_CHARACTERS,
            args=[count],
        )
        return self

    @staticmethod
    def _validate_max_repeating_characters(
        password: str,
        _: Any,
        count: int,
    ) -> bool:
        """Validate maximum repeating symbols in row count in password."""
        longest_run = max(
            (
                len(list(group))
                for char, group in groupby(password)
                if not char.isspace()
            ),
            default=0,
        )
        return longest_run <= count

    def not_equal_any_dictionary_word(
        self,
        dictionary: PasswordDictionary,
    ) -> Self:
        """Require the password to not be a dictionary word.

        :param PasswordDictionary dictionary: weak passwords.
        :return PasswordPolicyValidator: Updated validator object.
        """
        self.__add_checker(
            check=self._validate_not_equal_any_dictionary_word,
            error_kind=ErrorKind.DICTIONARY_MATCH,
            args=[dictionary],
        )
        return self

    @staticmethod
    def _validate_not_equal_any_dictionary_word(
        password: str,
        _: Any,
        dictionary: PasswordDictionary,
    ) -> bool:
        """Check if password is not equal to any dictionary word."""
        return not dictionary.equals_any(password)

    def not_contain_any_dictionary_word(
        self,
        dictionary: PasswordDictionary,
    ) -> Self:
        """Require the password to not contain any dictionary words.

        :param PasswordDictionary dictionary: weak passwords and substrings.
        :return PasswordPolicyValidator: Updated validator object.
        """
        self.__add_checker(
            check=self._validate_not_contain_any_dictionary_word,
            error_kind=ErrorKind.DICTIONARY_MATCH,
            args=[dictionary],
        )
        return self

    @staticmethod
    def _validate_not_contain_any_dictionary_word(
        password: str,
        _: Any,
        dictionary: PasswordDictionary,
    ) -> bool:
        """Check if password not contain any dictionary words."""
        return not dictionary.contains_any(password)

    def not_expired(
        self,
        expiration_days: int,
        last_modified: datetime | None,
        now: datetime | None = None,
        grace_length: int = 0,
    ) -> Self:
        """Require the password to be younger than expiration days.

        :param int expiration_days: Maximal age in days.
        :param datetime | None last_modified: password modification time.
        :param datetime | None now: reference time.
        :param int grace_length: passwords at least this long never expire.
        :return PasswordPolicyValidator: Updated validator object.

        :Note:
            If ``expiration_days`` is ``0`` or ``last_modified`` is
            ``None``, the check passes.
        """
        self.__add_checker(
            check=self._validate_not_expired,
            error_kind=ErrorKind.EXPIRED,
            args=[expiration_days, last_modified, now, grace_length],
        )
        return self

    @staticmethod
    def _validate_not_expired(
        password: str,
        _: Any,
        expiration_days: int,
        last_modified: datetime | None,
        now: datetime | None,
        grace_length: int,
    ) -> bool:
        """Check if password is not older than expiration days."""
        if expiration_days == 0:
            return True

        if last_modified is None:
            return True

        if grace_length and len(password) >= grace_length:
            return True

        age_days = count_password_age_days(last_modified, now)
        return age_days <= expiration_days
