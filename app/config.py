"""Module with settings.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from password_policy.character_rules import get_character_rules
from password_policy.constants import LOG_FILE_PATTERN
from password_policy.dataclasses import (
    DefaultPasswordPolicyPreset,
    PolicyConfig,
)
from password_policy.dictionary import PasswordDictionary
from password_policy.enums import StrengthEstimator
from password_policy.exceptions import PolicySettingsError

_PRESET = DefaultPasswordPolicyPreset()


class Settings(BaseModel):
    """Settings of password policy."""

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATTERN: str = LOG_FILE_PATTERN

    PASSWORD_MIN_LENGTH: int = Field(_PRESET.min_length, ge=0)
    PASSWORD_MAX_LENGTH: int = Field(_PRESET.max_length, ge=0)

    PASSWORD_CHARACTER_RULES: str = _PRESET.character_rules
    PASSWORD_NUMBER_OF_CHARACTERISTICS: int = Field(
        _PRESET.min_characteristics,
        ge=0,
    )
    PASSWORD_MAX_REPEATING_CHARACTERS: int | None = Field(None, ge=1)

    PASSWORD_DICTIONARIES: list[str] = Field(default_factory=list)
    PASSWORD_DICTIONARY_CASE_SENSITIVE: bool = False
    PASSWORD_DICTIONARY_SUBSTRING_MATCH: bool = True

    PASSWORD_GOOD_STRENGTH: int = Field(_PRESET.good_strength, ge=0)
    PASSWORD_STRENGTH_ESTIMATOR: StrengthEstimator = StrengthEstimator.LENGTH

    PASSWORD_EXPIRATION_DAYS: int = Field(_PRESET.expiration_days, ge=0)
    PASSWORD_EXPIRATION_GRACE_LENGTH: int = Field(
        _PRESET.expiration_grace_length,
        ge=0,
    )
    PASSWORD_EXPIRATION_OVERRIDES_STRENGTH: bool = False

    @field_validator("PASSWORD_DICTIONARIES", mode="before")
    def split_dictionaries(  # noqa: N805
        cls,
        value: str | list[str],
    ) -> list[str]:
        """Get dictionary paths from a comma separated string."""
        if isinstance(value, str):
            return [path.strip() for path in value.split(",") if path.strip()]
        return value

    @field_validator("PASSWORD_MAX_REPEATING_CHARACTERS", mode="before")
    def empty_to_none(  # noqa: N805
        cls,
        value: str | int | None,
    ) -> str | int | None:
        """Treat empty environment value as unbounded."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def load_dictionary(self) -> PasswordDictionary:
        """Read configured word lists."""
        return PasswordDictionary.from_files(
            self.PASSWORD_DICTIONARIES,
            case_sensitive=self.PASSWORD_DICTIONARY_CASE_SENSITIVE,
        )

    def to_policy_config(
        self,
        dictionary: PasswordDictionary | None = None,
    ) -> PolicyConfig:
        """Build immutable policy snapshot.

        :param PasswordDictionary | None dictionary: already loaded
            dictionary, configured word lists are read when omitted
        :raises ConfigError: settings describe an invalid policy
        :return PolicyConfig: policy
        """
        if dictionary is None:
            dictionary = self.load_dictionary()

        return PolicyConfig(
            min_length=self.PASSWORD_MIN_LENGTH,
            max_length=self.PASSWORD_MAX_LENGTH,
            character_rules=get_character_rules(
                self.PASSWORD_CHARACTER_RULES,
            ),
            min_characteristics=self.PASSWORD_NUMBER_OF_CHARACTERISTICS,
            max_repeating_characters=self.PASSWORD_MAX_REPEATING_CHARACTERS,
            dictionary=dictionary,
            dictionary_substring_match=(
                self.PASSWORD_DICTIONARY_SUBSTRING_MATCH
            ),
            good_strength=self.PASSWORD_GOOD_STRENGTH,
            strength_estimator=self.PASSWORD_STRENGTH_ESTIMATOR,
            expiration_days=self.PASSWORD_EXPIRATION_DAYS,
            expiration_grace_length=self.PASSWORD_EXPIRATION_GRACE_LENGTH,
            expiration_overrides_strength=(
                self.PASSWORD_EXPIRATION_OVERRIDES_STRENGTH
            ),
        )

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        try:
            return cls(**os.environ)
        except ValidationError as err:
            raise PolicySettingsError(str(err)) from err
