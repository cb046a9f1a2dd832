"""Password Policies data classes.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from .dictionary import PasswordDictionary
from .enums import CharacterClass, ErrorKind, StrengthEstimator
from .exceptions import PolicyInvariantError

_NON_NEGATIVE_FIELDS: tuple[str, ...] = (
    "min_length",
    "max_length",
    "min_characteristics",
    "good_strength",
    "expiration_days",
    "expiration_grace_length",
)


@dataclass(frozen=True)
class CharacterClassRule:
    """Minimum occurrences of one character class."""

    character_class: CharacterClass
    min_count: int = 1

    def __str__(self) -> str:
        return f"{self.character_class.value}:{self.min_count}"


@dataclass(frozen=True)
class DefaultPasswordPolicyPreset:
    """Preset for out-of-the-box Password Policy configuration."""

    min_length: Literal[6] = 6
    max_length: Literal[0] = 0

    character_rules: Literal[""] = ""
    min_characteristics: Literal[2] = 2
    max_repeating_characters: None = None

    good_strength: Literal[20] = 20

    expiration_days: Literal[0] = 0
    expiration_grace_length: Literal[0] = 0


@dataclass(frozen=True)
class PolicyConfig:
    """Immutable snapshot of password policy parameters.

    Zero values (``None`` for ``max_repeating_characters``) and an empty
    dictionary disable the corresponding checks.
    """

    min_length: int = 0
    max_length: int = 0

    character_rules: tuple[CharacterClassRule, ...] = ()
    min_characteristics: int = 0

    max_repeating_characters: int | None = None

    dictionary: PasswordDictionary = field(default_factory=PasswordDictionary)
    dictionary_substring_match: bool = True

    good_strength: int = 0
    strength_estimator: StrengthEstimator = StrengthEstimator.LENGTH

    expiration_days: int = 0
    expiration_grace_length: int = 0
    expiration_overrides_strength: bool = False

    def __post_init__(self) -> None:
        """Freeze collections and validate invariants.

        :raises PolicyInvariantError: parameters are structurally invalid
        """
        object.__setattr__(
            self,
            "character_rules",
            tuple(self.character_rules),
        )
        try:
            object.__setattr__(
                self,
                "strength_estimator",
                StrengthEstimator(self.strength_estimator),
            )
        except ValueError as err:
            raise PolicyInvariantError(
                f"Unsupported strength estimator `{self.strength_estimator}`",
            ) from err

        for name in _NON_NEGATIVE_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, int):
                raise PolicyInvariantError(
                    f"{name} must be an integer, got `{value!r}`",
                )
            if value < 0:
                raise PolicyInvariantError(f"{name} must not be negative")

        if self.max_length and self.min_length > self.max_length:
            raise PolicyInvariantError(
                "Minimum password length must be "
                "lower or equal than maximum password length",
            )

        if self.min_characteristics > len(self.character_rules):
            raise PolicyInvariantError(
                f"Number of characteristics ({self.min_characteristics}) "
                f"exceeds number of character rules "
                f"({len(self.character_rules)})",
            )

        if any(
            not isinstance(rule.min_count, int) or rule.min_count < 0
            for rule in self.character_rules
        ):
            raise PolicyInvariantError(
                "Character rule count must be a non-negative integer",
            )

        if self.max_repeating_characters is not None and (
            not isinstance(self.max_repeating_characters, int)
            or self.max_repeating_characters < 1
        ):
            raise PolicyInvariantError(
                "Maximum repeating characters must be an integer "
                "of at least 1",
            )

    @property
    def is_repeating_rule_enabled(self) -> bool:
        return self.max_repeating_characters is not None

    @property
    def is_dictionary_enabled(self) -> bool:
        return bool(self.dictionary)


@dataclass(frozen=True)
class EvaluationContext:
    """Runtime data of one password check.

    ``now`` pins the reference time, current UTC time is used otherwise.
    """

    last_modified: datetime | None = None
    now: datetime | None = None


@dataclass(frozen=True)
class RequirementStatus:
    """One line of a password requirements checklist."""

    kind: ErrorKind
    satisfied: bool | None
    text: str
