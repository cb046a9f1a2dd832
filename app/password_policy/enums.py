"""Password policy enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Violated rule identifiers.

    Declaration order is the order of evaluation results.
    """

    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    INSUFFICIENT_CHARACTERISTICS = "INSUFFICIENT_CHARACTERISTICS"
    REPEATED_CHARACTERS = "REPEATED_CHARACTERS"
    DICTIONARY_MATCH = "DICTIONARY_MATCH"
    EXPIRED = "EXPIRED"


class CharacterClass(StrEnum):
    """Recognized character classes of the composition policy."""

    ALPHABETICAL = "Alphabetical"
    DIGIT = "Digit"
    UPPERCASE = "UpperCase"
    LOWERCASE = "LowerCase"
    SPECIAL = "Special"

    @classmethod
    def from_name(cls, name: str) -> "CharacterClass | None":
        """Resolve class by its configuration name, ignoring case."""
        folded = name.casefold()
        for character_class in cls:
            if character_class.value.casefold() == folded:
                return character_class
        return None


class StrengthEstimator(StrEnum):
    """Strength scoring functions for the good strength bypass."""

    LENGTH = "length"
    ENTROPY = "entropy"
