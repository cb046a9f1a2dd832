"""Password Validator Settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .constants import (
    REGEXP_DIGITS,
    REGEXP_LETTERS,
    REGEXP_LOWERCASE_LETTERS,
    REGEXP_SPECIAL_SYMBOLS,
    REGEXP_UPPERCASE_LETTERS,
)
from .enums import CharacterClass


class PasswordValidatorSettings:
    """Password Validator Settings."""

    regexp_letters: str = REGEXP_LETTERS
    regexp_digits: str = REGEXP_DIGITS
    regexp_uppercase_letters: str = REGEXP_UPPERCASE_LETTERS
    regexp_lowercase_letters: str = REGEXP_LOWERCASE_LETTERS
    regexp_special_symbols: str = REGEXP_SPECIAL_SYMBOLS

    def regexp_for(self, character_class: CharacterClass) -> str:
        """Get regexp matching one character of the class."""
        match character_class:
            case CharacterClass.ALPHABETICAL:
                return self.regexp_letters
            case CharacterClass.DIGIT:
                return self.regexp_digits
            case CharacterClass.UPPERCASE:
                return self.regexp_uppercase_letters
            case CharacterClass.LOWERCASE:
                return self.regexp_lowercase_letters
            case CharacterClass.SPECIAL:
                return self.regexp_special_symbols

        raise ValueError(f"Unsupported character class `{character_class}`")
