"""Character rules catalog.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterable

from loguru import logger as loguru_logger

from .constants import (
    CHARACTER_RULE_FIELDS_SEPARATOR,
    CHARACTER_RULES_SEPARATOR,
    UNKNOWN_COMPOSITION,
)
from .dataclasses import CharacterClassRule
from .enums import CharacterClass
from .exceptions import (
    CharacterRulesSyntaxError,
    InvalidCharacterCountError,
    UnknownCharacterClassError,
)

log = loguru_logger.bind(name="password_policy")

_REQUIRED_CHARACTERS_BY_SIZE: dict[int, str] = {
    2: "a letter and a number",
    4: "uppercase, lowercase, numeric, or special characters",
}


def get_character_rules(
    config_string: str | None,
) -> tuple[CharacterClassRule, ...]:
    """Get character rules from config string, defaults if it is blank."""
    log.debug(f"Character rules config string: {config_string!r}")
    if not config_string or not config_string.strip():
        return default_rules()
    return parse_character_rules(config_string)


def default_rules() -> tuple[CharacterClassRule, ...]:
    """Out-of-the-box character rules."""
    return character_rules_4dot0()


def character_rules_4dot0() -> tuple[CharacterClassRule, ...]:
    """One letter and one digit."""
    return (
        CharacterClassRule(CharacterClass.ALPHABETICAL, 1),
        CharacterClassRule(CharacterClass.DIGIT, 1),
    )


def character_rules_harvard_level3() -> tuple[CharacterClassRule, ...]:
    """One of each: uppercase, lowercase, digit and special."""
    return (
        CharacterClassRule(CharacterClass.UPPERCASE, 1),
        CharacterClassRule(CharacterClass.LOWERCASE, 1),
        CharacterClassRule(CharacterClass.DIGIT, 1),
        CharacterClassRule(CharacterClass.SPECIAL, 1),
    )


def parse_character_rules(
    config_string: str,
) -> tuple[CharacterClassRule, ...]:
    """Parse character rules config string.

    :param str config_string: comma separated pairs,
        e.g. ``UpperCase:1,LowerCase:1,Digit:1,Special:1``
    :raises CharacterRulesSyntaxError: pair is not `Name:Count`
    :raises UnknownCharacterClassError: class name is not recognized
    :raises InvalidCharacterCountError: count is not a non-negative integer
    :return tuple[CharacterClassRule, ...]: rules in order of appearance
    """
    rules = []
    for type_plus_num in config_string.split(CHARACTER_RULES_SEPARATOR):
        fields = type_plus_num.split(CHARACTER_RULE_FIELDS_SEPARATOR)
        if len(fields) != 2:
            raise CharacterRulesSyntaxError(
                f"Character rule `{type_plus_num.strip()}` must be "
                "in `Name:Count` format",
            )

        name, num = (value.strip() for value in fields)

        character_class = CharacterClass.from_name(name)
        if character_class is None:
            raise UnknownCharacterClassError(
                f"Unknown character class `{name}`, supported: "
                f"{', '.join(CharacterClass)}",
            )

        if not num.isdecimal():
            raise InvalidCharacterCountError(
                f"Count of `{name}` must be a non-negative integer, "
                f"got `{num}`",
            )

        rules.append(CharacterClassRule(character_class, int(num)))

    return tuple(rules)


def format_character_rules(rules: Iterable[CharacterClassRule]) -> str:
    """Render rules back to config string."""
    return CHARACTER_RULES_SEPARATOR.join(str(rule) for rule in rules)


def describe_required_characters(
    rules: Iterable[CharacterClassRule],
) -> str:
    """Get human readable phrase for a known rule set shape."""
    size = len(tuple(rules))
    return _REQUIRED_CHARACTERS_BY_SIZE.get(size, UNKNOWN_COMPOSITION)
