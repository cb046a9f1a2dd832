"""Password policies module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .character_rules import (
    default_rules,
    describe_required_characters,
    get_character_rules,
    parse_character_rules,
)
from .dataclasses import (
    CharacterClassRule,
    EvaluationContext,
    PolicyConfig,
    RequirementStatus,
)
from .dictionary import PasswordDictionary
from .enums import CharacterClass, ErrorKind, StrengthEstimator
from .exceptions import ConfigError
from .requirements import describe_requirements
from .service import PasswordPolicyService
from .settings import PasswordValidatorSettings
from .use_cases import PasswordPolicyUseCases
from .validator import PasswordPolicyValidator

__all__ = [
    "CharacterClass",
    "CharacterClassRule",
    "ConfigError",
    "ErrorKind",
    "EvaluationContext",
    "PasswordDictionary",
    "PasswordPolicyService",
    "PasswordPolicyUseCases",
    "PasswordPolicyValidator",
    "PasswordValidatorSettings",
    "PolicyConfig",
    "RequirementStatus",
    "StrengthEstimator",
    "default_rules",
    "describe_required_characters",
    "describe_requirements",
    "get_character_rules",
    "parse_character_rules",
]
