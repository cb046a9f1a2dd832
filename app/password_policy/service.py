"""Password policy service module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from threading import Lock

from loguru import logger as loguru_logger

from .character_rules import format_character_rules, get_character_rules
from .dataclasses import DefaultPasswordPolicyPreset, PolicyConfig
from .dictionary import PasswordDictionary

log = loguru_logger.bind(name="password_policy")


def default_policy(
    dictionary: PasswordDictionary | None = None,
) -> PolicyConfig:
    """Build policy with default preset configuration."""
    preset = DefaultPasswordPolicyPreset()
    return PolicyConfig(
        min_length=preset.min_length,
        max_length=preset.max_length,
        character_rules=get_character_rules(preset.character_rules),
        min_characteristics=preset.min_characteristics,
        max_repeating_characters=preset.max_repeating_characters,
        dictionary=dictionary or PasswordDictionary(),
        good_strength=preset.good_strength,
        expiration_days=preset.expiration_days,
        expiration_grace_length=preset.expiration_grace_length,
    )


class PasswordPolicyService:
    """Holder of the current password policy snapshot.

    Policies are immutable, updates replace the whole snapshot,
    so readers never observe a partially applied change.
    """

    _policy: PolicyConfig

    def __init__(self, policy: PolicyConfig) -> None:
        """Initialize PasswordPolicyService with a policy snapshot."""
        self._policy = policy
        self._lock = Lock()

    def get_policy(self) -> PolicyConfig:
        """Get the current password policy."""
        return self._policy

    def update_policy(self, policy: PolicyConfig) -> None:
        """Replace current password policy.

        :param PolicyConfig policy: The new policy snapshot.
        """
        with self._lock:
            self._policy = policy

        log.info(
            "Password policy updated: "
            f"min_length={policy.min_length}, "
            f"max_length={policy.max_length}, "
            f"character_rules={format_character_rules(policy.character_rules)!r}, "  # noqa: E501
            f"min_characteristics={policy.min_characteristics}, "
            f"dictionary_words={len(policy.dictionary)}",
        )

    def reset_policy(self) -> PolicyConfig:
        """Reset password policy to default configuration.

        Loaded dictionary is kept, word lists are not a part of the preset.
        """
        policy = default_policy(self._policy.dictionary)
        self.update_policy(policy)
        return policy
