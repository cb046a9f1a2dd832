"""Password Policy Use Cases.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from loguru import logger as loguru_logger

from .dataclasses import EvaluationContext, PolicyConfig, RequirementStatus
from .enums import ErrorKind
from .requirements import describe_requirements
from .service import PasswordPolicyService
from .settings import PasswordValidatorSettings
from .strength import estimate_strength
from .validator import PasswordPolicyValidator

log = loguru_logger.bind(name="password_policy")


class PasswordPolicyUseCases:
    """Password Policy Use Cases."""

    _password_policy_service: PasswordPolicyService
    _password_validator_settings: PasswordValidatorSettings

    def __init__(
        self,
        password_policy_service: PasswordPolicyService,
        password_validator_settings: PasswordValidatorSettings,
    ) -> None:
        """Initialize Password Policy Use Cases."""
        self._password_policy_service = password_policy_service
        self._password_validator_settings = password_validator_settings

    def is_good_strength(self, password: str, config: PolicyConfig) -> bool:
        """Check if password is strong enough to skip other requirements."""
        if not config.good_strength:
            return False

        score = estimate_strength(password, config.strength_estimator)
        return score >= config.good_strength

    def evaluate(
        self,
        password: str,
        config: PolicyConfig,
        context: EvaluationContext | None = None,
    ) -> list[ErrorKind]:
        """Validate password with given Password Policy.

        :param str password: raw password
        :param PolicyConfig config: policy snapshot
        :param EvaluationContext | None context: password modification data
        :return list[ErrorKind]: violated rules, empty if accepted
        """
        context = context or EvaluationContext()
        validator = PasswordPolicyValidator(self._password_validator_settings)

        if self.is_good_strength(password, config):
            log.debug("Password has good strength, other checks are waived")
            if not config.expiration_overrides_strength:
                return []
        else:
            self._add_composition_checks(validator, config)

        if config.expiration_days:
            validator.not_expired(
                config.expiration_days,
                context.last_modified,
                context.now,
                config.expiration_grace_length,
            )

        validator.validate(password)
        log.debug(f"Password violations: {validator.error_kinds}")
        return list(validator.error_kinds)

    @staticmethod
    def _add_composition_checks(
        validator: PasswordPolicyValidator,
        config: PolicyConfig,
    ) -> None:
        if config.min_length:
            validator.min_length(config.min_length)

        if config.max_length:
            validator.max_length(config.max_length)

        if config.min_characteristics:
            validator.min_characteristics(
                config.character_rules,
                config.min_characteristics,
            )

        if config.max_repeating_characters is not None:
            validator.max_repeating_characters(
                config.max_repeating_characters,
            )

        if config.is_dictionary_enabled:
            if config.dictionary_substring_match:
                validator.not_contain_any_dictionary_word(config.dictionary)
            else:
                validator.not_equal_any_dictionary_word(config.dictionary)

    def describe_requirements(
        self,
        config: PolicyConfig,
        errors: list[ErrorKind] | None = None,
    ) -> list[RequirementStatus]:
        """Describe requirements of the policy for a checklist."""
        return describe_requirements(config, errors)

    def check_password_violations(
        self,
        password: str,
        context: EvaluationContext | None = None,
    ) -> list[ErrorKind]:
        """Validate password with current policy.

        Policy snapshot is read once, so concurrent updates
        do not affect a running check.
        """
        password_policy = self._password_policy_service.get_policy()
        return self.evaluate(password, password_policy, context)

    def get_password_requirements(
        self,
        errors: list[ErrorKind] | None = None,
    ) -> list[RequirementStatus]:
        """Describe requirements of the current policy."""
        password_policy = self._password_policy_service.get_policy()
        return self.describe_requirements(password_policy, errors)
