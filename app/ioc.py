"""DI Provider of password policy module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dishka import (
    Container,
    Provider,
    Scope,
    from_context,
    make_container,
    provide,
)

from config import Settings
from password_policy import (
    PasswordDictionary,
    PasswordPolicyService,
    PasswordPolicyUseCases,
    PasswordValidatorSettings,
    PolicyConfig,
)


class PasswordPolicyProvider(Provider):
    """Provider for password policy."""

    scope = Scope.APP
    settings = from_context(provides=Settings, scope=Scope.APP)

    password_validator_settings = provide(PasswordValidatorSettings)
    password_policy_service = provide(PasswordPolicyService)
    password_policy_use_cases = provide(
        PasswordPolicyUseCases,
        scope=Scope.REQUEST,
    )

    @provide(scope=Scope.APP)
    def get_password_dictionary(
        self,
        settings: Settings,
    ) -> PasswordDictionary:
        """Load word lists once per application."""
        return settings.load_dictionary()

    @provide(scope=Scope.APP)
    def get_policy_config(
        self,
        settings: Settings,
        dictionary: PasswordDictionary,
    ) -> PolicyConfig:
        """Get initial policy snapshot."""
        return settings.to_policy_config(dictionary)


def make_password_policy_container(settings: Settings) -> Container:
    """Create application container for settings."""
    return make_container(
        PasswordPolicyProvider(),
        context={Settings: settings},
    )
