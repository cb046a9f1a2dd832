"""Conftest for password policy tests.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterator

import pytest
from dishka import Container, Scope

from config import Settings
from ioc import make_password_policy_container
from password_policy import (
    PasswordDictionary,
    PasswordPolicyService,
    PasswordPolicyUseCases,
    PasswordPolicyValidator,
    PasswordValidatorSettings,
)

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Get fixed reference time."""
    return NOW


@pytest.fixture
def expired_last_modified(now: datetime) -> datetime:
    """Get modification time older than a year."""
    return now - timedelta(days=400)


@pytest.fixture
def settings() -> Settings:
    """Get settings."""
    return Settings()


@pytest.fixture
def container(settings: Settings) -> Iterator[Container]:
    """Create test container."""
    ctnr = make_password_policy_container(settings)
    yield ctnr
    ctnr.close()


@pytest.fixture
def password_validator_settings(
    container: Container,
) -> PasswordValidatorSettings:
    """Get password validator settings."""
    return container.get(PasswordValidatorSettings)


@pytest.fixture
def password_policy_validator(
    password_validator_settings: PasswordValidatorSettings,
) -> PasswordPolicyValidator:
    """Get empty password policy validator."""
    return PasswordPolicyValidator(password_validator_settings)


@pytest.fixture
def password_policy_service(container: Container) -> PasswordPolicyService:
    """Get di password policy service."""
    return container.get(PasswordPolicyService)


@pytest.fixture
def password_policy_use_cases(
    container: Container,
) -> Iterator[PasswordPolicyUseCases]:
    """Get di password policy use cases."""
    with container(scope=Scope.REQUEST) as request_container:
        yield request_container.get(PasswordPolicyUseCases)


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    """Write word list with a single weak password."""
    path = tmp_path / "weak_passwords.txt"
    path.write_text("# weak passwords\n56pOtAtO\n\n", encoding="utf-8")
    return path


@pytest.fixture
def potato_dictionary(dictionary_file: Path) -> PasswordDictionary:
    """Get dictionary loaded from word list."""
    return PasswordDictionary.from_files([dictionary_file])
