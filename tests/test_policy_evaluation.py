"""Test password policy evaluation.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import sys
from dataclasses import replace
from datetime import datetime, timedelta

import pytest

from password_policy import (
    ErrorKind,
    EvaluationContext,
    PasswordDictionary,
    PasswordPolicyUseCases,
    PolicyConfig,
    StrengthEstimator,
    get_character_rules,
)

_HARVARD_RULES = "UpperCase:1,LowerCase:1,Digit:1,Special:1"


@pytest.fixture
def strict_policy(potato_dictionary: PasswordDictionary) -> PolicyConfig:
    """Get policy with every check enabled except good strength."""
    return PolicyConfig(
        min_length=8,
        max_length=0,
        character_rules=get_character_rules(_HARVARD_RULES),
        min_characteristics=3,
        max_repeating_characters=4,
        dictionary=potato_dictionary,
        good_strength=0,
        expiration_days=365,
    )


@pytest.fixture
def expired_context(
    expired_last_modified: datetime,
    now: datetime,
) -> EvaluationContext:
    """Get context of a password changed more than a year ago."""
    return EvaluationContext(last_modified=expired_last_modified, now=now)


@pytest.mark.parametrize(
    ("password", "expected"),
    [
        (
            "p otato",
            [
                ErrorKind.TOO_SHORT,
                ErrorKind.INSUFFICIENT_CHARACTERISTICS,
                ErrorKind.EXPIRED,
            ],
        ),
        (
            "56Potato",
            [ErrorKind.DICTIONARY_MATCH, ErrorKind.EXPIRED],
        ),
        (
            "55Potato",
            [ErrorKind.EXPIRED],
        ),
        (
            "Potato55!",
            [ErrorKind.EXPIRED],
        ),
        (
            "Potato5555!",
            [ErrorKind.EXPIRED],
        ),
        (
            "Potato55555!",
            [ErrorKind.REPEATED_CHARACTERS, ErrorKind.EXPIRED],
        ),
        (
            "",
            [
                ErrorKind.TOO_SHORT,
                ErrorKind.INSUFFICIENT_CHARACTERISTICS,
                ErrorKind.EXPIRED,
            ],
        ),
    ],
)
def test_evaluate_expired_password(
    password_policy_use_cases: PasswordPolicyUseCases,
    strict_policy: PolicyConfig,
    expired_context: EvaluationContext,
    password: str,
    expected: list[ErrorKind],
) -> None:
    """Test violations of a password changed long ago."""
    errors = password_policy_use_cases.evaluate(
        password,
        strict_policy,
        expired_context,
    )
    assert errors == expected


def test_evaluate_fresh_password(
    password_policy_use_cases: PasswordPolicyUseCases,
    strict_policy: PolicyConfig,
    now: datetime,
) -> None:
    """Test that a recently changed password is not expired."""
    context = EvaluationContext(last_modified=now - timedelta(days=3), now=now)
    assert not password_policy_use_cases.evaluate(
        "Potato55!",
        strict_policy,
        context,
    )


def test_evaluate_without_modification_time(
    password_policy_use_cases: PasswordPolicyUseCases,
    strict_policy: PolicyConfig,
) -> None:
    """Test that expiration is skipped without modification time."""
    errors = password_policy_use_cases.evaluate("p otato", strict_policy)
    assert errors == [
        ErrorKind.TOO_SHORT,
        ErrorKind.INSUFFICIENT_CHARACTERISTICS,
    ]


@pytest.mark.parametrize(
    "password",
    ["", "p", "0000000000", "56Potato", "a" * 100, "p otato"],
)
def test_evaluate_everything_disabled(
    password_policy_use_cases: PasswordPolicyUseCases,
    expired_context: EvaluationContext,
    password: str,
) -> None:
    """Test that a policy without checks accepts any password."""
    assert password_policy_use_cases.evaluate(password, PolicyConfig()) == []
    assert (
        password_policy_use_cases.evaluate(
            password,
            PolicyConfig(),
            expired_context,
        )
        == []
    )


@pytest.mark.parametrize(
    "password",
    ["56potato56potato56potato", "a" * 20, "p otato p otato p otato"],
)
def test_evaluate_good_strength_bypass(
    password_policy_use_cases: PasswordPolicyUseCases,
    strict_policy: PolicyConfig,
    expired_context: EvaluationContext,
    password: str,
) -> None:
    """Test that strong passwords are exempt from other checks."""
    policy = replace(strict_policy, good_strength=20, max_length=10)
    assert (
        password_policy_use_cases.evaluate(password, policy, expired_context)
        == []
    )


def test_evaluate_good_strength_below_threshold(
    password_policy_use_cases: PasswordPolicyUseCases,
    strict_policy: PolicyConfig,
) -> None:
    """Test that password shorter than threshold is fully checked."""
    policy = replace(strict_policy, good_strength=20)
    errors = password_policy_use_cases.evaluate("a" * 19, policy)
    assert errors == [
        ErrorKind.INSUFFICIENT_CHARACTERISTICS,
        ErrorKind.REPEATED_CHARACTERS,
    ]


def test_evaluate_expiration_overrides_strength(
    password_policy_use_cases: PasswordPolicyUseCases,
    strict_policy: PolicyConfig,
    expired_context: EvaluationContext,
) -> None:
    """Test that expiration still applies to strong passwords if enabled."""
    policy = replace(
        strict_policy,
        good_strength=20,
        expiration_overrides_strength=True,
    )
    errors = password_policy_use_cases.evaluate(
        "a" * 20,
        policy,
        expired_context,
    )
    assert errors == [ErrorKind.EXPIRED]


def test_evaluate_entropy_estimator(
    password_policy_use_cases: PasswordPolicyUseCases,
    strict_policy: PolicyConfig,
) -> None:
    """Test good strength bypass with entropy estimator."""
    policy = replace(
        strict_policy,
        good_strength=60,
        strength_estimator=StrengthEstimator.ENTROPY,
    )
    evaluate = password_policy_use_cases.evaluate
    assert evaluate("xkcdpasswordhorse", policy) == []
    assert evaluate("abc", policy) == [
        ErrorKind.TOO_SHORT,
        ErrorKind.INSUFFICIENT_CHARACTERISTICS,
    ]


def test_evaluate_idempotence(
    password_policy_use_cases: PasswordPolicyUseCases,
    strict_policy: PolicyConfig,
    expired_context: EvaluationContext,
) -> None:
    """Test that repeated evaluation gives the same result."""
    first = password_policy_use_cases.evaluate(
        "p otato",
        strict_policy,
        expired_context,
    )
    second = password_policy_use_cases.evaluate(
        "p otato",
        strict_policy,
        expired_context,
    )
    assert first == second


@pytest.mark.parametrize(
    ("password", "expected"),
    [
        ("a" * 5, [ErrorKind.TOO_SHORT]),
        ("a" * 6, []),
        ("a" * 10, []),
        ("a" * 11, [ErrorKind.TOO_LONG]),
    ],
)
def test_evaluate_length_boundaries(
    password_policy_use_cases: PasswordPolicyUseCases,
    password: str,
    expected: list[ErrorKind],
) -> None:
    """Test that length equal to a bound is accepted."""
    policy = PolicyConfig(min_length=6, max_length=10)
    assert password_policy_use_cases.evaluate(password, policy) == expected


def test_evaluate_unbounded_max_length(
    password_policy_use_cases: PasswordPolicyUseCases,
) -> None:
    """Test that zero maximum length never fails."""
    policy = PolicyConfig(min_length=6, max_length=0)
    assert password_policy_use_cases.evaluate("a" * 10_000, policy) == []


def test_evaluate_dictionary_exact_match(
    password_policy_use_cases: PasswordPolicyUseCases,
    potato_dictionary: PasswordDictionary,
) -> None:
    """Test exact dictionary matching mode."""
    policy = PolicyConfig(
        dictionary=potato_dictionary,
        dictionary_substring_match=False,
    )
    assert password_policy_use_cases.evaluate("56POTATO", policy) == [
        ErrorKind.DICTIONARY_MATCH,
    ]
    assert password_policy_use_cases.evaluate("x56POTATO", policy) == []


def test_check_password_violations_uses_current_policy(
    password_policy_use_cases: PasswordPolicyUseCases,
) -> None:
    """Test check with default policy from settings."""
    assert password_policy_use_cases.check_password_violations("p") == [
        ErrorKind.TOO_SHORT,
        ErrorKind.INSUFFICIENT_CHARACTERISTICS,
    ]
    assert password_policy_use_cases.check_password_violations("potato1") == []
    assert password_policy_use_cases.check_password_violations("p" * 20) == []


def test_evaluate_huge_repeating_limit(
    password_policy_use_cases: PasswordPolicyUseCases,
) -> None:
    """Test that any integer repetition limit is accepted."""
    policy = PolicyConfig(max_repeating_characters=sys.maxsize)
    assert password_policy_use_cases.evaluate("a" * 100, policy) == []

    policy = PolicyConfig(max_repeating_characters=2**32)
    assert password_policy_use_cases.evaluate("0000", policy) == []


_FRESH_DAYS = 300
_EXPIRED_DAYS = 400
_EVERYTHING_OFF = {
    "min_length": 0,
    "min_characteristics": 0,
    "expiration_days": 0,
}
_RULES_4DOT0 = {
    "character_rules": get_character_rules(""),
    "min_characteristics": 2,
    "min_length": 6,
}


@pytest.mark.parametrize(
    ("password", "overrides", "age_days", "expected"),
    [
        (
            "p otato",
            {"good_strength": 20},
            _FRESH_DAYS,
            [ErrorKind.TOO_SHORT, ErrorKind.INSUFFICIENT_CHARACTERISTICS],
        ),
        ("p", _EVERYTHING_OFF, _EXPIRED_DAYS, []),
        (
            "po",
            _EVERYTHING_OFF | {"max_length": 1},
            _EXPIRED_DAYS,
            [ErrorKind.TOO_LONG],
        ),
        (
            "potato",
            _EVERYTHING_OFF
            | {"expiration_days": 365, "expiration_grace_length": 7},
            _FRESH_DAYS,
            [],
        ),
        (
            "potato",
            _EVERYTHING_OFF
            | {"expiration_days": 365, "expiration_grace_length": 7},
            _EXPIRED_DAYS,
            [ErrorKind.EXPIRED],
        ),
        (
            "p otato",
            {"expiration_days": 401},
            _EXPIRED_DAYS,
            [ErrorKind.TOO_SHORT, ErrorKind.INSUFFICIENT_CHARACTERISTICS],
        ),
        (
            "one potato",
            {},
            _FRESH_DAYS,
            [ErrorKind.INSUFFICIENT_CHARACTERISTICS],
        ),
        (
            "Two potato",
            {},
            _FRESH_DAYS,
            [ErrorKind.INSUFFICIENT_CHARACTERISTICS],
        ),
        ("Three.potato", {}, _FRESH_DAYS, []),
        (
            "F0ur.potato",
            {"expiration_grace_length": 15, "min_length": 10},
            _FRESH_DAYS,
            [],
        ),
        ("4.potato", {}, _FRESH_DAYS, []),
        ("55Potato", {}, _FRESH_DAYS, []),
        ("56Potato", {}, _FRESH_DAYS, [ErrorKind.DICTIONARY_MATCH]),
        ("6 Potato", {"good_strength": 20}, _FRESH_DAYS, []),
        (
            "7 Potato",
            {"good_strength": 20, "min_characteristics": 4},
            _FRESH_DAYS,
            [ErrorKind.INSUFFICIENT_CHARACTERISTICS],
        ),
        (
            "7 Potato901234567890",
            {"good_strength": 20, "min_characteristics": 4},
            _FRESH_DAYS,
            [],
        ),
        (
            "8.Potato",
            {"good_strength": 20, "min_characteristics": 4},
            _FRESH_DAYS,
            [],
        ),
        (
            "Potato.Too.12345.Short",
            {"min_length": 23},
            _FRESH_DAYS,
            [ErrorKind.TOO_SHORT],
        ),
        (
            "Potatoes on my plate with beef",
            {"good_strength": 30},
            _EXPIRED_DAYS,
            [],
        ),
        (
            "Potatoes on my plate with pie.",
            {"good_strength": 30},
            _EXPIRED_DAYS,
            [],
        ),
        (
            "Potatoes on a plate  .",
            {"good_strength": 30},
            _EXPIRED_DAYS,
            [],
        ),
        (
            "Repeated Potatoes:0000",
            {"good_strength": 30, "max_repeating_characters": 5},
            _EXPIRED_DAYS,
            [],
        ),
        (
            "Repeated Potatoes:000",
            {"good_strength": 30},
            _EXPIRED_DAYS,
            [],
        ),
        (
            "Repeated Potatoes:00000",
            {"good_strength": 30},
            _EXPIRED_DAYS,
            [ErrorKind.REPEATED_CHARACTERS],
        ),
        (
            "          ",
            {"good_strength": 30},
            _EXPIRED_DAYS,
            [ErrorKind.INSUFFICIENT_CHARACTERISTICS],
        ),
        (
            "         ",
            {"good_strength": 30},
            _EXPIRED_DAYS,
            [ErrorKind.INSUFFICIENT_CHARACTERISTICS, ErrorKind.EXPIRED],
        ),
        ("potat1", _RULES_4DOT0 | {"good_strength": 20}, _FRESH_DAYS, []),
        (
            "potat000000000000000",
            _RULES_4DOT0 | {"good_strength": 20},
            _FRESH_DAYS,
            [],
        ),
        (
            "potat00000000000000",
            _RULES_4DOT0 | {"good_strength": 20},
            _FRESH_DAYS,
            [ErrorKind.REPEATED_CHARACTERS],
        ),
    ],
)
def test_evaluate_scenarios(
    password_policy_use_cases: PasswordPolicyUseCases,
    strict_policy: PolicyConfig,
    now: datetime,
    password: str,
    overrides: dict,
    age_days: int,
    expected: list[ErrorKind],
) -> None:
    """Test evaluation table of passwords and policy variations.

    Base policy requires 3 of 4 character classes, at least 8 characters,
    no more than 4 repeating characters, no dictionary words and a change
    every 365 days for passwords shorter than 10 characters.
    """
    policy = replace(
        strict_policy,
        **({"expiration_grace_length": 10} | overrides),
    )
    context = EvaluationContext(
        last_modified=now - timedelta(days=age_days),
        now=now,
    )

    assert password_policy_use_cases.evaluate(
        password,
        policy,
        context,
    ) == expected
