"""Password requirements description.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterable

from .character_rules import describe_required_characters
from .dataclasses import PolicyConfig, RequirementStatus
from .enums import ErrorKind, StrengthEstimator
from .error_messages import RequirementMessages

_OK_MARK = "[ok]"
_FAIL_MARK = "[fail]"
_NO_MARK = "[ ]"


def _good_strength_note(config: PolicyConfig) -> str:
    if not config.good_strength:
        return ""

    if config.strength_estimator == StrengthEstimator.ENTROPY:
        template = RequirementMessages.GOOD_STRENGTH_ENTROPY
    else:
        template = RequirementMessages.GOOD_STRENGTH_LENGTH

    return f" ({template.format(config.good_strength)})"


def _requirement_texts(config: PolicyConfig) -> list[tuple[ErrorKind, str]]:
    texts = []

    if config.min_length:
        texts.append((
            ErrorKind.TOO_SHORT,
            RequirementMessages.MIN_LENGTH.format(config.min_length)
            + _good_strength_note(config),
        ))

    if config.max_length:
        texts.append((
            ErrorKind.TOO_LONG,
            RequirementMessages.MAX_LENGTH.format(config.max_length),
        ))

    if config.min_characteristics:
        texts.append((
            ErrorKind.INSUFFICIENT_CHARACTERISTICS,
            RequirementMessages.CHARACTERISTICS.format(
                config.min_characteristics,
                describe_required_characters(config.character_rules),
            ),
        ))

    if config.is_repeating_rule_enabled:
        texts.append((
            ErrorKind.REPEATED_CHARACTERS,
            RequirementMessages.REPEATING.format(
                config.max_repeating_characters,
            ),
        ))

    if config.is_dictionary_enabled:
        texts.append((
            ErrorKind.DICTIONARY_MATCH,
            RequirementMessages.DICTIONARY,
        ))

    if config.expiration_days:
        text = RequirementMessages.EXPIRATION.format(config.expiration_days)
        if config.expiration_grace_length:
            grace = RequirementMessages.EXPIRATION_GRACE.format(
                config.expiration_grace_length,
            )
            text += f" ({grace})"
        texts.append((ErrorKind.EXPIRED, text))

    return texts


def describe_requirements(
    config: PolicyConfig,
    errors: Iterable[ErrorKind] | None = None,
) -> list[RequirementStatus]:
    """Describe enabled password requirements as a checklist.

    :param PolicyConfig config: policy to describe
    :param Iterable[ErrorKind] | None errors: result of a prior evaluation,
        ``satisfied`` is ``None`` for every line when omitted
    :return list[RequirementStatus]: lines in error kind order
    """
    violated = None if errors is None else set(errors)

    return [
        RequirementStatus(
            kind=kind,
            satisfied=None if violated is None else kind not in violated,
            text=text,
        )
        for kind, text in _requirement_texts(config)
    ]


def format_requirements(statuses: Iterable[RequirementStatus]) -> str:
    """Render checklist as plain text, one requirement per line."""
    lines = []
    for status in statuses:
        if status.satisfied is None:
            mark = _NO_MARK
        else:
            mark = _OK_MARK if status.satisfied else _FAIL_MARK
        lines.append(f"{mark} {status.text}")
    return "\n".join(lines)
