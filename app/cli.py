"""Password policy command line interface.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import argparse
import sys
from datetime import datetime
from typing import Sequence

from loguru import logger

from config import Settings
from ioc import make_password_policy_container
from password_policy import (
    EvaluationContext,
    PasswordPolicyService,
    PasswordPolicyUseCases,
)
from password_policy.character_rules import format_character_rules
from password_policy.error_messages import parse_messages
from password_policy.exceptions import ConfigError
from password_policy.requirements import format_requirements

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_CONFIG_ERROR = 2


def setup_logging(settings: Settings, file_sink: bool = False) -> None:
    """Add stderr sink and, if requested, rotating file sink."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
    )
    if not file_sink:
        return

    logger.add(
        settings.LOG_FILE_PATTERN,
        filter=lambda rec: rec["extra"].get("name") == "password_policy",
        retention="10 days",
        rotation="1d",
        colorize=False,
    )


def _read_password(args: argparse.Namespace) -> str:
    if args.password is not None:
        return args.password
    return sys.stdin.readline().rstrip("\r\n")


def _check(
    use_cases: PasswordPolicyUseCases,
    args: argparse.Namespace,
) -> int:
    password = _read_password(args)
    context = EvaluationContext(last_modified=args.last_modified)

    errors = use_cases.check_password_violations(password, context)
    print(format_requirements(use_cases.get_password_requirements(errors)))

    if errors:
        print(parse_messages(errors), file=sys.stderr)
        return EXIT_VIOLATIONS
    return EXIT_OK


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check passwords against password policy",
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--check", action="store_true", help="Check password")
    group.add_argument(
        "--requirements",
        action="store_true",
        help="Show password requirements",
    )
    group.add_argument(
        "--rules",
        action="store_true",
        help="Show character rules",
    )
    parser.add_argument(
        "--password",
        help="Password to check, read from stdin when omitted",
    )
    parser.add_argument(
        "--last-modified",
        type=datetime.fromisoformat,
        default=None,
        help="ISO timestamp of the last password change",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run password policy command.

    :param Sequence[str] | None argv: arguments, ``sys.argv`` if omitted
    :return int: exit code, 1 on violations, 2 on configuration errors
    """
    args = _parse_args(argv)

    try:
        settings = Settings.from_os()
        setup_logging(settings, file_sink=args.check)

        container = make_password_policy_container(settings)
        try:
            with container() as request_container:
                if args.rules:
                    service = request_container.get(PasswordPolicyService)
                    rules = service.get_policy().character_rules
                    print(format_character_rules(rules))
                    return EXIT_OK

                use_cases = request_container.get(PasswordPolicyUseCases)
                if args.requirements:
                    statuses = use_cases.get_password_requirements()
                    print(format_requirements(statuses))
                    return EXIT_OK

                return _check(use_cases, args)
        finally:
            container.close()

    except ConfigError as err:
        print(err.detail, file=sys.stderr)
        return EXIT_CONFIG_ERROR
