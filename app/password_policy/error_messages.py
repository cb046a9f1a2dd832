"""Error Messages for password validator checks.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterable

from .enums import ErrorKind


class ErrorMessages:
    """Error messages for password validation checks."""

    TOO_SHORT = "Password must be longer"
    TOO_LONG = "Password should be shorter"

    INSUFFICIENT_CHARACTERISTICS = "Password must contain more kinds of characters"  # fmt: skip # noqa: E501
    REPEATED_CHARACTERS = "Password must contain fewer consecutive repeating characters"  # fmt: skip # noqa: E501

    DICTIONARY_MATCH = "Password must not contain dictionary word"
    EXPIRED = "Password is expired"

    @classmethod
    def get(cls, kind: ErrorKind) -> str:
        """Get message of the error kind."""
        return getattr(cls, kind.value)


class RequirementMessages:
    """Templates of password requirements checklist lines."""

    MIN_LENGTH = "At least {0} characters"
    MAX_LENGTH = "At most {0} characters"
    CHARACTERISTICS = "At least {0} of the following: {1}"
    REPEATING = "No more than {0} repeating characters in a row"
    DICTIONARY = "No dictionary words"
    EXPIRATION = "Changed at least every {0} days"

    GOOD_STRENGTH_LENGTH = "passwords of at least {0} characters are exempt from all other requirements"  # fmt: skip # noqa: E501
    GOOD_STRENGTH_ENTROPY = "passwords with estimated strength of at least {0} bits are exempt from all other requirements"  # fmt: skip # noqa: E501
    EXPIRATION_GRACE = "passwords of at least {0} characters do not expire"


def parse_messages(errors: Iterable[ErrorKind | str]) -> str:
    """Join messages of error kinds into one human readable string."""
    return " ".join(ErrorMessages.get(ErrorKind(error)) for error in errors)
