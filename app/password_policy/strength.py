"""Password strength estimators.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import math
import re

from .constants import (
    DIGITS_POOL_SIZE,
    LOWERCASE_POOL_SIZE,
    REGEXP_DIGITS,
    REGEXP_LOWERCASE_LETTERS,
    REGEXP_SPECIAL_SYMBOLS,
    REGEXP_UPPERCASE_LETTERS,
    REGEXP_WHITESPACES,
    SPECIAL_POOL_SIZE,
    UPPERCASE_POOL_SIZE,
    WHITESPACE_POOL_SIZE,
)
from .enums import StrengthEstimator

_POOLS: tuple[tuple[str, int], ...] = (
    (REGEXP_LOWERCASE_LETTERS, LOWERCASE_POOL_SIZE),
    (REGEXP_UPPERCASE_LETTERS, UPPERCASE_POOL_SIZE),
    (REGEXP_DIGITS, DIGITS_POOL_SIZE),
    (REGEXP_SPECIAL_SYMBOLS, SPECIAL_POOL_SIZE),
    (REGEXP_WHITESPACES, WHITESPACE_POOL_SIZE),
)


def length_strength(password: str) -> float:
    """Score password by its number of characters."""
    return float(len(password))


def entropy_strength(password: str) -> float:
    """Estimate password entropy in bits.

    Uses character class pool size and length to estimate entropy.
    This is not a dictionary or pattern aware analysis.
    """
    pool_size = sum(
        size for regexp, size in _POOLS if re.search(regexp, password)
    )
    if pool_size <= 1:
        return 0.0

    return len(password) * math.log2(pool_size)


def estimate_strength(
    password: str,
    estimator: StrengthEstimator = StrengthEstimator.LENGTH,
) -> float:
    """Compute comparable strength score of the password."""
    if estimator == StrengthEstimator.ENTROPY:
        return entropy_strength(password)
    return length_strength(password)
