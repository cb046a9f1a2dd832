"""Password policy constants file.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Literal

CHARACTER_RULES_SEPARATOR: Literal[","] = ","
CHARACTER_RULE_FIELDS_SEPARATOR: Literal[":"] = ":"

UNKNOWN_COMPOSITION: Literal["UNKNOWN"] = "UNKNOWN"

REGEXP_LETTERS: str = r"[a-zA-Z]"
REGEXP_DIGITS: str = r"[0-9]"
REGEXP_UPPERCASE_LETTERS: str = r"[A-Z]"
REGEXP_LOWERCASE_LETTERS: str = r"[a-z]"
REGEXP_SPECIAL_SYMBOLS: str = r"[^a-zA-Z0-9\s]"
REGEXP_WHITESPACES: str = r"\s"

LOWERCASE_POOL_SIZE: Literal[26] = 26
UPPERCASE_POOL_SIZE: Literal[26] = 26
DIGITS_POOL_SIZE: Literal[10] = 10
SPECIAL_POOL_SIZE: Literal[32] = 32
WHITESPACE_POOL_SIZE: Literal[1] = 1

DICTIONARY_COMMENT_PREFIX: Literal["#"] = "#"
DICTIONARY_ENCODING: Literal["utf-8"] = "utf-8"

LOG_FILE_PATTERN: str = "logs/password_policy_{time:DD-MM-YYYY}.log"
