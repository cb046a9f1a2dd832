"""Errors base.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum


class BaseDomainException(Exception):  # noqa N818
    """Base exception of password policy domain.

    Every subclass declares integer ``code`` for error reporting.
    """

    code: IntEnum

    def __init_subclass__(cls) -> None:
        """Initialize subclass."""
        super().__init_subclass__()

        if not hasattr(cls, "code"):
            raise AttributeError("code must be set")

    @property
    def detail(self) -> str:
        """Get error description with its type and code."""
        return f"{type(self).__name__} [{self.code}]: {self}"
