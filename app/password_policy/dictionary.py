"""Password dictionary of weak words.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Self

from loguru import logger as loguru_logger

from .constants import DICTIONARY_COMMENT_PREFIX, DICTIONARY_ENCODING
from .exceptions import DictionaryLoadError

log = loguru_logger.bind(name="password_policy")


def filter_words(lines: Iterable[str]) -> list[str]:
    """Strip entries, drop blank and comment lines."""
    words = []
    for line in lines:
        word = line.strip()
        if not word or word.startswith(DICTIONARY_COMMENT_PREFIX):
            continue
        words.append(word)
    return words


@dataclass(frozen=True)
class PasswordDictionary:
    """Immutable lookup structure of weak passwords and substrings.

    Built once from word lists and shared between evaluations.
    Words are stored case-folded unless ``case_sensitive`` is set.
    """

    words: frozenset[str] = frozenset()
    sources: tuple[str, ...] = ()
    case_sensitive: bool = False

    _min_word_length: int = field(init=False, repr=False, compare=False)
    _max_word_length: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Normalize words and remember word length bounds."""
        words = frozenset(self.normalize(word) for word in self.words if word)
        object.__setattr__(self, "words", words)
        object.__setattr__(self, "sources", tuple(self.sources))

        lengths = [len(word) for word in words]
        object.__setattr__(self, "_min_word_length", min(lengths, default=0))
        object.__setattr__(self, "_max_word_length", max(lengths, default=0))

    def __bool__(self) -> bool:
        return bool(self.words)

    def __len__(self) -> int:
        return len(self.words)

    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        case_sensitive: bool = False,
        sources: Iterable[str] = (),
    ) -> Self:
        """Create dictionary from in-memory words."""
        return cls(
            words=frozenset(filter_words(words)),
            sources=tuple(sources),
            case_sensitive=case_sensitive,
        )

    @classmethod
    def from_files(
        cls,
        paths: Iterable[str | Path],
        case_sensitive: bool = False,
    ) -> Self:
        """Load dictionary from word list files, one entry per line.

        :param Iterable[str | Path] paths: word list locations
        :param bool case_sensitive: keep words case
        :raises DictionaryLoadError: file is missing or unreadable
        :return PasswordDictionary: loaded dictionary
        """
        words: list[str] = []
        sources: list[str] = []

        for path in paths:
            source = str(path)
            try:
                content = Path(path).read_text(encoding=DICTIONARY_ENCODING)
            except (OSError, UnicodeDecodeError) as err:
                raise DictionaryLoadError(
                    f"Can not read password dictionary `{source}`: {err}",
                ) from err

            file_words = filter_words(content.splitlines())
            log.info(f"Loaded {len(file_words)} words from `{source}`")
            words.extend(file_words)
            sources.append(source)

        dictionary = cls.from_words(words, case_sensitive, sources)
        if len(dictionary) < len(words):
            log.warning(
                f"Dropped {len(words) - len(dictionary)} duplicated "
                "dictionary words",
            )
        return dictionary

    def normalize(self, value: str) -> str:
        """Bring value to the dictionary comparison case."""
        return value if self.case_sensitive else value.casefold()

    def equals_any(self, password: str) -> bool:
        """Check if password is exactly one of the words."""
        return self.normalize(password) in self.words

    def contains_any(self, password: str) -> bool:
        """Check if password contains any of the words.

        Slice the password by every word length the dictionary holds.
        Then check if there is an intersection between slices and words.
        """
        if not self.words:
            return False

        pwd = self.normalize(password)
        max_length = min(self._max_word_length, len(pwd))

        subpwd = set(
            pwd[i : i + length]
            for length in range(self._min_word_length, max_length + 1)
            for i in range(len(pwd) - length + 1)
        )
        return bool(subpwd & self.words)
