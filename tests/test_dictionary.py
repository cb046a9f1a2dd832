"""Test password dictionary.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pathlib import Path

import pytest

from password_policy import PasswordDictionary
from password_policy.dictionary import filter_words
from password_policy.exceptions import DictionaryLoadError


def test_filter_words() -> None:
    """Test that blank and comment lines are dropped."""
    lines = ["# header", "  qwerty  ", "", "   ", "123456\n"]
    assert filter_words(lines) == ["qwerty", "123456"]


def test_dictionary_from_files(
    dictionary_file: Path,
    tmp_path: Path,
) -> None:
    """Test loading of several word lists."""
    other = tmp_path / "other.txt"
    other.write_text("qwerty\nQWERTY\n56potato\n", encoding="utf-8")

    dictionary = PasswordDictionary.from_files([dictionary_file, other])

    assert len(dictionary) == 2
    assert dictionary.words == frozenset({"56potato", "qwerty"})
    assert dictionary.sources == (str(dictionary_file), str(other))


def test_dictionary_missing_file(tmp_path: Path) -> None:
    """Test that unreadable word list is a configuration error."""
    with pytest.raises(DictionaryLoadError):
        PasswordDictionary.from_files([tmp_path / "missing.txt"])


def test_dictionary_contains_any(
    potato_dictionary: PasswordDictionary,
) -> None:
    """Test case-insensitive substring matching."""
    assert potato_dictionary.contains_any("56Potato")
    assert potato_dictionary.contains_any("xx56POTATOxx")
    assert not potato_dictionary.contains_any("55Potato")
    assert not potato_dictionary.contains_any("56Pota")
    assert not potato_dictionary.contains_any("")


def test_dictionary_equals_any(
    potato_dictionary: PasswordDictionary,
) -> None:
    """Test case-insensitive exact matching."""
    assert potato_dictionary.equals_any("56POTATO")
    assert not potato_dictionary.equals_any("56POTATO!")


def test_dictionary_case_sensitive() -> None:
    """Test that case-sensitive dictionary keeps words as is."""
    dictionary = PasswordDictionary.from_words(
        ["56pOtAtO"],
        case_sensitive=True,
    )
    assert dictionary.contains_any("x56pOtAtO")
    assert not dictionary.contains_any("56Potato")


def test_dictionary_different_word_lengths() -> None:
    """Test substring matching with words of several lengths."""
    dictionary = PasswordDictionary.from_words(["abc", "password", "ab"])
    assert dictionary.contains_any("xxABxx")
    assert dictionary.contains_any("MyPassword1")
    assert not dictionary.contains_any("a-b-c")


def test_empty_dictionary() -> None:
    """Test that empty dictionary matches nothing."""
    dictionary = PasswordDictionary()
    assert not dictionary
    assert len(dictionary) == 0
    assert not dictionary.contains_any("anything")
    assert not dictionary.equals_any("")
