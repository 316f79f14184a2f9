"""Tests for the natural-language query interpreter."""

from __future__ import annotations

import pytest

from string_analyzer.errors import UnparsableQueryError
from string_analyzer.nl_parser import RULES, interpret


def test_palindromic_longer_than() -> None:
    result = interpret("palindromic strings longer than 5")
    assert result.parsed_filters.applied() == {"is_palindrome": True, "min_length": 6}


def test_single_word_palindromic() -> None:
    result = interpret("single word palindromic strings")
    assert result.parsed_filters.applied() == {"word_count": 1, "is_palindrome": True}


def test_original_query_is_echoed() -> None:
    query = "All Single Word PALINDROMIC strings"
    result = interpret(query)
    assert result.original == query
    assert result.parsed_filters.applied() == {"word_count": 1, "is_palindrome": True}


def test_palindrome_noun() -> None:
    assert interpret("show me a palindrome").parsed_filters.is_palindrome is True


def test_shorter_than() -> None:
    assert interpret("strings shorter than 10").parsed_filters.applied() == {"max_length": 9}


def test_longer_and_shorter() -> None:
    result = interpret("strings longer than 2 and shorter than 8")
    assert result.parsed_filters.applied() == {"min_length": 3, "max_length": 7}


def test_containing_the_letter() -> None:
    result = interpret("strings containing the letter Z")
    assert result.parsed_filters.applied() == {"contains_character": "z"}


def test_first_vowel() -> None:
    result = interpret("palindromic strings containing the first vowel")
    assert result.parsed_filters.applied() == {"is_palindrome": True, "contains_character": "a"}


def test_first_vowel_overrides_letter() -> None:
    result = interpret("containing the letter z or containing the first vowel")
    assert result.parsed_filters.contains_character == "a"


def test_rules_run_in_fixed_order() -> None:
    names = [rule.name for rule in RULES]
    assert names.index("containing_letter") < names.index("first_vowel")


@pytest.mark.parametrize("query", ["xyz", "", "   ", "longer than many", "strings with vowels"])
def test_unparsable_queries(query: str) -> None:
    with pytest.raises(UnparsableQueryError):
        interpret(query)
