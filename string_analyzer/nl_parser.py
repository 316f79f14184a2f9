"""Natural-language query interpreter.

Maps a free-text phrase onto a ``FilterSet`` using a fixed, ordered list of
phrase rules. Every rule is checked against the lowercased query and may fire
independently of the others. Rules are applied in list order, so a later rule
overwrites a field already set by an earlier one (e.g. "containing the first
vowel" replaces the letter picked up by "containing the letter x").

Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}
"""

import logging
import re
from typing import Any, Callable, Dict, List, NamedTuple

from string_analyzer.errors import UnparsableQueryError
from string_analyzer.schemas import FilterSet, InterpretedQuery

logger = logging.getLogger(__name__)


class Rule(NamedTuple):
    name: str
    pattern: re.Pattern
    effect: Callable[[re.Match], Dict[str, Any]]


RULES: List[Rule] = [
    Rule(
        "palindrome",
        re.compile(r"palindrom(?:e|ic)"),
        lambda m: {"is_palindrome": True},
    ),
    Rule(
        "longer_than",
        re.compile(r"longer than (\d+)"),
        # strict bound -> inclusive minimum
        lambda m: {"min_length": int(m.group(1)) + 1},
    ),
    Rule(
        "shorter_than",
        re.compile(r"shorter than (\d+)"),
        lambda m: {"max_length": int(m.group(1)) - 1},
    ),
    Rule(
        "single_word",
        re.compile(r"single word"),
        lambda m: {"word_count": 1},
    ),
    Rule(
        "containing_letter",
        re.compile(r"containing the letter (\w)"),
        lambda m: {"contains_character": m.group(1)},
    ),
    Rule(
        "first_vowel",
        re.compile(r"containing the first vowel"),
        lambda m: {"contains_character": "a"},
    ),
]


def interpret(query: str) -> InterpretedQuery:
    """Translate a natural language query into structured filters.

    Raises:
        UnparsableQueryError: if no rule matches the query.
    """
    lowered = (query or "").lower()
    parsed: Dict[str, Any] = {}

    for rule in RULES:
        match = rule.pattern.search(lowered)
        if match:
            parsed.update(rule.effect(match))
            logger.debug(f"Rule '{rule.name}' matched query {query!r}")

    if not parsed:
        logger.warning(f"Unable to parse natural language query: {query!r}")
        raise UnparsableQueryError()

    return InterpretedQuery(original=query, parsed_filters=FilterSet(**parsed))
