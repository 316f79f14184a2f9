import hashlib
from collections import Counter
from datetime import datetime, timezone
from typing import Dict, Optional

from string_analyzer.errors import InvalidInputError
from string_analyzer.schemas import StringProperties, StringRecord


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, whitespace and punctuation kept)"""
    lowered = text.lower()
    return lowered == lowered[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze(value: str) -> StringProperties:
    """Analyze a string and return all computed properties"""
    if not isinstance(value, str):
        raise InvalidInputError()

    try:
        sha256_hash = compute_sha256(value)
    except UnicodeEncodeError:
        # lone surrogates, e.g. "\ud800" in JSON, have no UTF-8 form
        raise InvalidInputError("'value' must be valid Unicode text")

    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=sha256_hash,
        character_frequency_map=get_character_frequency(value),
    )


def build_record(value: str, created_at: Optional[datetime] = None) -> StringRecord:
    """Analyze a string and wrap it into a record ready to be stored"""
    properties = analyze(value)
    return StringRecord(
        id=properties.sha256_hash,
        value=value,
        properties=properties,
        created_at=created_at or datetime.now(timezone.utc),
    )
