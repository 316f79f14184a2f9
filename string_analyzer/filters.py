from typing import Iterable, List

from string_analyzer.schemas import FilterSet, StringRecord


def matches(record: StringRecord, filters: FilterSet) -> bool:
    """Check a record against every filter that is set (logical AND)"""
    props = record.properties

    if filters.is_palindrome is not None and props.is_palindrome != filters.is_palindrome:
        return False

    if filters.min_length is not None and props.length < filters.min_length:
        return False

    if filters.max_length is not None and props.length > filters.max_length:
        return False

    if filters.word_count is not None and props.word_count != filters.word_count:
        return False

    if filters.contains_character is not None:
        # Case-insensitive on both sides
        if filters.contains_character.lower() not in record.value.lower():
            return False

    return True


def apply_filters(records: Iterable[StringRecord], filters: FilterSet) -> List[StringRecord]:
    """Keep the records matching the filters, preserving order"""
    return [record for record in records if matches(record, filters)]
