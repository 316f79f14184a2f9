from pydantic import BaseModel, Field, StrictStr
from typing import Dict, Optional, List, Any
from datetime import datetime


class StringCreate(BaseModel):
    value: StrictStr = Field(..., description="String to analyze")


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: datetime


class FilterSet(BaseModel):
    """Optional constraints on stored records; None means unconstrained."""
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def applied(self) -> Dict[str, Any]:
        """Only the filters that were actually set"""
        return self.model_dump(exclude_none=True)


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: FilterSet


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Optional[Dict[str, Any]] = None


class InterpretedQueryResponse(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQueryResponse
