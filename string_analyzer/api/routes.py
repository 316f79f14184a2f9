from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional
import logging

from string_analyzer.database import get_db
from string_analyzer import crud, schemas
from string_analyzer.errors import ValidationError
from string_analyzer.nl_parser import interpret

router = APIRouter()
logger = logging.getLogger(__name__)


def get_store(db: Session = Depends(get_db)) -> crud.StringStore:
    """Dependency to provide the record store for this request."""
    return crud.SQLAlchemyStringStore(db)


def filter_params(
    is_palindrome: Optional[bool] = Query(None, description="Filter by palindrome (true/false)"),
    min_length: Optional[int] = Query(None, ge=0, description="Minimum string length"),
    max_length: Optional[int] = Query(None, ge=0, description="Maximum string length"),
    word_count: Optional[int] = Query(None, ge=0, description="Exact word count"),
    contains_character: Optional[str] = Query(
        None, min_length=1, description="Strings containing this character (case-insensitive)"
    ),
) -> schemas.FilterSet:
    """Validate the list query parameters into a FilterSet."""
    return schemas.FilterSet(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )


@router.post("/strings", response_model=schemas.StringRecord, status_code=status.HTTP_201_CREATED)
def create_string(
    string_data: schemas.StringCreate,
    store: crud.StringStore = Depends(get_store),
):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    return crud.create_string(store, string_data.value)


@router.get("/strings", response_model=schemas.StringListResponse)
def get_all_strings(
    filters: schemas.FilterSet = Depends(filter_params),
    store: crud.StringStore = Depends(get_store),
):
    """
    Get all strings with optional filtering.
    """
    strings = crud.list_strings(store, filters)
    applied = filters.applied()
    return schemas.StringListResponse(
        data=strings,
        count=len(strings),
        filters_applied=applied or None,
    )


@router.get("/strings/filter-by-natural-language", response_model=schemas.NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: crud.StringStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query:
        raise ValidationError("Missing 'query' parameter")

    interpreted = interpret(query)
    strings = crud.list_strings(store, interpreted.parsed_filters)
    logger.info(f"Natural language query {query!r} -> {interpreted.parsed_filters.applied()}")

    return schemas.NaturalLanguageResponse(
        data=strings,
        count=len(strings),
        interpreted_query=schemas.InterpretedQueryResponse(
            original=interpreted.original,
            parsed_filters=interpreted.parsed_filters.applied(),
        ),
    )


@router.get("/strings/{string_value:path}", response_model=schemas.StringRecord)
def get_string(string_value: str, store: crud.StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return crud.get_string(store, string_value)


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: crud.StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string(store, string_value)
    return None
