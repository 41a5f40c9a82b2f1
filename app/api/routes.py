from fastapi import APIRouter, Depends, Query, Request, Response, status
import logging

from app import crud
from app.database import get_store
from app.errors import InvalidInput
from app.schemas import (
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
    StringRecord,
)
from app.services.filter_engine import criteria_from_params
from app.services.query_parser import interpret_query

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, store=Depends(get_store)):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    if not string_data.value.strip():
        raise InvalidInput("Invalid input: 'value' must be a non-empty string")

    try:
        string_data.value.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidInput("Invalid input: 'value' must be valid UTF-8 text")

    return crud.create_string_analysis(store, string_data.value)


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(request: Request, store=Depends(get_store)):
    """
    Get all strings with optional filtering.
    Supported parameters: is_palindrome, min_length, max_length, word_count, contains_character.
    """
    criteria = criteria_from_params(request.query_params)
    strings = crud.get_all_strings(store, criteria)

    filters_applied = criteria.as_filters()
    return StringListResponse(
        data=strings,
        count=len(strings),
        filters_applied=filters_applied if filters_applied else None,
    )


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: str = Query(..., description="Natural language query"),
    store=Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    criteria = interpret_query(query)
    strings = crud.get_all_strings(store, criteria)

    return NaturalLanguageResponse(
        data=strings,
        count=len(strings),
        interpreted_query=InterpretedQuery(
            original=query,
            parsed_filters=criteria.as_filters(),
        ),
    )


@router.get("/strings/{key}", response_model=StringRecord)
def get_string(key: str, store=Depends(get_store)):
    """
    Get analysis for a specific string, by value or by id.
    Returns 404 if string doesn't exist.
    """
    return crud.get_string(store, key)


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store=Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string(store, string_value)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
