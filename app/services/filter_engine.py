import logging
from typing import Callable, Iterable, List, Mapping

from pydantic import ValidationError

from app.errors import ConflictingCriteria, InvalidInput
from app.schemas import Criteria, StringRecord
from app.services.query_parser import has_conflicting_filters

logger = logging.getLogger(__name__)

FILTER_PARAMS = (
    "is_palindrome",
    "min_length",
    "max_length",
    "word_count",
    "contains_character",
)

Predicate = Callable[[StringRecord], bool]


def criteria_from_params(params: Mapping[str, str]) -> Criteria:
    """
    Build criteria from structured query parameters.

    Rejects a non-empty parameter set only when none of its names is a known
    filter; unknown names next to known ones are ignored.
    """
    if params and not any(name in params for name in FILTER_PARAMS):
        raise InvalidInput(
            "Invalid query parameter values or types",
            details={"allowed_parameters": list(FILTER_PARAMS)},
        )

    values = {name: params[name] for name in FILTER_PARAMS if name in params}
    try:
        return Criteria(**values)
    except ValidationError as e:
        raise InvalidInput(
            "Invalid query parameter values or types",
            details={"details": {str(err["loc"][-1]): err["msg"] for err in e.errors()}},
        ) from e


def build_predicates(criteria: Criteria) -> List[Predicate]:
    """One predicate per criterion that is set"""
    predicates: List[Predicate] = []

    if criteria.is_palindrome is not None:
        predicates.append(lambda r: r.properties.is_palindrome == criteria.is_palindrome)

    if criteria.min_length is not None:
        predicates.append(lambda r: r.properties.length >= criteria.min_length)

    if criteria.max_length is not None:
        predicates.append(lambda r: r.properties.length <= criteria.max_length)

    if criteria.word_count is not None:
        predicates.append(lambda r: r.properties.word_count == criteria.word_count)

    if criteria.contains_character is not None:
        predicates.append(lambda r: criteria.contains_character in r.value)

    return predicates


def apply_filters(records: Iterable[StringRecord], criteria: Criteria) -> List[StringRecord]:
    """Keep records matching every set criterion, in their original order"""
    if has_conflicting_filters(criteria):
        raise ConflictingCriteria(
            "Conflicting filters: min_length cannot be greater than max_length",
            details={"filters": criteria.as_filters()},
        )

    predicates = build_predicates(criteria)
    return [r for r in records if all(p(r) for p in predicates)]
