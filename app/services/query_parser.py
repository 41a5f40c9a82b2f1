import re
import logging
from typing import Any, Callable, Dict, List, Tuple

from app.errors import ConflictingCriteria, UnparseableQuery
from app.schemas import Criteria

logger = logging.getLogger(__name__)

Rule = Tuple[str, re.Pattern, Callable[[re.Match], Dict[str, Any]]]

# Applied in order against the lower-cased query; a later rule overwrites
# an earlier one setting the same field.
RULES: List[Rule] = [
    ("single_word", re.compile(r"single word"),
     lambda m: {"word_count": 1}),
    ("palindromic", re.compile(r"palindromic"),
     lambda m: {"is_palindrome": True}),
    ("longer_than", re.compile(r"longer than (\d+) characters"),
     lambda m: {"min_length": int(m.group(1)) + 1}),
    ("letter", re.compile(r"containing the letter ([a-z])"),
     lambda m: {"contains_character": m.group(1)}),
    ("first_vowel", re.compile(r"contain the first vowel"),
     lambda m: {"contains_character": "a"}),
    ("shorter_than", re.compile(r"shorter than (\d+) characters"),
     lambda m: {"max_length": int(m.group(1)) - 1}),
]


def _min_exceeds_max(criteria: Criteria) -> bool:
    return (
        criteria.min_length is not None
        and criteria.max_length is not None
        and criteria.min_length > criteria.max_length
    )


CONFLICT_CHECKS: List[Callable[[Criteria], bool]] = [
    _min_exceeds_max,
]


def parse_natural_language_query(query: str) -> Criteria:
    """
    Parse natural language query into filter criteria
    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}

    Returns empty criteria when no phrase matches.
    """
    query = query.lower()
    filters: Dict[str, Any] = {}

    for name, pattern, build in RULES:
        match = pattern.search(query)
        if match:
            logger.debug(f"Query rule '{name}' matched")
            filters.update(build(match))

    return Criteria(**filters)


def has_conflicting_filters(criteria: Criteria) -> bool:
    """True if the criteria contradict each other (e.g. min_length > max_length)"""
    return any(check(criteria) for check in CONFLICT_CHECKS)


def interpret_query(query: str) -> Criteria:
    """Parse a natural language query and reject it if empty, unparseable or conflicting"""
    if not query or not query.strip():
        raise UnparseableQuery(
            "Unable to parse natural language query",
            details={"interpreted_query": {"original": query, "parsed_filters": {}}},
        )

    criteria = parse_natural_language_query(query)
    interpreted = {"original": query, "parsed_filters": criteria.as_filters()}

    if criteria.is_empty():
        raise UnparseableQuery(
            "Unable to parse natural language query",
            details={"interpreted_query": interpreted},
        )

    if has_conflicting_filters(criteria):
        raise ConflictingCriteria(
            "Query parsed but resulted in conflicting filters",
            details={"interpreted_query": interpreted},
        )

    return criteria
