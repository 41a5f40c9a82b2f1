"""Tests for criteria building and filtering."""

import pytest

from app.errors import ConflictingCriteria, InvalidInput
from app.schemas import Criteria
from app.services.filter_engine import apply_filters, criteria_from_params
from app.utils import analyze_string


@pytest.fixture
def records():
    return [analyze_string(v) for v in ["abc", "abcde", "abcdefg", "abcdefghi"]]


class TestApplyFilters:
    """Tests for filter application."""

    def test_length_range_keeps_order(self, records):
        result = apply_filters(records, Criteria(min_length=5, max_length=7))
        assert [r.value for r in result] == ["abcde", "abcdefg"]

    def test_empty_criteria_is_identity(self, records):
        result = apply_filters(records, Criteria())
        assert result == records
        assert result is not records

    def test_does_not_mutate_input(self, records):
        before = list(records)
        apply_filters(records, Criteria(max_length=3))
        assert records == before

    def test_conflicting_criteria_refused(self, records):
        with pytest.raises(ConflictingCriteria):
            apply_filters(records, Criteria(min_length=10, max_length=5))

    def test_contains_character_is_case_sensitive(self):
        records = [analyze_string("Apple"), analyze_string("banana")]
        assert [r.value for r in apply_filters(records, Criteria(contains_character="a"))] == ["banana"]
        assert [r.value for r in apply_filters(records, Criteria(contains_character="A"))] == ["Apple"]

    def test_predicates_intersect(self):
        records = [analyze_string(v) for v in ["level", "noon", "hello", "a man a plan"]]
        result = apply_filters(records, Criteria(is_palindrome=True, word_count=1, min_length=5))
        assert [r.value for r in result] == ["level"]

    def test_palindrome_false(self):
        records = [analyze_string(v) for v in ["level", "hello"]]
        result = apply_filters(records, Criteria(is_palindrome=False))
        assert [r.value for r in result] == ["hello"]


class TestCriteriaFromParams:
    """Tests for structured query parameter mapping."""

    def test_no_params(self):
        assert criteria_from_params({}).is_empty()

    def test_coerces_values(self):
        criteria = criteria_from_params({
            "is_palindrome": "true",
            "min_length": "3",
            "max_length": "9",
            "word_count": "1",
            "contains_character": "x",
        })
        assert criteria.as_filters() == {
            "is_palindrome": True,
            "min_length": 3,
            "max_length": 9,
            "word_count": 1,
            "contains_character": "x",
        }

    def test_negative_bounds_treated_alike(self):
        criteria = criteria_from_params({"min_length": "-1", "max_length": "-1"})
        assert criteria.as_filters() == {"min_length": -1, "max_length": -1}

    def test_only_unknown_params_rejected(self):
        with pytest.raises(InvalidInput):
            criteria_from_params({"colour": "red"})

    def test_unknown_params_ignored_next_to_known(self):
        criteria = criteria_from_params({"colour": "red", "word_count": "2"})
        assert criteria.as_filters() == {"word_count": 2}

    @pytest.mark.parametrize("params", [
        {"min_length": "abc"},
        {"is_palindrome": "maybe"},
        {"contains_character": "ab"},
        {"word_count": "-1"},
    ])
    def test_bad_values_rejected(self, params):
        with pytest.raises(InvalidInput):
            criteria_from_params(params)
