from typing import Any, Dict, Optional


class StringAnalyzerError(Exception):
    """Base error for the string analyzer service"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInput(StringAnalyzerError):
    """Empty/non-string value, or a query with no recognized parameter"""


class DuplicateValue(StringAnalyzerError):
    """Value already stored"""


class NotFound(StringAnalyzerError):
    """No record matches the given id or value"""


class UnparseableQuery(StringAnalyzerError):
    """Natural language query matched none of the known phrases"""


class ConflictingCriteria(StringAnalyzerError):
    """Criteria are well-formed but contradict each other"""


class PersistenceFailure(StringAnalyzerError):
    """Store could not be read or written"""
