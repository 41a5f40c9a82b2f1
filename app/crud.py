import logging
from typing import List, Optional

from app.errors import DuplicateValue, NotFound
from app.schemas import Criteria, StringRecord
from app.services.filter_engine import apply_filters
from app.utils import analyze_string

logger = logging.getLogger(__name__)

def _find_by_value(records: List[StringRecord], value: str) -> Optional[StringRecord]:
    return next((r for r in records if r.value == value), None)

def create_string_analysis(store, value: str) -> StringRecord:
    """Analyze and store a new string. Raises DuplicateValue if it already exists."""
    record = analyze_string(value)

    with store.lock:
        records = store.load_all()
        if any(r.value == value or r.id == record.id for r in records):
            raise DuplicateValue("String already exists in the system")

        store.save_all(records + [record])

    logger.info(f"Stored string {record.id}")
    return record

def get_string(store, key: str) -> StringRecord:
    """Get string analysis by exact value, falling back to id"""
    records = store.load_all()

    record = _find_by_value(records, key)
    if record is None:
        record = next((r for r in records if r.id == key), None)
    if record is None:
        raise NotFound("String does not exist in the system")
    return record

def get_all_strings(store, criteria: Optional[Criteria] = None) -> List[StringRecord]:
    """Get all strings matching the criteria, in insertion order"""
    return apply_filters(store.load_all(), criteria or Criteria())

def delete_string(store, value: str) -> StringRecord:
    """Delete string analysis by value. Raises NotFound if absent."""
    with store.lock:
        records = store.load_all()
        record = _find_by_value(records, value)
        if record is None:
            raise NotFound("String does not exist in the system")

        store.save_all([r for r in records if r.value != value])

    logger.info(f"Deleted string {record.id}")
    return record
