import hashlib
from collections import Counter
from datetime import datetime, timezone
from typing import Dict

from app.schemas import StringProperties, StringRecord

def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of the UTF-8 bytes of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()

def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, alphanumerics only, any script)"""
    cleaned = "".join(ch for ch in text.lower() if ch.isalnum())
    return cleaned == cleaned[::-1]

def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))

def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())

def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))

def generate_id(value: str) -> str:
    """Content-addressed record id; values are unique so ids are too"""
    return compute_sha256(value)

def analyze_string(value: str) -> StringRecord:
    """Analyze a string and return a new record with all computed properties"""
    sha256_hash = compute_sha256(value)

    return StringRecord(
        id=generate_id(value),
        value=value,
        properties=StringProperties(
            length=len(value),
            is_palindrome=is_palindrome(value),
            unique_characters=count_unique_characters(value),
            word_count=count_words(value),
            sha256_hash=sha256_hash,
            character_frequency_map=get_character_frequency(value),
        ),
        created_at=datetime.now(timezone.utc),
    )
