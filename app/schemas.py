from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional, List
from datetime import datetime

class StringCreate(BaseModel):
    value: str = Field(..., description="String to analyze")

class StringProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]

class StringRecord(BaseModel):
    """An analyzed string. Never edited after creation."""
    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime

class Criteria(BaseModel):
    """Sparse filter over analyzed-string properties; unset fields impose no constraint"""
    word_count: Optional[int] = Field(None, ge=0)
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    contains_character: Optional[str] = Field(None, min_length=1, max_length=1)

    def as_filters(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.as_filters()

class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Optional[Dict] = None

class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]

class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery

class ProfileUser(BaseModel):
    email: str
    name: str
    stack: str

class ProfileResponse(BaseModel):
    status: str = "success"
    user: ProfileUser
    timestamp: datetime
    fact: str
