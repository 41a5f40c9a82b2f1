from datetime import timezone

from sqlalchemy import Column, String, Integer, Boolean, DateTime, JSON, Text
from app.database import Base
from app.schemas import StringProperties, StringRecord

class StringAnalysis(Base):
    __tablename__ = "string_analyses"

    id = Column(String(64), primary_key=True, index=True)  # SHA-256 hash
    position = Column(Integer, nullable=False, index=True)  # insertion order
    value = Column(Text, nullable=False)
    length = Column(Integer, nullable=False)
    is_palindrome = Column(Boolean, nullable=False)
    unique_characters = Column(Integer, nullable=False)
    word_count = Column(Integer, nullable=False)
    sha256_hash = Column(String(64), nullable=False)
    character_frequency_map = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    @classmethod
    def from_record(cls, record: StringRecord, position: int) -> "StringAnalysis":
        props = record.properties
        return cls(
            id=record.id,
            position=position,
            value=record.value,
            length=props.length,
            is_palindrome=props.is_palindrome,
            unique_characters=props.unique_characters,
            word_count=props.word_count,
            sha256_hash=props.sha256_hash,
            character_frequency_map=props.character_frequency_map,
            created_at=record.created_at,
        )

    def to_record(self) -> StringRecord:
        created_at = self.created_at
        # SQLite hands back naive datetimes
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return StringRecord(
            id=self.id,
            value=self.value,
            properties=StringProperties(
                length=self.length,
                is_palindrome=self.is_palindrome,
                unique_characters=self.unique_characters,
                word_count=self.word_count,
                sha256_hash=self.sha256_hash,
                character_frequency_map=self.character_frequency_map,
            ),
            created_at=created_at,
        )
