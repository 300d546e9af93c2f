"""Interview Models Module

This module defines the SQLAlchemy model for interview session records and the
helpers that move the session's ordered sequences in and out of storage.

Questions, answers and scores are persisted as serialized JSON text so that any
relational backend can hold them, and they must round-trip exactly.

Dependencies:
- sqlalchemy: For ORM functionality and database modeling.
- json: For serializing the ordered sequences.
- datetime: For timestamp handling.

Author: @kcaparas1630
"""

import json
from typing import Any, List, Optional
from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from datetime import datetime, timezone


def serialize_sequence(values: Optional[List[Any]]) -> str:
    """Serialize an ordered sequence to its stored JSON text form."""
    return json.dumps(list(values or []), ensure_ascii=False)


def deserialize_sequence(text: Optional[str]) -> List[Any]:
    """Deserialize stored JSON text back to a list. Empty columns read as []."""
    if not text:
        return []
    return json.loads(text)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models.

    Provides the foundation for all database models in the application.
    """
    pass


class Interview(Base):
    """Interview session record.

    Represents a single interview attempt owned by a user. The owner and role
    never change after creation; answers and scores only ever grow together.

    Attributes:
        id (str): Primary key, UUID hex generated at creation
        owner_id (str): Auth uid of the owning user
        role (str): Job role the session targets
        difficulty (str): Difficulty level the questions were generated for
        questions (str): JSON array of question strings
        answers (str): JSON array of answer strings
        scores (str): JSON array of integer scores
        created_at (datetime): Timestamp when the session was created
    """
    __tablename__ = "interviews"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    owner_id: Mapped[str] = mapped_column(String(128), index=True)
    role: Mapped[str] = mapped_column(String(200))
    difficulty: Mapped[str] = mapped_column(String(50))
    questions: Mapped[str] = mapped_column(Text, default="[]")
    answers: Mapped[str] = mapped_column(Text, default="[]")
    scores: Mapped[str] = mapped_column(Text, default="[]")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

    def __repr__(self):
        return f"Interview(id={self.id}, role={self.role}, created_at={self.created_at})"
