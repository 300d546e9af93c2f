"""
Interview Session Store Module

This module is the persistence adapter for interview sessions. It maps the
Interview ORM rows to InterviewSession state objects and keeps the ordered
sequences serialized as JSON text.

Answers and scores are always written together in one UPDATE statement guarded
by the answers value the caller read, so a concurrent writer can never be
silently overwritten.

Dependencies:
- sqlalchemy: For database operations and session management.
- loguru: For logging operations.
- app.models.interview_models: For the Interview model and sequence serialization.
- app.errors.exceptions: For custom exception handling.

Author: @kcaparas1630
"""

from typing import List, Optional
from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from loguru import logger
from app.models.interview_models import Interview, serialize_sequence, deserialize_sequence
from app.schemas.interview.interview_session import InterviewSession
from app.errors.exceptions import DuplicateInterviewError


def to_session_state(record: Interview) -> InterviewSession:
    return InterviewSession(
        id=record.id,
        owner_id=record.owner_id,
        role=record.role,
        difficulty=record.difficulty,
        questions=deserialize_sequence(record.questions),
        answers=deserialize_sequence(record.answers),
        scores=deserialize_sequence(record.scores),
        created_at=record.created_at
    )


class InterviewSessionStore:
    """Session persistence contract backed by a SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, session_id: str) -> Optional[InterviewSession]:
        record = self.session.get(Interview, session_id)
        return to_session_state(record) if record else None

    def get_by_id_and_owner(self, session_id: str, owner_id: str) -> Optional[InterviewSession]:
        """Return the session only when it exists and belongs to owner_id."""
        record = self.session.execute(
            select(Interview).where(Interview.id == session_id, Interview.owner_id == owner_id)
        ).scalar_one_or_none()
        return to_session_state(record) if record else None

    def insert(self, interview: InterviewSession) -> None:
        """
        Persist a new session.

        Raises:
            DuplicateInterviewError: If the session id is already taken
        """
        if self.session.get(Interview, interview.id) is not None:
            raise DuplicateInterviewError(interview.id)

        record = Interview(
            id=interview.id,
            owner_id=interview.owner_id,
            role=interview.role,
            difficulty=interview.difficulty,
            questions=serialize_sequence(interview.questions),
            answers=serialize_sequence(interview.answers),
            scores=serialize_sequence(interview.scores),
            created_at=interview.created_at
        )
        self.session.add(record)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.error(f"Interview id collision for {interview.id}: {e}")
            raise DuplicateInterviewError(interview.id) from e

    def update_answers_and_scores(self, session_id: str, answers: List[str], scores: List[int], expected_answers: List[str]) -> bool:
        """
        Replace answers and scores in a single atomic UPDATE.

        The row is only touched if its stored answers still equal expected_answers.

        Returns:
            bool: True if the row was updated, False if it changed underneath us
        """
        if len(answers) != len(scores):
            raise ValueError("answers and scores must have the same length")

        result = self.session.execute(
            update(Interview)
            .where(Interview.id == session_id, Interview.answers == serialize_sequence(expected_answers))
            .values(answers=serialize_sequence(answers), scores=serialize_sequence(scores))
        )
        self.session.commit()
        return result.rowcount == 1

    def list_for_owner(self, owner_id: str) -> List[InterviewSession]:
        records = self.session.execute(
            select(Interview).where(Interview.owner_id == owner_id).order_by(Interview.created_at.desc())
        ).scalars().all()
        return [to_session_state(record) for record in records]

    def list_all(self) -> List[InterviewSession]:
        records = self.session.execute(
            select(Interview).order_by(Interview.created_at.desc())
        ).scalars().all()
        return [to_session_state(record) for record in records]

    def delete(self, session_id: str) -> bool:
        result = self.session.execute(delete(Interview).where(Interview.id == session_id))
        self.session.commit()
        return result.rowcount == 1
