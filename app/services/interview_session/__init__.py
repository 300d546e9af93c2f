"""
Interview Session Service Package

Exposes the session engine and the FastAPI dependency that wires it to the
request's database session and completion client.
"""

from fastapi import Depends
from sqlalchemy.orm import Session
from app.core.completion_client import CompletionClient, get_completion_client
from app.database import get_db_session
from .interview_session_service import InterviewSessionService
from .tools.session_store import InterviewSessionStore


def get_interview_session_service(
    session: Session = Depends(get_db_session),
    client: CompletionClient = Depends(get_completion_client)
) -> InterviewSessionService:
    return InterviewSessionService(client, InterviewSessionStore(session))


def get_admin_interview_service(session: Session = Depends(get_db_session)) -> InterviewSessionService:
    # Admin operations never call the model
    return InterviewSessionService(None, InterviewSessionStore(session))


__all__ = [
    "InterviewSessionService",
    "InterviewSessionStore",
    "get_interview_session_service",
    "get_admin_interview_service"
]
