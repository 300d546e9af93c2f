"""
Shared test fixtures.

The external collaborators are replaced here: an in-memory SQLite database stands
in for the session store backend, FakeCompletionClient stands in for the
completion service, and bearer tokens of the form "Bearer <uid>" stand in for
Firebase identities ("Bearer admin" carries the admin flag).

Author: @kcaparas1630
"""

import asyncio
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENV", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from typing import List, Optional
import pytest
from fastapi import Request
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.models.interview_models import Base
from app.errors.exceptions import UpstreamUnavailable, Unauthorized
from app.schemas.auth.user_auth_schemas import AuthenticatedUser
from app.services.interview_session import InterviewSessionService, InterviewSessionStore


class FakeCompletionClient:
    """Scripted stand-in for CompletionClient that records every call."""

    def __init__(self, responses: Optional[List[str]] = None, error: Optional[Exception] = None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    async def complete(self, system_prompt: str, user_prompt: str, max_tokens: int, temperature: float) -> str:
        self.calls.append({
            "system_prompt": system_prompt,
            "user_prompt": user_prompt,
            "max_tokens": max_tokens,
            "temperature": temperature
        })
        # Yield to the loop like a real network call would
        await asyncio.sleep(0)
        if self.error:
            raise self.error
        if not self.responses:
            raise UpstreamUnavailable("No scripted response left")
        return self.responses.pop(0)


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def store(db_session):
    return InterviewSessionStore(db_session)


@pytest.fixture
def fake_client():
    return FakeCompletionClient()


@pytest.fixture
def service(fake_client, store):
    return InterviewSessionService(fake_client, store)


def fake_current_user(request: Request) -> AuthenticatedUser:
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise Unauthorized("Missing or invalid authorization header")
    uid = auth_header.split(" ", 1)[1]
    return AuthenticatedUser(uid=uid, is_admin=uid == "admin")


@pytest.fixture
def api_client(db_session, fake_client):
    from app.main import app
    from app.database import get_db_session
    from app.core.completion_client import get_completion_client, get_resume_completion_client
    from app.core.route_limiters import limiter
    from app.services.auth.firebase_auth import get_current_user

    def override_db_session():
        yield db_session

    limiter.enabled = False
    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_completion_client] = lambda: fake_client
    app.dependency_overrides[get_resume_completion_client] = lambda: fake_client
    app.dependency_overrides[get_current_user] = fake_current_user
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()