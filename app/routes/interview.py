"""Interview Session Routes Module

This module defines FastAPI routes for the mock interview lifecycle: starting a
session, submitting answers, reading the summary, generating ideal answers and
listing the caller's past interviews.

Every route requires a verified bearer identity and hands the caller's uid to the
interview session service, which performs the ownership checks.

Dependencies:
- fastapi: For API routing and dependency injection.
- loguru: For logging operations.
- app.core.route_limiters: For rate limiting middleware.
- app.services.auth.firebase_auth: For the verified caller.
- app.services.interview_session: For the interview session service.
- app.errors.exceptions: For custom exception handling.
- app.schemas.interview: For request and response models.

Author: @kcaparas1630
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from loguru import logger
from app.core.route_limiters import limiter
from app.services.auth.firebase_auth import get_current_user
from app.services.interview_session import InterviewSessionService, get_interview_session_service
from app.errors.exceptions import InternalServerError
from app.schemas.auth.user_auth_schemas import AuthenticatedUser
from app.schemas.interview import (
    StartInterviewRequest,
    AnswerRequest,
    InterviewLookupRequest,
    StartInterviewResponse,
    AnswerResponse,
    InterviewSummaryResponse,
    IdealAnswersResponse,
    InterviewListItem
)

router = APIRouter(
    tags=["interview"],
    responses={404: {"description": "Not found"}}
)

@router.post("/start-interview", response_model=StartInterviewResponse)
@limiter.limit("10/minute")
async def start_interview_route(
    request: Request,
    payload: StartInterviewRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: InterviewSessionService = Depends(get_interview_session_service)
):
    """Start a new interview session.

    Generates questions with the completion model, optionally tailored to the
    resume text, or reuses the supplied questions for a retake.

    Raises:
        UpstreamUnavailable: If the AI service could not be reached
        EmptyGeneration: If the AI service returned no questions
        InternalServerError: For any unexpected failure

    Rate Limit:
        10 requests per minute per client
    """
    try:
        return await service.start_interview(
            owner_id=user.uid,
            role=payload.role,
            difficulty=payload.difficulty,
            question_count=payload.questionCount,
            resume_context=payload.resumeText,
            supplied_questions=payload.questions
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in start interview endpoint")
        raise InternalServerError("An unexpected error occurred while starting the interview.") from e

@router.post("/answer", response_model=AnswerResponse)
@limiter.limit("30/minute")
async def submit_answer_route(
    request: Request,
    payload: AnswerRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: InterviewSessionService = Depends(get_interview_session_service)
):
    """Score an answer to the next question of an interview.

    Raises:
        SessionNotFound: If the interview is missing or owned by someone else
        InvalidInput: If the answer is blank or the interview is already complete
        UpstreamUnavailable: If the AI service could not be reached
        InternalServerError: For any unexpected failure

    Rate Limit:
        30 requests per minute per client
    """
    try:
        return await service.submit_answer(
            owner_id=user.uid,
            session_id=payload.interviewId,
            question=payload.question,
            answer=payload.answer,
            question_index=payload.questionIndex
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in answer endpoint")
        raise InternalServerError("An unexpected error occurred while evaluating the answer.") from e

@router.post("/interview-summary", response_model=InterviewSummaryResponse)
@limiter.limit("30/minute")
async def interview_summary_route(
    request: Request,
    payload: InterviewLookupRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: InterviewSessionService = Depends(get_interview_session_service)
):
    """Summarize the scores of an interview."""
    try:
        return await service.get_summary(user.uid, payload.interviewId)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in interview summary endpoint")
        raise InternalServerError("An unexpected error occurred while summarizing the interview.") from e

@router.post("/ideal-answers", response_model=IdealAnswersResponse)
@limiter.limit("10/minute")
async def ideal_answers_route(
    request: Request,
    payload: InterviewLookupRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: InterviewSessionService = Depends(get_interview_session_service)
):
    """Generate ideal answers for a completed interview.

    Raises:
        SessionNotFound: If the interview is missing or owned by someone else
        IncompleteSession: If not every question has been answered
        ParseError: If the AI output could not be parsed, with the raw text attached
        InternalServerError: For any unexpected failure
    """
    try:
        ideal_answers = await service.get_ideal_answers(user.uid, payload.interviewId)
        return IdealAnswersResponse(idealAnswers=ideal_answers)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in ideal answers endpoint")
        raise InternalServerError("An unexpected error occurred while generating ideal answers.") from e

@router.get("/my-interviews", response_model=List[InterviewListItem])
@limiter.limit("30/minute")
async def my_interviews_route(
    request: Request,
    user: AuthenticatedUser = Depends(get_current_user),
    service: InterviewSessionService = Depends(get_interview_session_service)
):
    """List the caller's interviews, newest first."""
    try:
        return service.list_interviews(user.uid)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in my interviews endpoint")
        raise InternalServerError("An unexpected error occurred while retrieving interviews.") from e
