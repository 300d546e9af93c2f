"""Admin Routes Module

Administrative interview management: listing every interview, listing one
user's interviews and deleting a single interview. Every route requires the
admin claim on the caller's token.

Author: @kcaparas1630
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from loguru import logger
from app.core.route_limiters import limiter
from app.services.auth.firebase_auth import require_admin
from app.services.interview_session import InterviewSessionService, get_admin_interview_service
from app.errors.exceptions import InternalServerError
from app.schemas.auth.user_auth_schemas import AuthenticatedUser
from app.schemas.interview import AdminInterviewListItem, AdminUserInterviewsResponse

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    responses={404: {"description": "Not found"}}
)

@router.get("/interviews", response_model=List[AdminInterviewListItem])
@limiter.limit("10/minute")
async def all_interviews_route(
    request: Request,
    admin: AuthenticatedUser = Depends(require_admin),
    service: InterviewSessionService = Depends(get_admin_interview_service)
):
    try:
        return service.list_all_interviews()
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in admin interviews endpoint")
        raise InternalServerError("An unexpected error occurred while retrieving interviews.") from e

@router.get("/users/{owner_id}/interviews", response_model=AdminUserInterviewsResponse)
@limiter.limit("10/minute")
async def user_interviews_route(
    request: Request,
    owner_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: InterviewSessionService = Depends(get_admin_interview_service)
):
    """List one user's interviews, newest first."""
    try:
        return AdminUserInterviewsResponse(ownerId=owner_id, interviews=service.list_interviews(owner_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in admin user interviews endpoint")
        raise InternalServerError("An unexpected error occurred while retrieving interviews.") from e

@router.delete("/interviews/{interview_id}")
@limiter.limit("10/minute")
async def delete_interview_route(
    request: Request,
    interview_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: InterviewSessionService = Depends(get_admin_interview_service)
):
    """Delete one interview session.

    Raises:
        SessionNotFound: If no interview has this id
    """
    try:
        service.delete_interview(interview_id)
        logger.info(f"Admin {admin.uid} deleted interview {interview_id}")
        return {"message": "Interview deleted successfully"}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in delete interview endpoint")
        raise InternalServerError("An unexpected error occurred while deleting the interview.") from e
