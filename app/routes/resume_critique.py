"""
Resume Critique API Route

Description:
This module defines a FastAPI route that critiques already-extracted resume text.

Returns:
- An instance of ResumeCritiqueResponse with ATS score, keywords and formatting notes.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- app.services.resume: For the resume critique service.
- loguru: For logging information about the request and any errors that occur.

Author: @kcaparas1630

"""
from fastapi import APIRouter, Depends, HTTPException, Request
from loguru import logger
from app.core.route_limiters import limiter
from app.services.auth.firebase_auth import get_current_user
from app.services.resume import ResumeCritiqueService, get_resume_critique_service
from app.schemas.auth.user_auth_schemas import AuthenticatedUser
from app.schemas.resume.resume_critique import ResumeCritiqueRequest, ResumeCritiqueResponse
from app.errors.exceptions import InternalServerError

router = APIRouter(
    tags=["resume"],
    responses={404: {"description": "Not found"}}
)


@router.post("/resume-critique", response_model=ResumeCritiqueResponse)
@limiter.limit("5/minute")
async def resume_critique_route(
    request: Request,
    payload: ResumeCritiqueRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ResumeCritiqueService = Depends(get_resume_critique_service)
):
    """
    Critique resume text for applicant tracking systems
    """
    try:
        logger.info(f"Resume critique requested by {user.uid}")
        return await service.critique(payload.resumeText, payload.targetRole)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error critiquing resume: {e}")
        raise InternalServerError("Failed to critique resume.") from e
