"""
Health check endpoint for the application.

Description:
Reports that the service is up and whether the interview database answers a
trivial query. A database failure degrades the status instead of failing the
request, so load balancers can still read the body.

Dependencies:
- fastapi: For defining routes and dependency injection.
- sqlalchemy: For the connectivity check.
- app.core.route_limiters: For rate limiting functionality.
- loguru: For logging failed checks.

Author: @kcaparas1630

"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from loguru import logger
from app.core.route_limiters import limiter
from app.database import get_db_session
from app.schemas.health_response import HealthResponse

router = APIRouter(
    tags=["health"],
    responses={404: {"description": "Not found"}}
)

@router.get("/health", response_model=HealthResponse)
@limiter.limit("10/minute")
async def health(request: Request, session: Session = Depends(get_db_session)):
    """
    Request parameter is required for rate limiting.
    """
    try:
        session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        database = "unavailable"

    status = "ok" if database == "ok" else "degraded"
    return HealthResponse(status=status, database=database)
