"""
Resume Critique Service Package
"""

from fastapi import Depends
from app.core.completion_client import CompletionClient, get_resume_completion_client
from .resume_critique_service import ResumeCritiqueService


def get_resume_critique_service(
    client: CompletionClient = Depends(get_resume_completion_client)
) -> ResumeCritiqueService:
    return ResumeCritiqueService(client)


__all__ = ["ResumeCritiqueService", "get_resume_critique_service"]
