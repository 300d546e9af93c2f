"""
Description:
Request and response schemas for the resume critique endpoint.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.

Author: @kcaparas1630
"""
from typing import List, Optional
from pydantic import BaseModel, Field

class ResumeCritiqueRequest(BaseModel):
    resumeText: str = Field(..., description="Text already extracted from the uploaded resume")
    targetRole: Optional[str] = Field(None, description="Role the resume is being tailored for")

class ResumeCritiqueResponse(BaseModel):
    atsScore: int = Field(ge=0, le=100, description="Applicant tracking system compatibility score")
    matchedKeywords: List[str] = Field(default=[], description="Role keywords found in the resume")
    missingKeywords: List[str] = Field(default=[], description="Role keywords missing from the resume")
    formattingNotes: List[str] = Field(default=[], description="Formatting issues and suggestions")
    summary: str = Field(default="", description="Overall critique")
