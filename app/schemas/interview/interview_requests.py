"""
Description:
Request schemas for the interview session endpoints.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.

Author: @kcaparas1630
"""
from typing import List, Optional
from pydantic import BaseModel, Field

class StartInterviewRequest(BaseModel):
    role: Optional[str] = Field(None, description="Job role the interview targets")
    difficulty: Optional[str] = Field(None, description="Difficulty level, e.g. Beginner, Intermediate")
    questionCount: Optional[int] = Field(None, ge=0, description="Number of questions to generate")
    resumeText: Optional[str] = Field(None, description="Extracted resume text used to tailor questions")
    questions: Optional[List[str]] = Field(None, description="Questions to reuse verbatim when retaking an interview")

class AnswerRequest(BaseModel):
    interviewId: str
    question: str = Field(default="", description="Question being answered")
    answer: Optional[str] = Field(None, description="Candidate answer")
    questionIndex: Optional[int] = Field(None, ge=0, description="Zero-based index of the question being answered")

class InterviewLookupRequest(BaseModel):
    interviewId: str
