"""
Description:
Response schemas for the interview session endpoints.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.

Author: @kcaparas1630
"""
from datetime import datetime
from typing import List
from pydantic import BaseModel, Field

class StartInterviewResponse(BaseModel):
    interviewId: str
    questions: List[str]

class AnswerResponse(BaseModel):
    feedback: str = Field(..., description="Raw evaluation text returned by the model")
    score: int = Field(ge=0, le=10, description="Answer score between 0 and 10")

class InterviewSummaryResponse(BaseModel):
    role: str
    totalQuestions: int
    averageScore: float
    scores: List[int]
    verdict: str

class IdealAnswer(BaseModel):
    question: str
    idealAnswer: str

class IdealAnswersResponse(BaseModel):
    idealAnswers: List[IdealAnswer]

class InterviewListItem(BaseModel):
    id: str
    role: str
    date: datetime
    scores: List[int]

class AdminInterviewListItem(InterviewListItem):
    ownerId: str

class AdminUserInterviewsResponse(BaseModel):
    ownerId: str
    interviews: List[InterviewListItem] = Field(default=[], description="The user's interviews, newest first")
