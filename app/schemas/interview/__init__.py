from .interview_session import InterviewSession
from .interview_requests import StartInterviewRequest, AnswerRequest, InterviewLookupRequest
from .interview_responses import (
    StartInterviewResponse,
    AnswerResponse,
    InterviewSummaryResponse,
    IdealAnswer,
    IdealAnswersResponse,
    InterviewListItem,
    AdminInterviewListItem,
    AdminUserInterviewsResponse
)

__all__ = [
    "InterviewSession",
    "StartInterviewRequest",
    "AnswerRequest",
    "InterviewLookupRequest",
    "StartInterviewResponse",
    "AnswerResponse",
    "InterviewSummaryResponse",
    "IdealAnswer",
    "IdealAnswersResponse",
    "InterviewListItem",
    "AdminInterviewListItem",
    "AdminUserInterviewsResponse"
]
