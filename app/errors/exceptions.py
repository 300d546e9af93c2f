from typing import Optional
from fastapi import HTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_502_BAD_GATEWAY,
)

# Raw model output attached to diagnostic errors is capped at this many characters
MAX_RAW_DETAIL_LENGTH = 2000

class BadRequest(HTTPException):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=HTTP_400_BAD_REQUEST, detail=detail)

class NotFound(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=HTTP_404_NOT_FOUND, detail=detail)

class InternalServerError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)

class Unauthorized(HTTPException):
    def __init__(self, detail: str = "Unauthorized access"):
        super().__init__(status_code=HTTP_401_UNAUTHORIZED, detail=detail)

class Forbidden(HTTPException):
    def __init__(self, detail: str = "Access denied"):
        super().__init__(status_code=HTTP_403_FORBIDDEN, detail=detail)

class Conflict(HTTPException):
    def __init__(self, detail: str = "Resource conflict"):
        super().__init__(status_code=HTTP_409_CONFLICT, detail=detail)

class BadGateway(HTTPException):
    def __init__(self, detail="Bad gateway"):
        super().__init__(status_code=HTTP_502_BAD_GATEWAY, detail=detail)

class InvalidInput(BadRequest):
    def __init__(self, detail: str = "Invalid input"):
        super().__init__(detail=detail)

class SessionNotFound(NotFound):
    # Missing and foreign sessions share this error so existence is never leaked
    def __init__(self, identifier: str = None):
        super().__init__(detail="Interview not found")
        self.identifier = identifier

class IncompleteSession(Forbidden):
    def __init__(self, detail: str = "You must complete the interview before viewing ideal answers."):
        super().__init__(detail=detail)

class DuplicateInterviewError(Conflict):
    def __init__(self, identifier: str = None):
        detail = f"Interview '{identifier}' already exists." if identifier else "Interview already exists."
        super().__init__(detail=detail)

class ConcurrentUpdateError(Conflict):
    def __init__(self, identifier: str = None):
        detail = "Interview was updated by another request, please resubmit."
        super().__init__(detail=detail)
        self.identifier = identifier

class UpstreamUnavailable(BadGateway):
    def __init__(self, detail: str = "Failed to connect to AI service", raw: Optional[str] = None):
        payload = {"error": detail}
        if raw:
            payload["details"] = raw[:MAX_RAW_DETAIL_LENGTH]
        super().__init__(detail=payload)
        self.message = detail

class EmptyGeneration(BadGateway):
    def __init__(self, detail: str = "AI did not return questions"):
        super().__init__(detail=detail)

class ParseError(BadGateway):
    def __init__(self, detail: str = "Failed to parse AI response", raw: str = ""):
        super().__init__(detail={"error": detail, "raw": (raw or "")[:MAX_RAW_DETAIL_LENGTH]})
        self.message = detail
        self.raw = raw
