"""
Resume Critique Service

This service asks the completion model for a structured critique of resume text
that was already extracted from the uploaded file: an ATS compatibility score,
matched and missing keywords for the target role, and formatting notes.

Dependencies:
- loguru: For logging operations.
- app.core.completion_client: For the injected completion capability.
- app.core.secure_prompt_manager: For prompt rendering.
- app.helper.response_parser: For JSON object extraction.
- app.errors.exceptions: For custom exception handling.
"""

from typing import Any, List, Optional
from loguru import logger
from app.core.completion_client import CompletionClient
from app.core.secure_prompt_manager import secure_prompt_manager
from app.helper.response_parser import extract_json_object
from app.schemas.resume.resume_critique import ResumeCritiqueResponse
from app.errors.exceptions import InvalidInput, ParseError

MAX_RESUME_LENGTH = 4000
CRITIQUE_MAX_TOKENS = 1024
CRITIQUE_TEMPERATURE = 0.4


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if str(item).strip()]


def _clamp_ats_score(value: Any) -> int:
    try:
        score = int(round(float(value)))
    except (TypeError, ValueError):
        return 0
    return max(0, min(100, score))


class ResumeCritiqueService:
    """
    Service class producing structured resume critiques.
    """

    def __init__(self, client: CompletionClient):
        self.client = client

    async def critique(self, resume_text: Optional[str], target_role: Optional[str] = None) -> ResumeCritiqueResponse:
        """
        Critique a resume for applicant tracking systems.

        Args:
            resume_text (str): Extracted resume text, truncated to 4000 characters.
            target_role (str, optional): Role to evaluate the resume against.

        Returns:
            ResumeCritiqueResponse: Score, keywords, formatting notes and summary.

        Raises:
            InvalidInput: If the resume text is blank.
            UpstreamUnavailable: If the completion call fails.
            ParseError: If the model output holds no JSON object.
        """
        text = (resume_text or "").strip()
        if not text:
            raise InvalidInput("Resume text is required")
        if len(text) > MAX_RESUME_LENGTH:
            logger.info(f"Resume truncated from {len(text)} to {MAX_RESUME_LENGTH} characters")
            text = text[:MAX_RESUME_LENGTH]

        raw_text = await self.client.complete(
            secure_prompt_manager.get_system_prompt("resume_critique"),
            secure_prompt_manager.get_resume_critique_prompt(text, target_role),
            max_tokens=CRITIQUE_MAX_TOKENS,
            temperature=CRITIQUE_TEMPERATURE
        )

        extraction = extract_json_object(raw_text)
        if not extraction.ok:
            logger.error(f"Failed to parse resume critique ({extraction.error}): {raw_text}")
            raise ParseError("Failed to parse resume critique", raw=raw_text)

        data = extraction.value
        return ResumeCritiqueResponse(
            atsScore=_clamp_ats_score(data.get("atsScore")),
            matchedKeywords=_string_list(data.get("matchedKeywords")),
            missingKeywords=_string_list(data.get("missingKeywords")),
            formattingNotes=_string_list(data.get("formattingNotes")),
            summary=str(data.get("summary") or "")
        )
