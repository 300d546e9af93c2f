"""
Description:
Extract structured data from free-form completion text.

The completion service is not guaranteed to return clean output, so every
extractor in this module is total: malformed input never raises, it comes back
as an ExtractionResult carrying the error and the raw text for diagnostics.

Extractors:
- extract_question_list: non-blank trimmed lines, numbering preserved.
- extract_score: "Score (out of 10): N", lenient default of 0.
- extract_structured_list: first JSON array of objects in the text.
- extract_json_object: first JSON object in the text.

Dependencies:
- app.constants.regex_patterns: For accessing precompiled regex patterns.
- json: For parsing the bracketed regions.
- loguru: For logging fallbacks.

Author: @kcaparas1630

"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar
from loguru import logger
from app.constants.regex_patterns import REGEX_PATTERNS

T = TypeVar("T")

MAX_SCORE = 10
DEFAULT_SCORE = 0


@dataclass
class ExtractionResult(Generic[T]):
    """Outcome of one extraction: either a value or an error, plus the raw text."""
    value: Optional[T] = None
    error: Optional[str] = None
    raw: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


def extract_question_list(content: Optional[str]) -> ExtractionResult[List[str]]:
    lines = REGEX_PATTERNS['line_break'].split(content or "")
    questions = [line.strip() for line in lines if line.strip()]
    if not questions:
        return ExtractionResult(error="AI did not return questions", raw=content or "")
    return ExtractionResult(value=questions, raw=content)


def extract_score(content: Optional[str]) -> ExtractionResult[int]:
    """
    Find the "Score (out of 10): N" line in an evaluation.

    A missing score degrades to 0 rather than failing, since the feedback text is
    still useful to the caller. Scores above 10 are clamped.
    """
    match = REGEX_PATTERNS['score'].search(content or "")
    if not match:
        logger.warning("No score found in evaluation, defaulting to 0")
        return ExtractionResult(value=DEFAULT_SCORE, raw=content or "")
    return ExtractionResult(value=min(int(match.group(1)), MAX_SCORE), raw=content)


def extract_structured_list(content: Optional[str]) -> ExtractionResult[List[Dict[str, Any]]]:
    raw = content or ""
    match = REGEX_PATTERNS['json_array'].search(raw)
    if not match:
        return ExtractionResult(error="No JSON found", raw=raw)
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.error(f"JSON parsing error: {e}")
        return ExtractionResult(error=f"Invalid JSON: {e}", raw=raw)
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        return ExtractionResult(error="Expected a JSON array of objects", raw=raw)
    return ExtractionResult(value=data, raw=raw)


def extract_json_object(content: Optional[str]) -> ExtractionResult[Dict[str, Any]]:
    raw = content or ""
    match = REGEX_PATTERNS['json_object'].search(raw)
    if not match:
        return ExtractionResult(error="No JSON found", raw=raw)
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.error(f"JSON parsing error: {e}")
        return ExtractionResult(error=f"Invalid JSON: {e}", raw=raw)
    if not isinstance(data, dict):
        return ExtractionResult(error="Expected a JSON object", raw=raw)
    return ExtractionResult(value=data, raw=raw)
