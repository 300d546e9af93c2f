"""
Secure Prompt Manager Module

This module provides a secure way to manage AI prompts by isolating them from user data
to prevent injection attacks. It implements a template-based system with explicit
placeholders and comprehensive sanitization.

The module contains:
- PromptTemplate: A dataclass for secure prompt templates with placeholders
- SecurePromptManager: Main class for managing secure prompts
- sanitize_text: Utility function for text sanitization

Dependencies:
- dataclasses: For template data structures
- typing: For type hints
- re: For regex-based sanitization
- html: For HTML entity encoding
- loguru: For logging truncation warnings

Author: @kcaparas1630
"""

from typing import Dict, List, Optional
from dataclasses import dataclass
import re
import html
from loguru import logger

def sanitize_text(text: str, max_length: int = 1000, escape_html: bool = True, allow_empty: bool = False) -> str:
    """
    Sanitize text input to prevent injection attacks and ensure data safety.

    This function performs multiple sanitization steps:
    1. Optional HTML entity encoding to prevent XSS
    2. Strips leading/trailing whitespace
    3. Removes null bytes and other control characters
    4. Configurable length limiting to prevent oversized upstream requests
    5. Normalizes unicode characters

    Args:
        text (str): The text to sanitize
        max_length (int): Maximum allowed length (default: 1000)
        escape_html (bool): Whether to HTML escape the text (default: True)
        allow_empty (bool): Whether an empty result is acceptable (default: False)

    Returns:
        str: The sanitized text

    Raises:
        ValueError: If text is None, or empty after sanitization when not allowed
    """
    if text is None:
        raise ValueError("Text cannot be None")

    # Convert to string if not already
    text = str(text)

    # Optional HTML entity encoding to prevent XSS
    if escape_html:
        text = html.escape(text)

    # Strip leading/trailing whitespace
    text = text.strip()

    # Remove null bytes and other control characters (except newlines and tabs)
    text = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', text)

    if len(text) > max_length:
        text = text[:max_length]
        logger.warning(f"Text truncated to {max_length} characters for security")

    # Normalize unicode characters
    text = text.encode('utf-8', errors='ignore').decode('utf-8')

    if not text and not allow_empty:
        raise ValueError("Text cannot be empty after sanitization")

    return text

@dataclass
class PromptTemplate:
    """Secure prompt template with placeholders for safe data injection."""
    template: str
    placeholders: Dict[str, str]
    sanitization_config: Dict[str, Dict] = None  # Per-placeholder sanitization config

    def render(self, **kwargs) -> str:
        """
        Safely render the template with provided data.

        Args:
            **kwargs: Data to inject into placeholders

        Returns:
            str: Rendered prompt with sanitized data

        Raises:
            ValueError: If required placeholders are missing or data is invalid
        """
        missing_placeholders = set(self.placeholders.keys()) - set(kwargs.keys())
        if missing_placeholders:
            raise ValueError(f"Missing required placeholders: {missing_placeholders}")

        sanitized_data = {}
        for key, value in kwargs.items():
            if key in self.placeholders:
                config = self.sanitization_config.get(key, {}) if self.sanitization_config else {}
                sanitized_data[key] = sanitize_text(
                    str(value),
                    max_length=config.get('max_length', 1000),
                    escape_html=config.get('escape_html', True),
                    allow_empty=config.get('allow_empty', False)
                )
            else:
                # Skip unknown keys to prevent injection
                logger.warning(f"Unknown placeholder key: {key}")
                continue

        try:
            return self.template.format(**sanitized_data)
        except KeyError as e:
            raise ValueError(f"Template rendering error: {e}") from e

class SecurePromptManager:
    """
    Secure prompt manager that isolates prompts from user data to prevent injection attacks.

    Every prompt the service sends to the completion endpoint is rendered here, from
    question generation through answer evaluation, ideal answers and resume critique.
    """

    SYSTEM_PROMPTS = {
        "question_generation": "You are a professional interviewer.",
        "answer_evaluation": "You are an interview coach.",
        "ideal_answers": "You are a senior interviewer.",
        "resume_critique": "You are an expert technical recruiter and resume reviewer familiar with applicant tracking systems.",
    }

    def __init__(self):
        self._templates = self._initialize_templates()

    def _initialize_templates(self) -> Dict[str, PromptTemplate]:
        """Initialize secure prompt templates with explicit placeholders."""
        return {
            "generic_questions": PromptTemplate(
                template="""Ask exactly {question_count} short and to the point {difficulty}-level interview questions for a {role}.
Return only numbered questions.""",
                placeholders={
                    "question_count": "Number of questions to ask",
                    "difficulty": "Difficulty level of the questions",
                    "role": "Job role the interview targets"
                },
                sanitization_config={
                    "role": {"max_length": 200},
                    "difficulty": {"max_length": 50}
                }
            ),
            "resume_questions": PromptTemplate(
                template="""Ask exactly {question_count} short and to the point {difficulty}-level interview questions for a {role}.
The candidate shared the resume below. Ground at least half of the questions in specific projects, skills or experience from the resume.
If the resume is sparse or unrelated to the role, ask generic but role-relevant questions instead.
Return only numbered questions.

<resume>
{resume_context}
</resume>""",
                placeholders={
                    "question_count": "Number of questions to ask",
                    "difficulty": "Difficulty level of the questions",
                    "role": "Job role the interview targets",
                    "resume_context": "Truncated resume text"
                },
                sanitization_config={
                    "role": {"max_length": 200},
                    "difficulty": {"max_length": 50},
                    "resume_context": {"max_length": 4000, "escape_html": False}
                }
            ),
            "answer_evaluation": PromptTemplate(
                template="""Question: {question}
Candidate Answer: {answer}
Evaluate briefly and respond exactly like this:
Score (out of 10): <number>
Feedback: <one sentence>""",
                placeholders={
                    "question": "Interview question being answered",
                    "answer": "Candidate's answer to evaluate"
                },
                sanitization_config={
                    "question": {"allow_empty": True},
                    "answer": {"max_length": 4000}
                }
            ),
            "ideal_answers": PromptTemplate(
                template="""For each interview question, generate an IDEAL (10/10) answer.
Answers should be clear, short, structured, and interview-ready.
Job Role: {role}
Difficulty: {difficulty}
Return the response STRICTLY in JSON like this:
[
  {{ "question": "Question text", "idealAnswer": "Perfect answer text" }}
]
Questions:
{questions}""",
                placeholders={
                    "role": "Job role the interview targets",
                    "difficulty": "Difficulty level of the interview",
                    "questions": "Numbered list of the session's questions"
                },
                sanitization_config={
                    "role": {"max_length": 200},
                    "difficulty": {"max_length": 50},
                    "questions": {"max_length": 20000, "escape_html": False}
                }
            ),
            "resume_critique": PromptTemplate(
                template="""Review the resume below for the target role "{target_role}".
Return ONLY valid JSON with this exact structure - no explanations or additional text:
{{
  "atsScore": 72,
  "matchedKeywords": ["Keyword 1", "Keyword 2"],
  "missingKeywords": ["Keyword 3", "Keyword 4"],
  "formattingNotes": ["Note 1", "Note 2"],
  "summary": "Two or three sentence overall critique"
}}
atsScore must be an integer between 0 and 100.

<resume>
{resume_text}
</resume>""",
                placeholders={
                    "target_role": "Role the resume is evaluated against",
                    "resume_text": "Truncated resume text"
                },
                sanitization_config={
                    "target_role": {"max_length": 200},
                    "resume_text": {"max_length": 4000, "escape_html": False}
                }
            )
        }

    def get_system_prompt(self, prompt_type: str) -> str:
        """Return the fixed system prompt for a prompt type."""
        return self.SYSTEM_PROMPTS[prompt_type]

    def get_generic_questions_prompt(self, role: str, difficulty: str, question_count: int) -> str:
        return self._templates["generic_questions"].render(
            question_count=question_count,
            difficulty=difficulty,
            role=role
        )

    def get_resume_questions_prompt(self, role: str, difficulty: str, question_count: int, resume_context: str) -> str:
        return self._templates["resume_questions"].render(
            question_count=question_count,
            difficulty=difficulty,
            role=role,
            resume_context=resume_context
        )

    def get_answer_evaluation_prompt(self, question: str, answer: str) -> str:
        """
        Get a secure answer evaluation prompt with sanitized user data.

        Args:
            question: The interview question (may be blank)
            answer: The candidate's answer

        Returns:
            str: Secure prompt with sanitized data

        Raises:
            ValueError: If the answer is empty after sanitization
        """
        return self._templates["answer_evaluation"].render(question=question or "", answer=answer)

    def get_ideal_answers_prompt(self, role: str, difficulty: str, questions: List[str]) -> str:
        numbered = "\n".join(f"{i + 1}. {question}" for i, question in enumerate(questions))
        return self._templates["ideal_answers"].render(role=role, difficulty=difficulty, questions=numbered)

    def get_resume_critique_prompt(self, resume_text: str, target_role: Optional[str] = None) -> str:
        return self._templates["resume_critique"].render(
            target_role=target_role or "any relevant role",
            resume_text=resume_text
        )


# Global instance for reuse across the application
secure_prompt_manager = SecurePromptManager()
