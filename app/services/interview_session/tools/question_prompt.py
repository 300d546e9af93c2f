"""
Question Prompt Utility Module

This module builds the question-generation prompt for a new interview session.
Without resume context it asks for generic role questions; with resume context it
embeds the (truncated) resume and asks for questions grounded in it.

Dependencies:
- app.core.secure_prompt_manager: For the rendered prompt templates.
- loguru: For logging.

Author: @kcaparas1630
"""

from typing import Optional
from loguru import logger
from app.core.secure_prompt_manager import secure_prompt_manager

MAX_RESUME_CONTEXT_LENGTH = 4000


def build_question_prompt(role: str, difficulty: str, question_count: int, resume_context: Optional[str] = None) -> str:
    """
    Build the user prompt for question generation.

    Args:
        role (str): Job role the interview targets.
        difficulty (str): Difficulty level of the questions.
        question_count (int): Exact number of questions to request.
        resume_context (str, optional): Extracted resume text.

    Returns:
        str: The prompt text.

    Example:
        >>> build_question_prompt("Data Engineer", "Beginner", 3)
        'Ask exactly 3 short and to the point Beginner-level interview questions for a Data Engineer.\\nReturn only numbered questions.'
    """
    context = (resume_context or "").strip()
    if not context:
        return secure_prompt_manager.get_generic_questions_prompt(role, difficulty, question_count)

    if len(context) > MAX_RESUME_CONTEXT_LENGTH:
        logger.info(f"Resume context truncated from {len(context)} to {MAX_RESUME_CONTEXT_LENGTH} characters")
        context = context[:MAX_RESUME_CONTEXT_LENGTH]

    return secure_prompt_manager.get_resume_questions_prompt(role, difficulty, question_count, context)
