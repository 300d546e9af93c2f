"""
Interview Session Service Module

This module owns the interview session lifecycle: creating a session with
generated or supplied questions, scoring answers one at a time, summarizing the
persisted scores and producing ideal answers once every question was attempted.

Every operation checks ownership first. A session that does not exist and a
session owned by someone else raise the same SessionNotFound error.

Dependencies:
- loguru: For logging operations.
- app.core.completion_client: For the injected completion capability.
- app.core.secure_prompt_manager: For prompt rendering.
- app.helper.response_parser: For mining structured data out of model text.
- app.services.interview_session.tools: For the store, prompt strategy, locks and scoring.
- app.errors.exceptions: For custom exception handling.

Author: @kcaparas1630
"""

import uuid
from typing import List, Optional
from loguru import logger
from app.core.completion_client import CompletionClient
from app.core.secure_prompt_manager import secure_prompt_manager, sanitize_text
from app.helper.response_parser import extract_question_list, extract_score, extract_structured_list
from app.models.interview_models import utc_now
from app.schemas.interview import (
    InterviewSession,
    StartInterviewResponse,
    AnswerResponse,
    InterviewSummaryResponse,
    IdealAnswer,
    InterviewListItem,
    AdminInterviewListItem
)
from app.services.interview_session.tools.question_prompt import build_question_prompt
from app.services.interview_session.tools.session_store import InterviewSessionStore
from app.services.interview_session.tools.session_locks import session_lock
from app.services.interview_session.tools.score_summary import average_score, verdict_for
from app.errors.exceptions import (
    InvalidInput,
    SessionNotFound,
    IncompleteSession,
    EmptyGeneration,
    ParseError,
    ConcurrentUpdateError
)

DEFAULT_ROLE = "Software Engineer"
DEFAULT_DIFFICULTY = "Beginner"
DEFAULT_QUESTION_COUNT = 3

QUESTION_MAX_TOKENS = 512
EVALUATION_MAX_TOKENS = 256
IDEAL_ANSWERS_MAX_TOKENS = 1024
TEMPERATURE = 0.7

MAX_ROLE_LENGTH = 200
MAX_DIFFICULTY_LENGTH = 50


def _label_or_default(value: Optional[str], default: str, max_length: int) -> str:
    # Result is never empty and holds no control characters
    cleaned = sanitize_text(value or "", max_length=max_length, escape_html=False, allow_empty=True)
    return cleaned or default


class InterviewSessionService:
    """
    Service class driving interview sessions from creation to summary.
    """

    def __init__(self, client: CompletionClient, store: InterviewSessionStore):
        """
        Initialize the service with its collaborators.

        Args:
            client (CompletionClient): The completion capability used for every model call.
            store (InterviewSessionStore): The session persistence adapter.
        """
        self.client = client
        self.store = store

    def _get_owned_session(self, owner_id: str, session_id: str) -> InterviewSession:
        interview = self.store.get_by_id_and_owner(session_id, owner_id)
        if interview is None:
            logger.warning(f"Interview {session_id} not found for user {owner_id}")
            raise SessionNotFound(session_id)
        return interview

    async def start_interview(
        self,
        owner_id: str,
        role: Optional[str] = None,
        difficulty: Optional[str] = None,
        question_count: Optional[int] = None,
        resume_context: Optional[str] = None,
        supplied_questions: Optional[List[str]] = None
    ) -> StartInterviewResponse:
        """
        Create a new interview session.

        Supplied questions are reused verbatim without calling the model, which is
        how a candidate retakes an interview with the same questions.

        Args:
            owner_id (str): Verified uid of the caller.
            role (str, optional): Job role, defaults to "Software Engineer" when blank.
            difficulty (str, optional): Difficulty level, defaults to "Beginner" when blank.
            question_count (int, optional): Number of questions, defaults to 3 when falsy.
            resume_context (str, optional): Resume text used to tailor the questions.
            supplied_questions (List[str], optional): Questions to reuse.

        Returns:
            StartInterviewResponse: The new interview id and its questions.

        Raises:
            InvalidInput: If the request cannot be rendered into a prompt.
            UpstreamUnavailable: If the completion call fails.
            EmptyGeneration: If the model returned no usable question lines.
        """
        role = _label_or_default(role, DEFAULT_ROLE, MAX_ROLE_LENGTH)
        difficulty = _label_or_default(difficulty, DEFAULT_DIFFICULTY, MAX_DIFFICULTY_LENGTH)
        question_count = question_count or DEFAULT_QUESTION_COUNT

        if supplied_questions:
            questions = list(supplied_questions)
            logger.info(f"Reusing {len(questions)} supplied questions for {role}")
        else:
            try:
                prompt = build_question_prompt(role, difficulty, question_count, resume_context)
            except ValueError as e:
                raise InvalidInput(str(e)) from e
            logger.info(f"Requesting {question_count} {difficulty} questions for {role}")
            text = await self.client.complete(
                secure_prompt_manager.get_system_prompt("question_generation"),
                prompt,
                max_tokens=QUESTION_MAX_TOKENS,
                temperature=TEMPERATURE
            )
            extraction = extract_question_list(text)
            if not extraction.ok:
                logger.error(f"Question generation yielded nothing usable: {extraction.raw[:200]!r}")
                raise EmptyGeneration(extraction.error)
            questions = extraction.value

        interview = InterviewSession(
            id=uuid.uuid4().hex,
            owner_id=owner_id,
            role=role,
            difficulty=difficulty,
            questions=questions,
            answers=[],
            scores=[],
            created_at=utc_now()
        )
        self.store.insert(interview)
        logger.info(f"Created interview {interview.id} with {len(questions)} questions for user {owner_id}")

        return StartInterviewResponse(interviewId=interview.id, questions=questions)

    async def submit_answer(
        self,
        owner_id: str,
        session_id: str,
        question: str,
        answer: Optional[str],
        question_index: Optional[int] = None
    ) -> AnswerResponse:
        """
        Score one answer and append it to the session.

        Answers and scores are only written after the evaluation succeeded, in one
        update guarded against concurrent writers.

        Raises:
            SessionNotFound: If the session is missing or not owned by the caller.
            InvalidInput: If the answer is blank, the session is already complete,
                or question_index is not the next unanswered slot.
            UpstreamUnavailable: If the completion call fails.
            SessionNotFound: If the session was deleted while the answer was being scored.
            ConcurrentUpdateError: If another write landed first.
        """
        async with session_lock(session_id):
            interview = self._get_owned_session(owner_id, session_id)

            if not answer or not answer.strip():
                raise InvalidInput("Answer is required")

            if interview.is_complete:
                raise InvalidInput("All questions in this interview have already been answered")

            if question_index is not None and question_index != interview.next_question_index:
                raise InvalidInput(
                    f"Expected an answer for question {interview.next_question_index}, got {question_index}"
                )

            try:
                prompt = secure_prompt_manager.get_answer_evaluation_prompt(question, answer)
            except ValueError as e:
                raise InvalidInput(str(e)) from e

            feedback = await self.client.complete(
                secure_prompt_manager.get_system_prompt("answer_evaluation"),
                prompt,
                max_tokens=EVALUATION_MAX_TOKENS,
                temperature=TEMPERATURE
            )
            score = extract_score(feedback).value

            answers = interview.answers + [answer]
            scores = interview.scores + [score]
            if not self.store.update_answers_and_scores(session_id, answers, scores, expected_answers=interview.answers):
                if self.store.get_by_id(session_id) is None:
                    logger.warning(f"Interview {session_id} was deleted while its answer was being scored")
                    raise SessionNotFound(session_id)
                logger.warning(f"Concurrent update detected on interview {session_id}")
                raise ConcurrentUpdateError(session_id)

        logger.info(f"Scored answer {len(answers)}/{len(interview.questions)} of interview {session_id}: {score}")
        return AnswerResponse(feedback=feedback, score=score)

    async def get_summary(self, owner_id: str, session_id: str) -> InterviewSummaryResponse:
        interview = self._get_owned_session(owner_id, session_id)
        average = average_score(interview.scores)

        return InterviewSummaryResponse(
            role=interview.role,
            totalQuestions=len(interview.questions),
            averageScore=average,
            scores=interview.scores,
            verdict=verdict_for(average)
        )

    async def get_ideal_answers(self, owner_id: str, session_id: str) -> List[IdealAnswer]:
        """
        Generate a model answer for every question of a completed session.

        Raises:
            SessionNotFound: If the session is missing or not owned by the caller.
            IncompleteSession: If some question has no answer yet.
            UpstreamUnavailable: If the completion call fails.
            ParseError: If no valid answer list could be extracted.
        """
        interview = self._get_owned_session(owner_id, session_id)

        if len(interview.answers) < len(interview.questions):
            raise IncompleteSession()

        try:
            prompt = secure_prompt_manager.get_ideal_answers_prompt(
                _label_or_default(interview.role, DEFAULT_ROLE, MAX_ROLE_LENGTH),
                _label_or_default(interview.difficulty, DEFAULT_DIFFICULTY, MAX_DIFFICULTY_LENGTH),
                interview.questions
            )
        except ValueError as e:
            raise InvalidInput(str(e)) from e
        raw_text = await self.client.complete(
            secure_prompt_manager.get_system_prompt("ideal_answers"),
            prompt,
            max_tokens=IDEAL_ANSWERS_MAX_TOKENS,
            temperature=TEMPERATURE
        )

        extraction = extract_structured_list(raw_text)
        if not extraction.ok:
            logger.error(f"Failed to parse ideal answers ({extraction.error}): {raw_text}")
            raise ParseError("Failed to parse ideal answers", raw=raw_text)

        ideal_answers = []
        for item in extraction.value:
            question = item.get("question")
            ideal_answer = item.get("idealAnswer")
            if not isinstance(question, str) or not isinstance(ideal_answer, str):
                logger.error(f"Ideal answer entry missing fields: {item}")
                raise ParseError("Failed to parse ideal answers", raw=raw_text)
            ideal_answers.append(IdealAnswer(question=question, idealAnswer=ideal_answer))

        return ideal_answers

    def list_interviews(self, owner_id: str) -> List[InterviewListItem]:
        return [
            InterviewListItem(id=item.id, role=item.role, date=item.created_at, scores=item.scores)
            for item in self.store.list_for_owner(owner_id)
        ]

    def list_all_interviews(self) -> List[AdminInterviewListItem]:
        return [
            AdminInterviewListItem(
                id=item.id, role=item.role, date=item.created_at, scores=item.scores, ownerId=item.owner_id
            )
            for item in self.store.list_all()
        ]

    def delete_interview(self, session_id: str) -> None:
        if not self.store.delete(session_id):
            raise SessionNotFound(session_id)
        logger.info(f"Deleted interview {session_id}")
