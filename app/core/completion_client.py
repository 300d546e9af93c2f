"""
Completion Client Module

This module wraps a single call/response exchange with the external chat-completion
service. Services receive a CompletionClient through dependency injection so the
shared AsyncOpenAI handle never leaks into business logic and tests can pass a fake.

Dependencies:
- openai: For the AsyncOpenAI client and its error types.
- loguru: For logging operations.
- app.core.ai_client_manager: For the dedicated client instances.
- app.errors.exceptions: For UpstreamUnavailable.

Author: @kcaparas1630
"""

from typing import Optional
from openai import AsyncOpenAI, OpenAIError
from loguru import logger
from app.core.ai_client_manager import get_ai_client_manager, get_completion_model
from app.errors.exceptions import UpstreamUnavailable


class CompletionClient:
    """
    Thin async wrapper around one chat-completion call.

    Raises UpstreamUnavailable on transport/API errors and on responses that carry
    no generated text. No retries are attempted.
    """

    def __init__(self, client: Optional[AsyncOpenAI] = None, model: Optional[str] = None, service_type: str = "interview"):
        self._client = client
        self.model = model or get_completion_model()
        self.service_type = service_type

    @property
    def client(self) -> AsyncOpenAI:
        # Resolved on first call so routes that never reach the model need no credentials
        if self._client is None:
            try:
                self._client = get_ai_client_manager().get_client(self.service_type)
            except RuntimeError as e:
                logger.error(f"Completion client unavailable: {e}")
                raise UpstreamUnavailable("AI service is not configured") from e
        return self._client

    async def complete(self, system_prompt: str, user_prompt: str, max_tokens: int, temperature: float) -> str:
        """
        Send a system/user prompt pair and return the generated text.

        Args:
            system_prompt (str): Instruction for the assistant role.
            user_prompt (str): The task prompt.
            max_tokens (int): Upper bound on generated tokens.
            temperature (float): Sampling temperature.

        Returns:
            str: The raw text of the first choice.

        Raises:
            UpstreamUnavailable: If the call fails or yields no text.
        """
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ]
            )
        except OpenAIError as e:
            logger.error(f"Completion API error: {e}")
            raise UpstreamUnavailable("Failed to connect to AI service", raw=str(e)) from e

        if not response or not getattr(response, "choices", None):
            logger.error(f"Invalid completion response: {response}")
            raise UpstreamUnavailable("Invalid response from AI service")

        message = response.choices[0].message
        content = message.content if message else None
        if not content:
            raise UpstreamUnavailable("AI service returned an empty response")

        logger.debug(f"Completion received ({len(content)} chars)")
        return content


def get_completion_client() -> CompletionClient:
    """FastAPI dependency providing the interview completion client."""
    return CompletionClient(service_type="interview")


def get_resume_completion_client() -> CompletionClient:
    """FastAPI dependency providing the resume critique completion client."""
    return CompletionClient(service_type="resume")
