"""
AI Client Manager

This module manages separate AI client instances for different services to prevent
API contention and improve performance. Each service type gets its own dedicated
client instance pointed at the OpenAI-compatible completion endpoint.
"""

import os
from openai import AsyncOpenAI
import threading
from typing import Dict, Optional
from dotenv import load_dotenv
from loguru import logger

# Ensure .env is loaded
load_dotenv()

DEFAULT_BASE_URL = "https://router.huggingface.co/v1"
DEFAULT_MODEL = "Qwen/Qwen2.5-72B-Instruct"

SERVICE_TYPES = ("interview", "resume")


def get_completion_model() -> str:
    """Model name sent with every completion request."""
    return os.getenv("COMPLETION_MODEL", DEFAULT_MODEL)


class AIClientManager:
    """
    Manages dedicated AI client instances for different services.

    Creates one AsyncOpenAI client per service type the first time any of them is
    requested, so importing the module never requires credentials.
    """

    _instance: Optional['AIClientManager'] = None
    _lock = threading.Lock()

    def __init__(self):
        self._clients: Dict[str, AsyncOpenAI] = {}
        self._initialized = False

    @classmethod
    def get_instance(cls) -> 'AIClientManager':
        """Thread-safe singleton instance getter."""
        if cls._instance is None:
            with cls._lock:
                # Double-check locking pattern
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def _initialize_clients(self):
        """Lazy initialization of client instances."""
        if self._initialized:
            return

        with self._lock:
            # Double-check locking for initialization
            if self._initialized:
                return

            api_key = os.getenv("COMPLETION_API_KEY") or os.getenv("HF_API_KEY")
            if not api_key:
                if os.getenv("ENV") == "test":
                    logger.warning("COMPLETION_API_KEY not set - completion clients unavailable in test mode")
                    return
                raise RuntimeError(
                    "COMPLETION_API_KEY environment variable is not set. "
                    "Please set it in your .env file or environment variables."
                )

            base_url = os.getenv("COMPLETION_BASE_URL", DEFAULT_BASE_URL)

            try:
                self._clients = {
                    service_type: AsyncOpenAI(base_url=base_url, api_key=api_key)
                    for service_type in SERVICE_TYPES
                }
                self._initialized = True
                logger.info(f"Initialized {len(self._clients)} dedicated AI client instances")

            except Exception as e:
                logger.error(f"Failed to initialize AI clients: {e}")
                raise RuntimeError(f"Failed to initialize AI clients: {e}") from e

    def get_client(self, service_type: str) -> AsyncOpenAI:
        """
        Get a dedicated client for the specified service type.

        Args:
            service_type (str): Type of service ("interview", "resume")

        Returns:
            AsyncOpenAI: Dedicated client instance for the service

        Raises:
            ValueError: If service_type is not supported
            RuntimeError: If clients failed to initialize
        """
        # Lazy initialization on first access
        self._initialize_clients()

        if not self._initialized:
            raise RuntimeError("AI clients failed to initialize properly")

        if service_type not in self._clients:
            available_types = list(self._clients.keys()) if self._clients else []
            raise ValueError(f"Unsupported service type: {service_type}. Available: {available_types}")

        return self._clients[service_type]

    def get_interview_client(self) -> AsyncOpenAI:
        """Get dedicated client for interview question and scoring calls."""
        return self.get_client("interview")

    def get_resume_client(self) -> AsyncOpenAI:
        """Get dedicated client for resume critique calls."""
        return self.get_client("resume")


def get_ai_client_manager() -> AIClientManager:
    """Get the singleton AIClientManager instance with lazy initialization."""
    return AIClientManager.get_instance()
