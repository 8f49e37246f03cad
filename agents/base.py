"""Base agent class for all Gemini-backed agents."""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from google.genai import types

from core.config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AIUnavailableError(Exception):
    """The AI service is not configured or did not answer in time."""
    pass


@dataclass
class AIResult(Generic[T]):
    """
    Outcome of an agent call.

    ``fallback`` is True when ``value`` is the agent's fixed default rather
    than something parsed from a model response; ``error`` then says why.
    """

    value: T
    fallback: bool = False
    error: Optional[str] = None


class BaseAgent(ABC):
    """
    Base class for all AI agents.

    Subclasses implement ``process`` and must never raise: every failure
    (missing API key, timeout, provider error, unparseable output) turns into
    ``AIResult(fallback=True)``. Calls are not retried.
    """

    def __init__(
        self,
        name: str,
        instructions: str,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the agent.

        Args:
            name: Agent name, used in logs
            instructions: System instructions for the model
            model: Gemini model to use (defaults to GEMINI_TEXT_MODEL)
            timeout: Seconds to wait for a response (defaults to AI_TIMEOUT_SECONDS)
        """
        self.name = name
        self.instructions = instructions
        self.model = model or settings.gemini_text_model
        self.timeout = timeout or settings.ai_timeout_seconds
        self._client = None

    def _get_client(self):
        """Get or create the Gemini client."""
        if self._client is None:
            if not settings.gemini_api_key:
                raise AIUnavailableError("GEMINI_API_KEY is not configured")

            from google import genai

            self._client = genai.Client(api_key=settings.gemini_api_key)
        return self._client

    @abstractmethod
    async def process(self, *args: Any, **kwargs: Any) -> AIResult:
        """Run the agent and return a result (never raises)."""
        pass

    async def run(
        self,
        contents: Any,
        *,
        json_output: bool = False,
    ) -> str:
        """Send one request to the model and return its text.

        Args:
            contents: Prompt text, or a list of prompt parts
            json_output: Ask the model for a JSON document

        Raises:
            AIUnavailableError: If not configured, timed out, or the reply is empty
        """
        client = self._get_client()
        config_kwargs: dict[str, Any] = {"system_instruction": self.instructions}
        if json_output:
            config_kwargs["response_mime_type"] = "application/json"

        try:
            response = await asyncio.wait_for(
                client.aio.models.generate_content(
                    model=self.model,
                    contents=contents,
                    config=types.GenerateContentConfig(**config_kwargs),
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            raise AIUnavailableError(
                f"{self.name} timed out after {self.timeout}s"
            ) from exc

        text = response.text
        if not text:
            raise AIUnavailableError(f"{self.name} returned an empty response")
        return text

    def fallback(self, value: T, exc: BaseException) -> AIResult[T]:
        """Log the failure and wrap the agent's default value."""
        logger.warning(
            f"{self.name} falling back to default: {type(exc).__name__}: {exc}"
        )
        return AIResult(value=value, fallback=True, error=type(exc).__name__)
