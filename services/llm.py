"""
LLM service for the Anthropic Messages API.
Sends one non-streaming request and returns the reply text.
"""
from typing import Any, List, Optional

import anthropic

from config import Config
from models.api_models import Message
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


class UpstreamError(Exception):
    """Raised when the LLM API call fails or returns an unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LLMService:
    """Service for calling the hosted LLM."""

    @staticmethod
    def get_client() -> anthropic.AsyncAnthropic:
        """Anthropic client over the shared connection pool, with retries disabled."""
        return anthropic.AsyncAnthropic(
            api_key=Config.ANTHROPIC_API_KEY,
            base_url=Config.ANTHROPIC_BASE_URL,
            timeout=Config.LLM_TIMEOUT,
            max_retries=0,
            http_client=HTTPClientManager.get_llm_client()
        )

    @staticmethod
    def build_payload(system_prompt: str, messages: List[Message]) -> dict[str, Any]:
        """Build the Messages API request arguments."""
        return {
            "model": Config.LLM_MODEL,
            "max_tokens": Config.LLM_MAX_TOKENS,
            "system": system_prompt,
            "messages": messages,
        }

    @staticmethod
    async def create_message(system_prompt: str, messages: List[Message]) -> str:
        """
        Send the transcript to the LLM and return the first content block's text.

        Args:
            system_prompt: System instruction for the model
            messages: Conversation history, forwarded as-is

        Returns:
            Reply text

        Raises:
            UpstreamError: On missing credentials, API or transport errors,
                or malformed responses
        """
        if not Config.ANTHROPIC_API_KEY:
            raise UpstreamError("ANTHROPIC_API_KEY is not configured")

        client = LLMService.get_client()
        try:
            response = await client.messages.create(**LLMService.build_payload(system_prompt, messages))
        except anthropic.APIStatusError as e:
            raise UpstreamError(f"LLM API returned {e.status_code}: {e.message}", status_code=e.status_code) from e
        except anthropic.APIError as e:
            raise UpstreamError(f"{type(e).__name__}: {e}") from e

        text = LLMService.extract_text(response)
        app_logger.info(f"LLM call completed: {len(text)} characters, stop_reason={getattr(response, 'stop_reason', None)}")
        return text

    @staticmethod
    def extract_text(response: Any) -> str:
        """Pull the text of the first content block out of a Messages API response."""
        try:
            block = response.content[0]
        except (AttributeError, IndexError, KeyError, TypeError) as e:
            raise UpstreamError(f"Malformed LLM response: {e!r}") from e

        text = getattr(block, "text", None)
        if not isinstance(text, str):
            raise UpstreamError(f"Malformed LLM response: first block has no text ({type(block).__name__})")
        return text
