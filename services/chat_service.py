"""
Chat service containing the request pipeline.
Validates the method and body, calls the LLM, and shapes the response.
"""
import json
from typing import Any, List, Optional, Union

from pydantic import ValidationError

from models.api_models import ChatRequest, ChatReply, ErrorResponse, Message
from models.chat_models import ChatResult
from services.llm import LLMService, UpstreamError
from utils.constants import SYSTEM_PROMPT, ErrorMessages
from utils.logger import app_logger


class InvalidRequestError(ValueError):
    """Raised when the request body cannot be turned into a chat request."""


def _reject_constant(name: str) -> Any:
    """Refuse NaN and Infinity, which json accepts but are not JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


class ChatService:
    """Service for handling chat logic."""

    ALLOWED_METHOD = "POST"

    @staticmethod
    def is_allowed_method(method: Optional[str]) -> bool:
        # HTTP methods are case-sensitive
        return method == ChatService.ALLOWED_METHOD

    @staticmethod
    def parse_messages(body: Union[str, bytes, None]) -> List[Message]:
        """
        Parse a raw JSON body and return its messages.

        Raises:
            InvalidRequestError: With the client-facing message for the failure
        """
        try:
            if isinstance(body, bytes):
                body = body.decode("utf-8")
            if not body:
                raise ValueError("empty body")
            data: Any = json.loads(body, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            # UnicodeDecodeError and JSONDecodeError are both ValueErrors;
            # pathologically nested arrays exhaust the decoder stack
            app_logger.warning(f"Unparseable request body: {e}")
            raise InvalidRequestError(ErrorMessages.INVALID_BODY) from e

        if data is None:
            raise InvalidRequestError(ErrorMessages.INVALID_BODY)

        if not isinstance(data, dict):
            raise InvalidRequestError(ErrorMessages.INVALID_MESSAGES)

        try:
            request = ChatRequest.model_validate(data)
        except ValidationError as e:
            app_logger.warning(f"Rejected messages field: {e.errors()[0].get('msg')}")
            raise InvalidRequestError(ErrorMessages.INVALID_MESSAGES) from e

        return request.messages

    @staticmethod
    async def get_reply(messages: List[Message]) -> str:
        """Send the transcript with the intake system prompt and return the reply."""
        app_logger.info(f"Dispatching {len(messages)} message(s) to LLM")
        return await LLMService.create_message(SYSTEM_PROMPT, messages)

    @staticmethod
    def error_result(status_code: int, message: str) -> ChatResult:
        return ChatResult.from_model(status_code, ErrorResponse(error=message))

    @staticmethod
    async def handle(method: Optional[str], body: Union[str, bytes, None]) -> ChatResult:
        """
        Run one chat invocation end to end.

        Each stage is terminal on failure:
        405 for a non-POST method, 400 for a bad body,
        502 for any failure talking to the LLM.

        Args:
            method: HTTP method of the invocation
            body: Raw request body

        Returns:
            ChatResult with status code and JSON payload
        """
        if not ChatService.is_allowed_method(method):
            app_logger.warning(f"Rejected {method} request")
            return ChatService.error_result(405, ErrorMessages.METHOD_NOT_ALLOWED)

        try:
            messages = ChatService.parse_messages(body)
        except InvalidRequestError as e:
            return ChatService.error_result(400, str(e))

        try:
            reply = await ChatService.get_reply(messages)
        except UpstreamError as e:
            app_logger.error(f"LLM API error: {e}")
            return ChatService.error_result(502, ErrorMessages.UPSTREAM_FAILURE)
        except Exception as e:
            app_logger.exception(f"Unexpected error while calling LLM: {e}")
            return ChatService.error_result(502, ErrorMessages.UPSTREAM_FAILURE)

        return ChatResult.from_model(200, ChatReply(reply=reply))
