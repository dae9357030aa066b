"""Serverless entrypoint (AWS Lambda / Netlify Functions).

Accepted event shapes:
1) API Gateway REST / Netlify:
   {"httpMethod": "POST", "body": "{\"messages\": [...]}", "isBase64Encoded": false}

2) API Gateway HTTP API (payload v2):
   {"requestContext": {"http": {"method": "POST"}}, "body": "...", "isBase64Encoded": true}

Return:
   {"statusCode": ..., "headers": {"Content-Type": "application/json"}, "body": "<json>"}
"""
import asyncio
import base64
import binascii
from typing import Any, Dict, Optional

from models.chat_models import ChatResult
from services.chat_service import ChatService
from utils.constants import ErrorMessages
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


def _event_method(event: Dict[str, Any]) -> Optional[str]:
    method = event.get("httpMethod")
    if method:
        return method
    return ((event.get("requestContext") or {}).get("http") or {}).get("method")


def _event_body(event: Dict[str, Any]) -> Optional[bytes | str]:
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        return base64.b64decode(body, validate=True)
    return body


async def _run(event: Dict[str, Any]) -> ChatResult:
    method = _event_method(event)
    # Method is checked before the body is touched
    if not ChatService.is_allowed_method(method):
        return await ChatService.handle(method, None)

    try:
        body = _event_body(event)
    except (binascii.Error, ValueError) as e:
        app_logger.warning(f"Undecodable base64 body: {e}")
        return ChatService.error_result(400, ErrorMessages.INVALID_BODY)

    try:
        return await ChatService.handle(method, body)
    finally:
        # Each invocation gets its own event loop, so the pooled client can't outlive it
        await HTTPClientManager.close_all()


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """Handle one serverless invocation."""
    request_id = getattr(context, "aws_request_id", None)
    if request_id:
        app_logger.info(f"Invocation {request_id}")
    result = asyncio.run(_run(event or {}))
    return result.to_event_response()


lambda_handler = handler
