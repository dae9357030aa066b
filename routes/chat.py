"""
Route handlers for chat operations.
Handles the /chat endpoint and its serverless-compatible alias.
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from models.api_models import ChatReply, ErrorResponse
from services.chat_service import ChatService

router = APIRouter()

# Every method is routed here so the 405 body matches the serverless handler
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

CHAT_PATHS = ["/chat", "/.netlify/functions/chat"]

CHAT_RESPONSES = {
    200: {"model": ChatReply},
    400: {"model": ErrorResponse},
    405: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


async def chat(request: Request):
    """
    Chat endpoint: forwards the conversation to the intake agent and returns its reply.
    """
    body = await request.body()
    result = await ChatService.handle(request.method, body)
    return JSONResponse(status_code=result.status_code, content=result.payload)


for path in CHAT_PATHS:
    router.add_api_route(path, chat, methods=ALL_METHODS, responses=CHAT_RESPONSES)
