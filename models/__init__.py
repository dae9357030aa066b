"""
Models package exports.
"""
from models.api_models import Message, ChatRequest, ChatReply, ErrorResponse
from models.chat_models import ChatResult

__all__ = [
    'Message',
    'ChatRequest',
    'ChatReply',
    'ErrorResponse',
    'ChatResult'
]
