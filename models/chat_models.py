"""
Data models for chat processing.
"""
import json
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel
from utils.constants import JSON_HEADERS


@dataclass
class ChatResult:
    """
    Framework-neutral outcome of one chat invocation.
    Adapters render it as a FastAPI response or a serverless event response.
    """
    status_code: int
    payload: dict[str, Any]
    headers: dict[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))

    @classmethod
    def from_model(cls, status_code: int, model: BaseModel) -> "ChatResult":
        """Build a result from a response model."""
        return cls(status_code=status_code, payload=model.model_dump())

    @property
    def body(self) -> str:
        """JSON-encoded payload."""
        return json.dumps(self.payload)

    def to_event_response(self) -> dict[str, Any]:
        """Serverless (Lambda/Netlify) response shape."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }
