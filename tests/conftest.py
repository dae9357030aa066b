import pytest

from tests.fixtures.responses import MOCK_MESSAGES_API_RESPONSE


@pytest.fixture(autouse=True)
def anthropic_api_key(monkeypatch):
    """Set a dummy API key so no test depends on the real environment."""
    from config import Config
    monkeypatch.setattr(Config, "ANTHROPIC_API_KEY", "test-anthropic-key")
    return "test-anthropic-key"


@pytest.fixture
def http_client_builder():
    from tests.fixtures.mock_clients import HTTPClientBuilder
    return HTTPClientBuilder()


@pytest.fixture
def mock_http_client(monkeypatch, http_client_builder):
    """Pooled httpx client replaced with one whose transport returns a successful reply.

    Returns the builder so tests can inspect the recorded requests.
    """
    client = http_client_builder.set_response(MOCK_MESSAGES_API_RESPONSE).build()
    monkeypatch.setattr("utils.http_client.HTTPClientManager.get_llm_client", lambda: client)
    return http_client_builder


@pytest.fixture
def llm_stub(monkeypatch):
    """LLMService.create_message replaced with a call-recording stub replying 'Hello!'."""
    from services.llm import LLMService
    from tests.fixtures.mock_clients import FlexibleLLMClient

    stub = FlexibleLLMClient(responses=["Hello!", "Hello!"])
    monkeypatch.setattr(LLMService, "create_message", stub.create_message)
    return stub


@pytest.fixture
def configured_app(llm_stub):
    """Application test client with the LLM stubbed out."""
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as client:
        yield client
