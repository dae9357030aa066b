import httpx


class HTTPClientBuilder:
    """Factory for httpx clients that answer Messages API calls from a mock transport."""

    def __init__(self):
        self.status_code = 200
        self.json_body = None
        self.text = ""
        self.exception = None
        self.requests = []

    def set_response(self, json_body, status_code=200):
        """Configure the JSON response returned for every request."""
        self.json_body = json_body
        self.status_code = status_code
        return self

    def set_text_response(self, text, status_code=200):
        """Configure a non-JSON response body."""
        self.json_body = None
        self.text = text
        self.status_code = status_code
        return self

    def set_exception(self, exception):
        """Make the transport raise instead of returning."""
        self.exception = exception
        return self

    def _handle(self, request):
        self.requests.append(request)
        if self.exception is not None:
            raise self.exception
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body)
        return httpx.Response(self.status_code, text=self.text)

    def build(self):
        """Build a real AsyncClient over the mock transport."""
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))


class FlexibleLLMClient:
    """Stand-in for LLMService.create_message that tracks calls and supports sequences."""

    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.call_history = []

    async def create_message(self, system_prompt, messages):
        self.call_history.append({
            "system_prompt": system_prompt,
            "messages": messages,
        })

        if self.error is not None:
            raise self.error

        return self.responses.pop(0) if self.responses else ""
