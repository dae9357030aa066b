import json


def assert_error_response(response, status_code, message):
    """Assert a FastAPI test response carries the given status and error body."""
    assert response.status_code == status_code, f"Expected {status_code}, got {response.status_code}: {response.text}"
    assert response.json() == {"error": message}
    assert response.headers["content-type"].startswith("application/json")


def assert_event_response(event_response, status_code, payload):
    """Assert a serverless handler response has the given status and JSON payload."""
    assert event_response["statusCode"] == status_code, f"Unexpected event response: {event_response}"
    assert event_response["headers"] == {"Content-Type": "application/json"}
    assert json.loads(event_response["body"]) == payload
