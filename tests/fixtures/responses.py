DEFAULT_USER_MESSAGES = [{"role": "user", "content": "Hi"}]


MOCK_MESSAGES_API_RESPONSE = {
    "id": "msg_01XFDUDYJgAACzvnptvVoYEL",
    "type": "message",
    "role": "assistant",
    "model": "claude-haiku-4-5",
    "content": [
        {"type": "text", "text": "Hello!"}
    ],
    "stop_reason": "end_turn",
    "stop_sequence": None,
    "usage": {"input_tokens": 142, "output_tokens": 3},
}


MOCK_OVERLOADED_ERROR_RESPONSE = {
    "type": "error",
    "error": {
        "type": "overloaded_error",
        "message": "Overloaded"
    }
}


MULTI_TURN_TRANSCRIPT = [
    {"role": "user", "content": "Hey, I run a small law firm."},
    {"role": "assistant", "content": "Nice to meet you! What manual tasks eat most of your team's week?"},
    {"role": "user", "content": "Client intake paperwork, mostly."},
]
