# Copyright (c) Microsoft. All rights reserved.

import json
from collections import deque
from typing import Any

import httpx
import pytest
from openai import AsyncOpenAI

from agent_framework_assistants.openai import create_assistant_client


class HttpMessageHandlerStub:
    """Serves queued responses to the requests an OpenAI client sends through httpx."""

    def __init__(self) -> None:
        self.response_queue: deque[httpx.Response] = deque()
        self.requests: list[httpx.Request] = []

    def setup_responses(self, status_code: int, *bodies: dict[str, Any]) -> None:
        for body in bodies:
            self.response_queue.append(httpx.Response(status_code, json=body))

    def request_json(self, index: int) -> Any:
        return json.loads(self.requests[index].content or b"null")

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.response_queue:
            # 400 is not retried by the client, so an unexpected request fails fast.
            return httpx.Response(
                400,
                json={"error": {"message": "No response queued.", "type": "invalid_request_error"}},
            )
        return self.response_queue.popleft()


@pytest.fixture
def message_handler_stub() -> HttpMessageHandlerStub:
    return HttpMessageHandlerStub()


@pytest.fixture
def openai_client(message_handler_stub: HttpMessageHandlerStub, missing_env_file: str) -> AsyncOpenAI:
    """An OpenAI client whose requests are answered by the message handler stub."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(message_handler_stub))
    return create_assistant_client(api_key="fakekey", http_client=http_client, env_file_path=missing_env_file)
