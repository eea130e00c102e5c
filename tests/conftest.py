"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


class FakeUpstream:
    """
    Scripted stand-in for a provider API.

    Each call pops the next (status, body) pair; a str body is sent as plain
    text. Every outbound request is recorded for assertions.
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.replies.pop(0)
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    def payload(self, index: int = 0) -> dict:
        return json.loads(self.requests[index].content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def keys():
    """Config provider with both provider keys set."""
    values = {"GEMINI_API_KEY": "gemini-test-key", "GROQ_API_KEY": "groq-test-key"}
    return values.get


@pytest.fixture
def no_keys():
    return lambda name: None


@pytest.fixture
def gemini_success():
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": "Hi from Gemini"}], "role": "model"},
                "finishReason": "STOP",
            }
        ],
        "usageMetadata": {"promptTokenCount": 3, "totalTokenCount": 8},
    }


@pytest.fixture
def groq_success():
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "model": "llama-3.3-70b-versatile",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "hello"},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def fake_upstream():
    """Factory: fake_upstream((200, {...}), (404, {...}))."""
    return FakeUpstream
