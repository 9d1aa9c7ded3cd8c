"""
Pytest configuration and shared fixtures for Pause tests.
"""

import asyncio
import json

import httpx
import pytest

from pause.fetcher import QuestionFetcher
from pause.groq_client import GroqClient

TEST_URL = "https://groq.test/openai/v1/chat/completions"


def groq_body(*contents, model="llama3-8b-8192"):
    """Build a Groq-style response body with one choice per content string."""
    return {
        "choices": [
            {"message": {"role": "assistant", "content": c}, "index": i}
            for i, c in enumerate(contents)
        ],
        "model": model,
    }


class FakeGroq:
    """
    Stand-in for the Groq endpoint behind httpx.MockTransport.

    Records every request. Set `gate` to an asyncio.Event to hold
    responses until the test releases it.
    """

    def __init__(self, status_code=200, body=None, content=None, exc=None):
        self.status_code = status_code
        self.body = body
        self.content = content
        self.exc = exc
        self.gate = None
        self.requests = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture(autouse=True)
def no_real_key(monkeypatch):
    """Keep a developer's GROQ_API_KEY out of the tests."""
    monkeypatch.delenv("GROQ_API_KEY", raising=False)


@pytest.fixture
def fake_groq():
    return FakeGroq(body=groq_body("Do you need this right now"))


@pytest.fixture
async def groq_client(fake_groq):
    client = GroqClient(
        "test-key",
        url=TEST_URL,
        transport=httpx.MockTransport(fake_groq),
    )
    yield client
    await client.close()


@pytest.fixture
async def fetcher(groq_client):
    return QuestionFetcher(groq_client)


@pytest.fixture
def gate():
    return asyncio.Event()
