"""Pytest configuration and fixtures."""
import os
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

# Keep tests away from any real key or .env overrides
os.environ["OPENAI_API_KEY"] = ""
os.environ["OPENAI_MODEL"] = "gpt-test"

from server.main import create_app
from services.openai_client import CompletionClient

ORIGIN = "https://proyectotesis.netlify.app"


class FakeResponses:
    """Stands in for `AsyncOpenAI().responses`; records every call."""

    def __init__(self):
        self.calls = []
        self.output_text = ""
        self.error = None

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(output_text=self.output_text)


class FakeSDK:
    def __init__(self):
        self.responses = FakeResponses()


@pytest.fixture
def fake_sdk():
    return FakeSDK()


@pytest.fixture
def completion_client(fake_sdk):
    return CompletionClient(api_key="sk-test", model="gpt-test", sdk_client=fake_sdk)


@pytest.fixture
def client(completion_client):
    """HTTP client against an app wired to the fake SDK."""
    app = create_app(client=completion_client, allowed_origins=[ORIGIN])
    with TestClient(app) as c:
        yield c


@pytest.fixture
def offline_client():
    """App whose completion client has no key, so every upstream call fails."""
    app = create_app(client=CompletionClient(api_key=""), allowed_origins=[ORIGIN])
    with TestClient(app) as c:
        yield c
