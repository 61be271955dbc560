"""
Shared test fixtures.

Provides:
- A fresh in-memory entity store per test
- Fake text models (fixed answer, always failing, flaky)
- A FastAPI TestClient wired to the fresh store and a fake text assist
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from medicina.api.config import APIConfig
from medicina.api.main import create_app
from medicina.assist import TextAssist, get_text_assist
from medicina.store import EntityStore, get_entity_store


class FixedModel:
    """Returns the same answer for every prompt and records the prompts."""

    def __init__(self, answer: str = "Refined text."):
        self.answer = answer
        self.prompts: list[str] = []

    async def generate(self, prompt: str, max_new_tokens: int = 1024, **kwargs) -> str:
        self.prompts.append(prompt)
        return self.answer


class FailingModel:
    """Fails every call with a transport error."""

    def __init__(self):
        self.calls = 0

    async def generate(self, prompt: str, max_new_tokens: int = 1024, **kwargs) -> str:
        self.calls += 1
        raise httpx.ConnectError("connection refused")


class FlakyModel:
    """Fails the first call, then answers."""

    def __init__(self, answer: str = "Second time lucky."):
        self.answer = answer
        self.calls = 0

    async def generate(self, prompt: str, max_new_tokens: int = 1024, **kwargs) -> str:
        self.calls += 1
        if self.calls == 1:
            raise httpx.ReadTimeout("timed out")
        return self.answer


@pytest.fixture
def store():
    """Empty entity store."""
    return EntityStore()


@pytest.fixture
def fixed_model():
    return FixedModel()


@pytest.fixture
def app(store, fixed_model):
    """Application using the test store and a fixed-answer text assist."""
    application = create_app(APIConfig())
    application.dependency_overrides[get_entity_store] = lambda: store
    application.dependency_overrides[get_text_assist] = lambda: TextAssist(fixed_model)
    return application


@pytest.fixture
def client(app):
    """Test client (lifespan not run; dependencies are overridden)."""
    return TestClient(app)
