"""
Pytest fixtures for Scholar Connect Backend tests.

These fixtures provide a fresh in-memory state, fake Gemini clients, and an
HTTP client wired to an app instance with no network access.
"""
from types import SimpleNamespace
from typing import Any, Optional

import httpx
import pytest

from app import create_app, create_app_state
from marks_memo_verifier import GeminiMarksMemoVerifier, SimulatedMarksMemoVerifier
from src.state import AppState

# Smallest JPEG-looking payload used across tests
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF"


class FakeModels:
    """Stands in for genai.Client().aio.models."""

    def __init__(self, response: Any = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def make_fake_client(response: Any = None, error: Optional[Exception] = None):
    """Return (client, models) where client.aio.models is a FakeModels."""
    models = FakeModels(response=response, error=error)
    client = SimpleNamespace(aio=SimpleNamespace(models=models))
    return client, models


def text_response(text: Optional[str]):
    """A generate_content response carrying the given text."""
    return SimpleNamespace(text=text)


@pytest.fixture
def jpeg_bytes() -> bytes:
    assert len(JPEG_BYTES) == 10
    return JPEG_BYTES


@pytest.fixture
def state() -> AppState:
    """State seeded with the demo students."""
    return create_app_state()


@pytest.fixture
def fast_simulated_verifier() -> SimulatedMarksMemoVerifier:
    """Simulation strategy without the demo delay."""
    return SimulatedMarksMemoVerifier(delay_seconds=0)


@pytest.fixture
def failing_verifier() -> GeminiMarksMemoVerifier:
    """Gemini strategy whose upstream call always raises."""
    client, _ = make_fake_client(error=ConnectionError("network unreachable"))
    return GeminiMarksMemoVerifier(model="gemini-2.5-flash", client=client)


@pytest.fixture
async def client(state: AppState, fast_simulated_verifier: SimulatedMarksMemoVerifier):
    """Async HTTP client for API calls against the simulated verifier."""
    app = create_app(state=state, verifier=fast_simulated_verifier)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def failing_client(state: AppState, failing_verifier: GeminiMarksMemoVerifier):
    """Async HTTP client whose verifier always hits a technical error."""
    app = create_app(state=state, verifier=failing_verifier)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def registration() -> dict:
    """Registration form as submitted from the student screen."""
    return {
        "full_name": "Priya S.",
        "email": "priya@example.com",
        "phone": "9876500000",
        "course": "Intermediate 1st Year",
        "income": 30000,
        "location": "Vijayawada, AP",
    }
