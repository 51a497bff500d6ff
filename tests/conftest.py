"""Pytest configuration and shared fixtures."""
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from taxchat.config import Settings, get_settings
from taxchat.main import app as fastapi_app
from taxchat.services.completion import get_completion_client


class FakeCompletionClient:
    """Stands in for CompletionClient; records every message it is sent."""

    def __init__(self, reply: Optional[str] = None, error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: list[str] = []

    async def complete(self, message: str) -> Optional[str]:
        self.calls.append(message)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def app():
    """The FastAPI app with dependency overrides cleared after each test."""
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Return a TestClient for the app."""
    return TestClient(app)


@pytest.fixture
def use_settings(app):
    """Install a Settings instance built from keyword arguments only."""
    def _install(**overrides) -> Settings:
        settings = Settings(_env_file=None, **overrides)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings
    return _install


@pytest.fixture
def use_completion(app):
    """Install a FakeCompletionClient as the relay's completion client."""
    def _install(reply: Optional[str] = None, error: Optional[Exception] = None) -> FakeCompletionClient:
        fake = FakeCompletionClient(reply=reply, error=error)
        app.dependency_overrides[get_completion_client] = lambda: fake
        return fake
    return _install
