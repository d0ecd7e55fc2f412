import pytest
from fastapi.testclient import TestClient

from config import get_settings
from deps import get_completion_client
from main import create_app


class StubCompletionClient:
    """Records every call and returns `reply` (or raises `error`)."""

    def __init__(self):
        self.reply = ""
        self.error = None
        self.calls = []

    async def complete(self, system, user, model_config):
        self.calls.append((system, user, model_config))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings_env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("CHAT_MODEL", "test-model")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    # settings are cached; drop them so the env above is picked up
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def stub_client():
    return StubCompletionClient()


@pytest.fixture
def test_client(settings_env, stub_client):
    app = create_app()
    app.dependency_overrides[get_completion_client] = lambda: stub_client
    with TestClient(app) as client:
        yield client
