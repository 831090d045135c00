"""
Pytest configuration and shared fixtures for the translator tests.
"""
import os
import pytest
import httpx
from fastapi.testclient import TestClient

# БД и CORS настраиваются при импорте приложения, поэтому окружение задаем до него
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["ALLOWED_ORIGINS"] = "http://localhost:3000"

from translator.config import Settings, get_settings
from translator.database import Base, engine
from translator.main import app
from translator.routers.translate import get_http_client

DEEPL_URL = "https://api-free.deepl.test/v2/translate"


class FakeDeepL:
    """Подставной DeepL: запоминает запросы и отвечает заданным статусом и телом."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {"translations": [{"detected_source_language": "EN", "text": "Hola"}]}
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Создает чистую тестовую базу один раз за сессию."""
    if os.path.exists("./test.db"):
        os.remove("./test.db")
    Base.metadata.create_all(bind=engine)
    yield
    engine.dispose()
    if os.path.exists("./test.db"):
        os.remove("./test.db")


@pytest.fixture
def deepl():
    """Подменяет настройки и исходящий HTTP-клиент на FakeDeepL."""
    fake = FakeDeepL()

    async def override_get_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake.handler)) as client:
            yield client

    app.dependency_overrides[get_settings] = lambda: Settings(
        deepl_api_key="test-key", deepl_api_url=DEEPL_URL
    )
    app.dependency_overrides[get_http_client] = override_get_http_client
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
