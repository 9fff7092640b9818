import pytest
from fastapi.testclient import TestClient

from democode.config import Settings
from democode.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(title="democode-test", version="0.0.1")


@pytest.fixture
def client(settings: Settings):
    """Fresh app for every test, built from the static route table."""
    return TestClient(create_app(settings=settings))
