import pytest
from fastapi.testclient import TestClient

from universe.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    from modules.byte_convert.tool.app import app

    return TestClient(app)
