import httpx
import pytest
from httpx import ASGITransport

API_BASE_URL = "https://api.test"


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", API_BASE_URL)
    monkeypatch.setenv("CATALOG_PAGE_SIZE", "2")


@pytest.fixture
async def client(mock_env):
    from homestay.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
