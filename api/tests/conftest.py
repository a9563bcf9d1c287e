"""API test configuration."""

import pytest
from api.main import create_app
from httpx import ASGITransport, AsyncClient
from moonglass.config import reset_settings_cache


@pytest.fixture
def app():
    reset_settings_cache()
    yield create_app()
    reset_settings_cache()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
