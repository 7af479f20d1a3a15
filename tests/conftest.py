"""Shared fixtures: an httpx client bound to the ASGI app, settings isolation."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import settings
from app.main import app


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Never reach a real provider from tests; individual tests opt back in."""
    monkeypatch.setattr(settings, "groq_api_key", "")


@pytest_asyncio.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
