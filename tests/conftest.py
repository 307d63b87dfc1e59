from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from typing import AsyncContextManager

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ipchecker.config import Settings
from ipchecker.main import create_app

DEFAULT_PEER = "127.0.0.1"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the host environment and any local .env file."""
    for name in ("PORT", "HOST", "TRUSTED_HOPS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def test_settings() -> Settings:
    """Create default test settings."""
    return Settings(port=3000, trusted_hops=0)


@pytest.fixture
def make_client() -> Callable[..., AsyncContextManager[AsyncClient]]:
    """Factory for clients whose requests arrive from a given peer address."""

    @asynccontextmanager
    async def _make_client(
        settings: Settings | None = None, peer: str = DEFAULT_PEER
    ) -> AsyncGenerator[AsyncClient, None]:
        app = create_app(settings or Settings())
        transport = ASGITransport(app=app, client=(peer, 54321))
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

    return _make_client


@pytest_asyncio.fixture
async def client(test_settings) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client connected from the default peer address."""
    transport = ASGITransport(app=create_app(test_settings), client=(DEFAULT_PEER, 54321))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
