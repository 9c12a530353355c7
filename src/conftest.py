import contextlib
from collections.abc import AsyncIterator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app


@pytest.fixture
def client_factory():
    """Build a test client with FastAPI dependency overrides applied."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict[Callable, Callable] | None = None) -> AsyncIterator[AsyncClient]:
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Create a test client with no overrides."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
