import contextlib
from collections.abc import AsyncIterator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app


@pytest.fixture
def client_factory() -> Callable[..., contextlib.AbstractAsyncContextManager[AsyncClient]]:
    """Build a test client with the given FastAPI dependency overrides applied."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None) -> AsyncIterator[AsyncClient]:
        app.dependency_overrides.update(overrides or {})
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory) -> AsyncIterator[AsyncClient]:
    """Create a test client without overrides."""
    async with client_factory() as ac:
        yield ac
