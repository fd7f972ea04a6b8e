import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.main import create_app


@pytest.fixture
def settings():
    return Settings(
        app_env="test",
        jwt_secret="test-secret-for-hs256-signing-0123456789",
        login_rejected_status=208,
    )


@pytest.fixture
def app(settings):
    # Fresh stores per test; nothing is shared between tests.
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
