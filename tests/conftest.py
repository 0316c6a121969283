from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from quiz_api.config import Settings
from quiz_api.database import build_engine, build_sessionmaker, create_tables
from quiz_api.main import create_app
from quiz_api.services.auth_service import AuthService

TEST_SECRET = "test-signing-secret"


@pytest.fixture
def jwt_secret():
    return TEST_SECRET


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite3'}",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
    )


@pytest.fixture
def auth_service():
    return AuthService(TEST_SECRET, bcrypt_rounds=4)


@pytest.fixture
def expired_auth_service():
    """Issues tokens as if it were two hours ago."""
    return AuthService(
        TEST_SECRET,
        bcrypt_rounds=4,
        clock=lambda: datetime.now(timezone.utc) - timedelta(hours=2),
    )


@pytest_asyncio.fixture
async def session_factory(settings):
    engine = build_engine(settings.database_url)
    await create_tables(engine)
    yield build_sessionmaker(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def app(settings):
    # ASGITransport does not run the lifespan, so tables are created here
    application = create_app(settings)
    await create_tables(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def token(client):
    await client.post("/register", json={"username": "alice", "password": "pw1"})
    response = await client.post("/login", json={"username": "alice", "password": "pw1"})
    return response.json()["token"]
