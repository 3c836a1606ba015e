"""
Campus Data Backend — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests (no DB)
    ├── db_session_factory: fresh SQLite database with every table created
    ├── test_client: HTTPX AsyncClient wired to the app and that database
    └── ADMIN / USER / OUTSIDER header dicts impersonate callers through
        the proxy identity headers
"""

import os

# Override settings BEFORE any campusdata import reads them
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["ADMIN_EMAILS"] = "admin@ucsb.edu"
os.environ["MEMBER_HOSTED_DOMAIN"] = "ucsb.edu"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import campusdata.models  # noqa: F401
from campusdata.database import Base, get_db_session
from campusdata.main import app

EMAIL_HEADER = "X-Auth-Request-Email"

ADMIN_EMAIL = "admin@ucsb.edu"
USER_EMAIL = "cgaucho@ucsb.edu"
OUTSIDER_EMAIL = "visitor@gmail.com"

ADMIN = {EMAIL_HEADER: ADMIN_EMAIL, "X-Auth-Request-User": "Admin Gaucho"}
USER = {EMAIL_HEADER: USER_EMAIL, "X-Auth-Request-User": "Chris Gaucho"}
OUTSIDER = {EMAIL_HEADER: OUTSIDER_EMAIL}


def query_result(scalar_one_or_none=None, scalar=None, scalars=None, rowcount=0):
    """
    Build the object a mocked `await session.execute(...)` returns.

    AsyncMock's default return value is itself async, so every test that
    reads a result must install one of these explicitly.
    """
    result = MagicMock()
    result.scalar_one_or_none.return_value = scalar_one_or_none
    result.scalar.return_value = scalar
    result.scalars.return_value.all.return_value = scalars or []
    result.rowcount = rowcount
    return result


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value = query_result(scalar_one_or_none=entity)
            result = await service.get(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock(return_value=query_result())
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    # MagicMock supports `async with`, which begin_nested() is used for
    session.begin_nested = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_session_factory(tmp_path):
    """A fresh file-backed SQLite database per test, schema created from the models."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'campusdata.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    yield factory

    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(db_session_factory):
    """
    Provides an async HTTP test client for endpoint testing.

    get_db_session is overridden with the same commit/rollback semantics,
    bound to the per-test database.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """

    async def override_get_db_session():
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
