"""
Pytest fixtures - test DB, client, actors (TDD/BDD support).
Challenge: Isolated tests; a fresh in-memory database per test.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory_tracker.core.policy import Role
from inventory_tracker.db.base import Base
from inventory_tracker.db.models import User
from inventory_tracker.db.session import get_db
from inventory_tracker.main import app
from tests.factories import headers_for, make_engine, make_user


@pytest_asyncio.fixture
async def engine():
    engine = make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def alice(session: AsyncSession) -> User:
    return await make_user(session, "alice@example.com", Role.USER, password="password123")


@pytest_asyncio.fixture
async def bob(session: AsyncSession) -> User:
    return await make_user(session, "bob@example.com", Role.USER)


@pytest_asyncio.fixture
async def admin(session: AsyncSession) -> User:
    return await make_user(session, "admin@example.com", Role.ADMIN)


@pytest.fixture
def alice_headers(alice: User) -> dict:
    return headers_for(alice)


@pytest.fixture
def bob_headers(bob: User) -> dict:
    return headers_for(bob)


@pytest.fixture
def admin_headers(admin: User) -> dict:
    return headers_for(admin)
