"""
BDD fixtures - a synchronous TestClient over a fresh in-memory database.
The engine is created lazily inside the client's event loop.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inventory_tracker.db.base import Base
from inventory_tracker.db.session import get_db
from inventory_tracker.main import app
from tests.factories import make_engine


@pytest.fixture
def api():
    state = {}

    async def override_get_db():
        if "maker" not in state:
            engine = make_engine()
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            state["engine"] = engine
            state["maker"] = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        async with state["maker"]() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
        if "engine" in state:
            client.portal.call(state["engine"].dispose)
    app.dependency_overrides.clear()


@pytest.fixture
def response():
    """Store last response for then steps."""
    return {}
