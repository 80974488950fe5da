"""API test fixtures: FastAPI test clients over a real or fake store.

Invariants:
    - client: real SqlPostStore on the in-memory SQLite DB (get_db overridden)
    - fake_client: get_store overridden with InMemoryPostStore
    - db_manager patched so readiness checks hit the test engine
"""

import pytest
from httpx import ASGITransport, AsyncClient

import posts_api.infrastructure.database as db_module
from posts_api.api.dependencies import get_store
from posts_api.infrastructure.database import DatabaseSessionManager, get_db
from posts_api.main import app

from tests.api.fake_store import InMemoryPostStore


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def fake_store():
    return InMemoryPostStore()


@pytest.fixture
async def fake_client(fake_store):
    """FastAPI test client whose routes use fake_store."""
    app.dependency_overrides[get_store] = lambda: fake_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_post(client):
    """A post created through the API."""
    res = await client.post(
        "/api/posts", json={"title": "The Shire", "contents": "Hobbits live here."},
    )
    assert res.status_code == 201
    return res.json()
