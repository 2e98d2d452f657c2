"""Service test fixtures — in-memory collection + FastAPI test client.

Invariants:
    - Every test gets a fresh FakeCollection
    - get_user_repository dependency overridden to wrap the fake collection
    - Lifespan never runs under ASGITransport, so no real MongoDB is contacted

Design Decisions:
    - Fake at the collection level, not the repository: MongoUserRepository
      and its error mapping run in every route test
    - failing_client uses FailingCollection to exercise DatabaseError → 500
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.infrastructure.database import get_user_repository
from users_api.infrastructure.user_repository import MongoUserRepository
from users_api.main import app

from tests.services.mock_mongo import FakeCollection, FailingCollection


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def repository(fake_collection):
    return MongoUserRepository(fake_collection)


@asynccontextmanager
async def _client_for(collection):
    app.dependency_overrides[get_user_repository] = (
        lambda: MongoUserRepository(collection)
    )
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def client(fake_collection):
    """FastAPI test client backed by the in-memory collection."""
    async with _client_for(fake_collection) as c:
        yield c


@pytest.fixture
async def failing_client():
    """FastAPI test client whose store raises on every call."""
    async with _client_for(FailingCollection()) as c:
        yield c


@pytest.fixture
def ana():
    return {
        "firstname": "Ana",
        "lastname": "Lee",
        "email": "ana@example.com",
        "age": 30,
    }


@pytest.fixture
async def seed_user(client, ana):
    """Create Ana through the API and return her id."""
    res = await client.post("/api/user", json=ana)
    assert res.status_code == 201
    return res.json()["InsertedID"]
