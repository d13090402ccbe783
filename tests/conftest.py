"""
Shared fixtures.

Every store-backed fixture comes in two flavours, the in-memory fallback and
a SQLite-backed SqlStore, so route and store tests run against both backends.
"""
import os
import uuid

# Settings are read at import time; configure before any travelvibe import.
os.environ["SECRET_KEY"] = "test-secret-not-real"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ADMIN_EMAIL"] = ""
os.environ["ADMIN_PASSWORD"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from travelvibe import seed
from travelvibe.core.security import create_access_token, hash_password
from travelvibe.db.memory_store import MemoryStore
from travelvibe.db.selector import init_schema
from travelvibe.db.sql_store import SqlStore
from travelvibe.main import create_app


@pytest.fixture
def memory_store():
    store = MemoryStore()
    seed.run(store)
    return store


@pytest.fixture
def sql_store():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_schema(engine)
    store = SqlStore(engine)
    seed.run(store)
    yield store
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))


def make_user(store, email, role="USER", password="secret123", name="Test User"):
    return store.insert("users", {
        "id": str(uuid.uuid4()),
        "name": name,
        "email": email,
        "password": hash_password(password),
        "role": role,
    })


def bearer(user) -> dict:
    token = create_access_token(user["id"], user["email"], user["role"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(store):
    return make_user(store, "traveller@example.com")


@pytest.fixture
def admin(store):
    return make_user(store, "admin@example.com", role="ADMIN", name="Admin")
