# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

os.environ["STORE_BACKEND"] = "memory"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["OPENAI_API_KEY"] = ""
os.environ["SEED_DEMO_CONTENT"] = "false"
os.environ.setdefault("APP_ENV", "test")

from socialstream.api.dependencies.store import get_store
from socialstream.api.main import create_application
from socialstream.shared.adapters.memory_adapter import MemoryAdapter
from socialstream.shared.db.store import CollectionStore
from socialstream.shared.models.user import User
from socialstream.shared.services.auth_service import AuthService
from socialstream.shared.services.content_service import ContentService

TEST_PASSWORD = "secret1"


@pytest.fixture()
def adapter() -> MemoryAdapter:
    return MemoryAdapter()


@pytest.fixture()
def store(adapter: MemoryAdapter) -> CollectionStore:
    return CollectionStore(adapter, namespace="test")


@pytest.fixture()
def auth_service(store: CollectionStore) -> AuthService:
    return AuthService(store)


@pytest.fixture()
def content_service(store: CollectionStore, auth_service: AuthService) -> ContentService:
    return ContentService(store, auth_service)


@pytest.fixture()
def make_user(auth_service: AuthService) -> Callable[..., User]:
    """Register a user and return its public record."""

    def _make_user(username: str = "admin", name: str | None = None, password: str = TEST_PASSWORD) -> User:
        result = auth_service.register(username, name or username.title(), password)
        assert result.success, result.message
        return result.user

    return _make_user


@pytest.fixture()
def logged_in_user(auth_service: AuthService, make_user: Callable[..., User]) -> User:
    user = make_user("admin")
    result = auth_service.login("admin", TEST_PASSWORD)
    assert result.success
    return result.user


@pytest.fixture()
def client(store: CollectionStore) -> Iterator[TestClient]:
    app = create_application()
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
