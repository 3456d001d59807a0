from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from main import create_app
from userstore.adapters.memory_adapter import InMemoryUserAdapter
from userstore.services.user_service import UserService


@pytest.fixture
def repo() -> InMemoryUserAdapter:
    return InMemoryUserAdapter()


@pytest.fixture
def service(repo: InMemoryUserAdapter) -> UserService:
    return UserService(repo=repo)


@pytest.fixture
def client(repo: InMemoryUserAdapter) -> Iterator[TestClient]:
    with TestClient(create_app(repository=repo)) as test_client:
        yield test_client
