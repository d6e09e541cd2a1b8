"""Fixtures for API tests.

Each test gets a fresh application built from the real resource package,
with repository handles replaced by AsyncMocks and a configurable authorizer.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from catalog.application.collections import CollectionRegistry
from catalog.core.container import get_token_service
from catalog.infrastructure.persistence.repositories import (
    DatabaseRepository,
    TableRepository,
)
from catalog.main import create_app
from tests.conftest import FakeDependencyProvider


def auth_headers(principal: str) -> dict[str, str]:
    """Authorization header with a valid token for ``principal``."""
    token = get_token_service().generate_access_token(principal)
    return {"Authorization": f"Bearer {token}"}


class FakeAuthorizer:
    """Grants read to everyone and write to the listed principals."""

    def __init__(self, writers: set[str] | None = None) -> None:
        self.writers = writers if writers is not None else {"data-steward"}
        self.checks: list[tuple[str, str, str]] = []

    def check_permission(self, subject: str, obj: str, action: str) -> bool:
        self.checks.append((subject, obj, action))
        return action == "read" or subject in self.writers


@pytest.fixture
def database_repository():
    return AsyncMock(spec=DatabaseRepository)


@pytest.fixture
def table_repository():
    return AsyncMock(spec=TableRepository)


@pytest.fixture
def authorizer():
    return FakeAuthorizer()


@pytest.fixture
def registry(mock_logger):
    return CollectionRegistry.from_discovery(
        ["catalog.presentation.resources"], mock_logger
    )


@pytest.fixture
def app(registry, database_repository, table_repository, authorizer):
    provider = FakeDependencyProvider(
        {
            DatabaseRepository: database_repository,
            TableRepository: table_repository,
        }
    )
    return create_app(
        registry=registry,
        dependency_provider=provider,
        authorizer=authorizer,
    )


@pytest.fixture
def client(app):
    return TestClient(app)
