"""Pytest configuration.

Environment defaults are set before any catalog module is imported, because
settings are loaded once at import time.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-catalog-tokens-0123456789")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from catalog.core.container import reset_collection_registry  # noqa: E402


@pytest.fixture
def mock_logger():
    """Logger double satisfying LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def clean_collection_registry():
    """Drop the process-wide registry before and after the test."""
    reset_collection_registry()
    yield
    reset_collection_registry()


class FakeDependencyProvider:
    """DependencyProvider recording every handle it hands out."""

    def __init__(self, handles: dict[type, object] | None = None) -> None:
        self.handles = handles or {}
        self.requested: list[type] = []

    def on_demand(self, repository_type: type) -> object:
        self.requested.append(repository_type)
        return self.handles.get(repository_type, MagicMock(name=repository_type.__name__))


class FakeDispatcher:
    """Dispatcher collecting registered resources."""

    def __init__(self, reject: type | None = None) -> None:
        self.resources: list[object] = []
        self._reject = reject

    def register(self, resource: object) -> None:
        if self._reject is not None and isinstance(resource, self._reject):
            raise ValueError("dispatcher refused resource")
        self.resources.append(resource)


@pytest.fixture
def dependency_provider():
    return FakeDependencyProvider()


@pytest.fixture
def dispatcher():
    return FakeDispatcher()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP API tests using TestClient")
