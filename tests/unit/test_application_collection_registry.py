"""Unit tests for CollectionRegistry.

Tests cover:
- Child queries with absolute hrefs, without mutating the registry
- Concurrent child queries for different request origins
- register_all() failure isolation and reporting
- Single registration per registry
"""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest

from catalog.application.collections import CollectionRegistry, build_collection_tree
from catalog.domain.collections import (
    CollectionDescriptor,
    CollectionDetails,
    RequestContext,
)
from catalog.domain.errors import ResourceConstructionError, UnknownCollectionError
from tests.conftest import FakeDispatcher
from tests.fixtures import resources

FIXTURES = "tests.fixtures.resources"


def _details(name, href, resource="ZeroArgResource", repository=None):
    return CollectionDetails(
        descriptor=CollectionDescriptor(
            name=name, documentation=f"{name} collection", href=href
        ),
        resource_type=f"{FIXTURES}.{resource}",
        repository_type=f"{FIXTURES}.{repository}" if repository else None,
    )


def _registry(mock_logger, *collections):
    collections = collections or (
        _details("root", "/v1"),
        _details("tables", "/v1/tables", "RepositoryBackedResource", "FakeRepository"),
        _details("columns", "/v1/tables/columns", "InitializingResource"),
    )
    return CollectionRegistry(build_collection_tree(collections, mock_logger), mock_logger)


@pytest.mark.unit
class TestCollectionQueries:
    """Test get(), collections and get_children_of()."""

    def test_get_returns_entry(self, mock_logger):
        registry = _registry(mock_logger)

        assert registry.get("/v1/tables").name == "tables"

    def test_get_unknown_path_raises(self, mock_logger):
        with pytest.raises(UnknownCollectionError):
            _registry(mock_logger).get("/v1/charts")

    def test_collections_view_is_read_only(self, mock_logger):
        registry = _registry(mock_logger)

        with pytest.raises(TypeError):
            registry.collections["/v1/new"] = _details("new", "/v1/new")  # type: ignore[index]
        assert set(registry.collections) == {"/v1", "/v1/tables", "/v1/tables/columns"}

    def test_children_have_absolute_hrefs(self, mock_logger):
        """Test the documented example: https://api.example.com/v1/tables."""
        registry = _registry(mock_logger)
        ctx = RequestContext(scheme="https", host="api.example.com")

        children = registry.get_children_of("/v1", ctx)

        assert children == [
            CollectionDescriptor(
                name="tables",
                documentation="tables collection",
                href="https://api.example.com/v1/tables",
            )
        ]

    def test_children_query_does_not_mutate_registry(self, mock_logger):
        registry = _registry(mock_logger)

        registry.get_children_of(
            "/v1", RequestContext(scheme="https", host="a.example.com")
        )
        second = registry.get_children_of(
            "/v1", RequestContext(scheme="http", host="b.example.com", port=8080)
        )

        assert second[0].href == "http://b.example.com:8080/v1/tables"
        assert registry.get("/v1").children[0].href == "/v1/tables"

    def test_leaf_has_no_children(self, mock_logger):
        ctx = RequestContext(scheme="https", host="api.example.com")

        assert _registry(mock_logger).get_children_of("/v1/tables/columns", ctx) == []

    def test_children_of_unknown_path_raises(self, mock_logger):
        ctx = RequestContext(scheme="https", host="api.example.com")

        with pytest.raises(UnknownCollectionError):
            _registry(mock_logger).get_children_of("/v1/charts", ctx)

    def test_concurrent_queries_see_their_own_origin(self, mock_logger):
        """Test many threads querying with different hosts never cross over."""
        registry = _registry(mock_logger)

        def query(i):
            ctx = RequestContext(scheme="https", host=f"host{i}.example.com")
            return i, registry.get_children_of("/v1", ctx)

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(query, range(200)))

        for i, children in results:
            assert [c.href for c in children] == [f"https://host{i}.example.com/v1/tables"]
        assert registry.get("/v1").children[0].href == "/v1/tables"


@pytest.mark.unit
class TestRegisterAll:
    """Test register_all()."""

    def test_every_collection_registered(self, mock_logger, dependency_provider):
        registry = _registry(mock_logger)
        dispatcher = FakeDispatcher()

        report = registry.register_all(dispatcher, dependency_provider, MagicMock())

        assert report.ok
        assert sorted(report.registered) == ["/v1", "/v1/tables", "/v1/tables/columns"]
        assert len(dispatcher.resources) == 3
        columns = [r for r in dispatcher.resources if isinstance(r, resources.InitializingResource)]
        assert columns[0].initialized == 1

    def test_failing_resource_does_not_stop_others(self, mock_logger, dependency_provider):
        """Test N-1 resources are registered when one fails."""
        registry = _registry(
            mock_logger,
            _details("root", "/v1"),
            _details("broken", "/v1/broken", "FailingConstructorResource"),
            _details("tables", "/v1/tables", "RepositoryBackedResource", "FakeRepository"),
            _details("jobs", "/v1/jobs", "InitializingResource"),
        )
        dispatcher = FakeDispatcher()

        report = registry.register_all(dispatcher, dependency_provider, MagicMock())

        assert not report.ok
        assert (report.succeeded, report.failed) == (3, 1)
        assert sorted(report.registered) == ["/v1", "/v1/jobs", "/v1/tables"]
        assert [e.collection for e in report.failures] == ["broken"]
        assert len(dispatcher.resources) == 3
        failures = [
            c for c in mock_logger.error.call_args_list
            if c.args[0] == "resource_registration_failed"
        ]
        assert len(failures) == 1
        assert failures[0].kwargs["resource_type"] == f"{FIXTURES}.FailingConstructorResource"

    def test_dispatcher_rejection_is_isolated(self, mock_logger, dependency_provider):
        registry = _registry(mock_logger)
        dispatcher = FakeDispatcher(reject=resources.InitializingResource)

        report = registry.register_all(dispatcher, dependency_provider, MagicMock())

        assert sorted(report.registered) == ["/v1", "/v1/tables"]
        assert len(report.failures) == 1
        assert isinstance(report.failures[0], ResourceConstructionError)
        assert isinstance(report.failures[0].__cause__, ValueError)

    def test_second_registration_raises(self, mock_logger, dependency_provider):
        registry = _registry(mock_logger)
        registry.register_all(FakeDispatcher(), dependency_provider, MagicMock())

        with pytest.raises(RuntimeError, match="already registered"):
            registry.register_all(FakeDispatcher(), dependency_provider, MagicMock())

    def test_authorizer_passed_unchanged(self, mock_logger, dependency_provider):
        registry = _registry(mock_logger)
        dispatcher = FakeDispatcher()
        authorizer = object()

        registry.register_all(dispatcher, dependency_provider, authorizer)

        backed = [
            r for r in dispatcher.resources
            if isinstance(r, resources.RepositoryBackedResource)
        ]
        assert backed[0].authorizer is authorizer


@pytest.mark.unit
class TestFromDiscovery:
    def test_builds_registry_from_package(self, mock_logger):
        registry = CollectionRegistry.from_discovery(
            ["tests.fixtures.sample_collections"], mock_logger
        )

        assert "/v1/tables/columns" in registry.collections
        assert all(d.is_frozen for d in registry.collections.values())
