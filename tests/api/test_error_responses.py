"""API tests for global exception handlers.

Handlers are exercised through a minimal app so each error type can be
raised directly from a route.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog.domain.errors import DiscoveryError, UnknownCollectionError
from catalog.presentation.errors import register_exception_handlers


@pytest.fixture
def error_client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/unknown-collection")
    async def unknown_collection():
        raise UnknownCollectionError("/v1/charts")

    @app.get("/discovery-error")
    async def discovery_error():
        raise DiscoveryError("pkg.Resource", "missing collection path")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("unexpected")

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.api
class TestExceptionHandlers:
    """Test RFC 9457 responses for each handler."""

    def test_unknown_collection_is_404(self, error_client):
        response = error_client.get("/unknown-collection")

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "collection_not_found"
        assert body["detail"] == "No collection registered at /v1/charts"
        assert body["instance"] == "/unknown-collection"

    def test_other_collection_error_is_500_without_internals(self, error_client):
        response = error_client.get("/discovery-error")

        assert response.status_code == 500
        body = response.json()
        assert body["detail"] == "An unexpected error occurred."
        assert "pkg.Resource" not in response.text

    def test_unhandled_exception_is_500(self, error_client):
        response = error_client.get("/crash")

        assert response.status_code == 500
        body = response.json()
        assert body["title"] == "Internal Server Error"
        assert body["detail"] == "An unexpected error occurred."
        assert "RuntimeError" not in response.text

    def test_route_not_found_is_problem_details(self, error_client):
        response = error_client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["title"] == "Resource Not Found"
