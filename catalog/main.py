"""
Main FastAPI application entry point.

create_app() builds the collection registry, registers every collection's
resource on the API router and wires the global exception handlers.

Run:
    uvicorn catalog.main:app --port 8585
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import APIRouter, FastAPI

from catalog.core.config import settings
from catalog.core.container import (
    get_authorizer,
    get_collection_registry,
    get_database,
    get_logger,
    get_repository_provider,
)
from catalog.presentation.dispatcher import RouterDispatcher
from catalog.presentation.errors import register_exception_handlers

if TYPE_CHECKING:
    from catalog.application.collections import CollectionRegistry
    from catalog.domain.protocols import (
        AuthorizationProtocol,
        DependencyProviderProtocol,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: create tables in development (other environments use Alembic)
    - Shutdown: dispose of the connection pool

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    database = get_database()

    if settings.is_development:
        await database.create_all()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await database.close()
    logger.info("application_stopped")


def create_app(
    *,
    registry: "CollectionRegistry | None" = None,
    dependency_provider: "DependencyProviderProtocol | None" = None,
    authorizer: "AuthorizationProtocol | None" = None,
) -> FastAPI:
    """Build the FastAPI application.

    Collaborators default to the container singletons; tests pass their own.

    Args:
        registry: Collection registry whose resources are served.
        dependency_provider: Source of repository handles.
        authorizer: Authorizer handed to repository-backed resources.

    Returns:
        Configured FastAPI application.

    Raises:
        DuplicatePathError: If two collections declare the same path.
    """
    registry = registry or get_collection_registry()
    dependency_provider = dependency_provider or get_repository_provider()
    authorizer = authorizer or get_authorizer()

    app = FastAPI(
        title=settings.app_name,
        description="Catalog of databases and tables, organized as REST collections",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.collection_registry = registry

    # Register global exception handlers (RFC 9457 error responses)
    register_exception_handlers(app)

    api_router = APIRouter(prefix=settings.api_prefix)
    report = registry.register_all(
        RouterDispatcher(api_router), dependency_provider, authorizer
    )
    if not report.ok:
        get_logger().warning(
            "collections_unavailable",
            failed=[e.collection for e in report.failures],
        )
    app.include_router(api_router)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        """
        Health check endpoint for monitoring and load balancers.

        Returns:
            dict: Health status indicator.
        """
        return {"status": "healthy"}

    return app


app = create_app()
