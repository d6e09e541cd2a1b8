"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from catalog.core.container import get_logger, get_collection_registry

The container is organized into modules by concern:
- infrastructure: logging, database, repository handles, token service
- authorization: Casbin authorizer
- collections: collection registry
"""

from catalog.core.container.authorization import get_authorizer
from catalog.core.container.collections import (
    get_collection_registry,
    reset_collection_registry,
)
from catalog.core.container.infrastructure import (
    get_database,
    get_logger,
    get_repository_provider,
    get_token_service,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_logger",
    "get_repository_provider",
    "get_token_service",
    # Authorization
    "get_authorizer",
    # Collections
    "get_collection_registry",
    "reset_collection_registry",
]
