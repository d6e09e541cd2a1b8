"""Resource construction for registry entries.

Construction shapes, in order of precedence:
    - factory declared on the marker: factory(handle, authorizer), where
      handle is None when no repository is declared
    - repository declared: ResourceClass(handle, authorizer)
    - otherwise: ResourceClass()

After construction the marker's initializer runs, or failing that the
resource's own initialize() method if it has one.
"""

import inspect
from typing import Any

from catalog.application.collections.type_resolution import resolve_type
from catalog.domain.collections import CollectionDetails
from catalog.domain.errors import ResourceConstructionError
from catalog.domain.protocols.collection_protocols import DependencyProviderProtocol
from catalog.domain.protocols.logger_protocol import LoggerProtocol


def instantiate_resource(
    details: CollectionDetails,
    dependency_provider: DependencyProviderProtocol,
    authorizer: Any,
    logger: LoggerProtocol,
) -> Any:
    """Build and initialize the resource for one collection.

    Args:
        details: Registry entry.
        dependency_provider: Source of repository handles.
        authorizer: Passed unchanged to repository-backed resources.
        logger: Structured logger.

    Returns:
        The initialized resource.

    Raises:
        ResourceConstructionError: If resolving, constructing or initializing
            the resource fails. The original exception is chained.
    """
    try:
        return _build(details, dependency_provider, authorizer, logger)
    except Exception as e:
        raise ResourceConstructionError(
            collection=details.name,
            resource_type=details.resource_type,
            repository_type=details.repository_type,
            reason=f"{type(e).__name__}: {e}",
        ) from e


def _build(
    details: CollectionDetails,
    dependency_provider: DependencyProviderProtocol,
    authorizer: Any,
    logger: LoggerProtocol,
) -> Any:
    resource_class = resolve_type(details.resource_type) if details.factory is None else None

    handle = None
    if details.repository_type is not None:
        repository_class = resolve_type(details.repository_type)
        handle = dependency_provider.on_demand(repository_class)

    if details.factory is not None:
        logger.info(
            "resource_creating",
            resource_type=details.resource_type,
            repository_type=details.repository_type,
            shape="factory",
        )
        resource = details.factory(handle, authorizer)
    elif handle is not None:
        logger.info(
            "resource_creating",
            resource_type=details.resource_type,
            repository_type=details.repository_type,
            shape="repository",
        )
        resource = resource_class(handle, authorizer)
    else:
        logger.info(
            "resource_creating",
            resource_type=details.resource_type,
            shape="no_repository",
        )
        resource = resource_class()

    _initialize(resource, details, logger)
    return resource


def _initialize(resource: Any, details: CollectionDetails, logger: LoggerProtocol) -> None:
    if details.initializer is not None:
        logger.info("resource_initializing", resource_type=details.resource_type)
        details.initializer(resource)
        return

    hook = getattr(resource, "initialize", None)
    if not callable(hook):
        return
    if inspect.iscoroutinefunction(hook):
        raise TypeError("initialize() must be synchronous")

    logger.info("resource_initializing", resource_type=details.resource_type)
    hook()
