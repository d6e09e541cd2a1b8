"""Collection registry.

The registry owns the map of collection path to CollectionDetails. It is
built once per process (see catalog.core.container.get_collection_registry)
and is read-only afterwards, so queries need no locking.

REST collections anchor the API as follows:
    /api/v1                  lists the top-level collections
    /api/v1/<collection>     serves that collection's resources
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from catalog.application.collections.discovery import discover_collections
from catalog.application.collections.hierarchy import build_collection_tree
from catalog.application.collections.instantiator import instantiate_resource
from catalog.domain.collections import (
    CollectionDescriptor,
    CollectionDetails,
    RequestContext,
)
from catalog.domain.errors import ResourceConstructionError, UnknownCollectionError
from catalog.domain.protocols.collection_protocols import (
    DependencyProviderProtocol,
    DispatcherProtocol,
)
from catalog.domain.protocols.logger_protocol import LoggerProtocol


@dataclass(kw_only=True)
class RegistrationReport:
    """Outcome of CollectionRegistry.register_all().

    Attributes:
        registered: Paths of collections whose resource was registered.
        failures: One error per collection that could not be registered.
    """

    registered: list[str] = field(default_factory=list)
    failures: list[ResourceConstructionError] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.registered)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures


class CollectionRegistry:
    """Registry of the REST collections served by the API.

    Attributes:
        collections: Read-only mapping of collection path to entry.
    """

    def __init__(
        self,
        collections: Mapping[str, CollectionDetails],
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registry over an already built collection tree.

        Args:
            collections: Output of build_collection_tree().
            logger: Structured logger.
        """
        self._collections: Mapping[str, CollectionDetails] = MappingProxyType(
            dict(collections)
        )
        self._logger = logger
        self._resources_registered = False

    @classmethod
    def from_discovery(
        cls,
        packages: Sequence[str],
        logger: LoggerProtocol,
    ) -> "CollectionRegistry":
        """Discover collections under ``packages`` and build the tree.

        Raises:
            DuplicatePathError: If two collections declare the same path.
        """
        tree = build_collection_tree(discover_collections(packages, logger), logger)
        logger.info("collection_registry_built", collections=len(tree))
        return cls(tree, logger)

    @property
    def collections(self) -> Mapping[str, CollectionDetails]:
        return self._collections

    def get(self, path: str) -> CollectionDetails:
        """Return the entry registered at ``path``.

        Raises:
            UnknownCollectionError: If no collection is registered there.
        """
        details = self._collections.get(path)
        if details is None:
            raise UnknownCollectionError(path)
        return details

    def get_children_of(
        self,
        path: str,
        request_context: RequestContext,
    ) -> list[CollectionDescriptor]:
        """Describe the child collections of ``path`` for one request.

        Returned descriptors are copies whose href is the absolute URL of
        the child for ``request_context``. Stored descriptors keep their
        paths, so concurrent callers never see each other's URLs.

        Args:
            path: Collection path (e.g., "/v1").
            request_context: Origin of the current request.

        Returns:
            Child descriptors in tree order.

        Raises:
            UnknownCollectionError: If no collection is registered at ``path``.
        """
        return [
            child.with_href(request_context.absolute(child.href))
            for child in self.get(path).children
        ]

    def register_all(
        self,
        dispatcher: DispatcherProtocol,
        dependency_provider: DependencyProviderProtocol,
        authorizer: Any,
    ) -> RegistrationReport:
        """Build every collection's resource and hand it to ``dispatcher``.

        A collection whose resource cannot be built, initialized or
        registered is logged and reported; the remaining collections are
        still registered.

        Args:
            dispatcher: HTTP dispatch layer.
            dependency_provider: Source of repository handles.
            authorizer: Shared authorization component.

        Returns:
            Which collections were registered and which failed.

        Raises:
            RuntimeError: If called more than once.
        """
        if self._resources_registered:
            raise RuntimeError("Collection resources are already registered")
        self._resources_registered = True

        report = RegistrationReport()
        for details in self._collections.values():
            try:
                self._register(details, dispatcher, dependency_provider, authorizer)
            except ResourceConstructionError as e:
                self._logger.error(
                    "resource_registration_failed",
                    error=e,
                    collection=details.name,
                    href=details.href,
                    resource_type=details.resource_type,
                    repository_type=details.repository_type,
                )
                report.failures.append(e)
                continue
            report.registered.append(details.href)

        self._logger.info(
            "collection_resources_registered",
            registered=report.succeeded,
            failed=report.failed,
        )
        return report

    def _register(
        self,
        details: CollectionDetails,
        dispatcher: DispatcherProtocol,
        dependency_provider: DependencyProviderProtocol,
        authorizer: Any,
    ) -> None:
        resource = instantiate_resource(
            details, dependency_provider, authorizer, self._logger
        )
        try:
            dispatcher.register(resource)
        except Exception as e:
            raise ResourceConstructionError(
                collection=details.name,
                resource_type=details.resource_type,
                repository_type=details.repository_type,
                reason=f"dispatcher rejected resource: {e}",
            ) from e
        self._logger.info(
            "resource_registered",
            collection=details.name,
            href=details.href,
            resource_type=details.resource_type,
        )
