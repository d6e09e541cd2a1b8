"""Collection registry errors.

Error Types:
- DiscoveryError: A resource class carries malformed marker metadata.
  Isolated per class, never propagates past discovery.
- DuplicatePathError: Two resource classes declare the same path.
  Fatal to registry construction.
- UnknownCollectionError: A query names a path with no registered collection.
- ResourceConstructionError: Building or initializing one resource failed.
  Isolated per entry during registration.

Unlike the Result-based domain errors, these are raised: the registry runs at
startup, outside any request, and the failures either abort startup or are
caught at a single isolation point.
"""

from catalog.core.enums import ErrorCode


class CollectionError(Exception):
    """Base class for collection registry errors.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error message.
    """

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"


class DiscoveryError(CollectionError):
    """Marker metadata on a resource class could not be read.

    Attributes:
        resource_type: Dotted name of the offending class.
    """

    code = ErrorCode.COLLECTION_DISCOVERY_FAILED

    def __init__(self, resource_type: str, reason: str) -> None:
        super().__init__(f"Cannot discover collection {resource_type}: {reason}")
        self.resource_type = resource_type
        self.reason = reason


class DuplicatePathError(CollectionError):
    """Two collections declare the same path."""

    code = ErrorCode.COLLECTION_PATH_CONFLICT

    def __init__(self, path: str, existing_type: str, duplicate_type: str) -> None:
        super().__init__(
            f"Collection path {path} declared by both {existing_type} "
            f"and {duplicate_type}"
        )
        self.path = path
        self.existing_type = existing_type
        self.duplicate_type = duplicate_type


class UnknownCollectionError(CollectionError):
    """No collection is registered at the requested path."""

    code = ErrorCode.COLLECTION_NOT_FOUND

    def __init__(self, path: str) -> None:
        super().__init__(f"No collection registered at {path}")
        self.path = path


class ResourceConstructionError(CollectionError):
    """A resource could not be built, initialized or registered.

    The underlying exception is available as ``__cause__``.

    Attributes:
        collection: Collection name.
        resource_type: Dotted name of the resource class.
        repository_type: Dotted name of the repository class, if any.
    """

    code = ErrorCode.RESOURCE_CONSTRUCTION_FAILED

    def __init__(
        self,
        collection: str,
        resource_type: str,
        repository_type: str | None,
        reason: str,
    ) -> None:
        super().__init__(
            f"Failed to create resource {resource_type} "
            f"for collection {collection}: {reason}"
        )
        self.collection = collection
        self.resource_type = resource_type
        self.repository_type = repository_type
        self.reason = reason
