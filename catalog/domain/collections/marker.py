"""Declarative collection marker.

Resource classes announce the collection they serve with the @collection
decorator. The decorator only attaches a CollectionMarker to the class;
discovery reads it later, so a malformed marker fails that one class at
startup instead of failing the import of its module.

Example:
    >>> @collection(
    ...     name="databases",
    ...     path="/v1/databases",
    ...     repository=DatabaseRepository,
    ...     description="Databases registered in the catalog",
    ... )
    ... class DatabaseResource(RepositoryResource):
    ...     pass
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from catalog.domain.collections.descriptor import ResourceFactory, ResourceInitializer

MARKER_ATTRIBUTE = "__collection__"

T = TypeVar("T", bound=type)


@dataclass(frozen=True, slots=True, kw_only=True)
class CollectionMarker:
    """Metadata attached to a resource class by @collection.

    Attributes:
        name: Collection name.
        path: Collection address (e.g., "/v1/tables").
        description: Documentation. Defaults to the class docstring.
        repository: Repository class, or its dotted name, when the resource
            is built with a data-access handle.
        factory: Explicit builder, called as factory(handle, authorizer).
        initializer: Explicit hook, called with the built resource.
    """

    name: str
    path: str | None
    description: str | None = None
    repository: type | str | None = None
    factory: ResourceFactory | None = None
    initializer: ResourceInitializer | None = None


def collection(
    name: str,
    *,
    path: str | None = None,
    repository: type | str | None = None,
    description: str | None = None,
    factory: ResourceFactory | None = None,
    initializer: ResourceInitializer | None = None,
) -> Callable[[T], T]:
    """Mark a resource class as the owner of a collection.

    Args:
        name: Collection name. The collection named "root" anchors the tree.
        path: Collection address.
        repository: Repository the resource depends on, as a class or
            dotted name.
        description: Documentation shown to API clients.
        factory: Explicit builder replacing the default constructor shapes.
        initializer: Explicit hook replacing the initialize() probe.

    Returns:
        Decorator returning the class unchanged apart from the marker.
    """

    def decorator(resource_class: T) -> T:
        setattr(
            resource_class,
            MARKER_ATTRIBUTE,
            CollectionMarker(
                name=name,
                path=path,
                description=description,
                repository=repository,
                factory=factory,
                initializer=initializer,
            ),
        )
        return resource_class

    return decorator


def get_collection_marker(resource_class: type) -> CollectionMarker | None:
    """Return the marker declared directly on ``resource_class``.

    Markers are not inherited: a subclass of a marked resource is not a
    collection unless it is marked itself.
    """
    marker = vars(resource_class).get(MARKER_ATTRIBUTE)
    return marker if isinstance(marker, CollectionMarker) else None
