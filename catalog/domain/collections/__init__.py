"""Collection model: descriptors, details, addresses and the declarative marker.

Usage:
    from catalog.domain.collections import collection, CollectionDescriptor

    @collection(name="tables", path="/v1/tables", repository=TableRepository)
    class TableResource(RepositoryResource):
        ...
"""

from catalog.domain.collections.address import (
    ROOT_COLLECTION_NAME,
    parent_path,
    validate_collection_path,
)
from catalog.domain.collections.descriptor import (
    CollectionDescriptor,
    CollectionDetails,
    RequestContext,
    ResourceFactory,
    ResourceInitializer,
)
from catalog.domain.collections.marker import (
    CollectionMarker,
    collection,
    get_collection_marker,
)

__all__ = [
    "ROOT_COLLECTION_NAME",
    "CollectionDescriptor",
    "CollectionDetails",
    "CollectionMarker",
    "RequestContext",
    "ResourceFactory",
    "ResourceInitializer",
    "collection",
    "get_collection_marker",
    "parent_path",
    "validate_collection_path",
]
