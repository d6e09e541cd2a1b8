"""Domain errors package.

Usage:
    from catalog.domain.errors import UnknownCollectionError
"""

from catalog.domain.errors.collection_error import (
    CollectionError,
    DiscoveryError,
    DuplicatePathError,
    ResourceConstructionError,
    UnknownCollectionError,
)

__all__ = [
    "CollectionError",
    "DiscoveryError",
    "DuplicatePathError",
    "ResourceConstructionError",
    "UnknownCollectionError",
]
