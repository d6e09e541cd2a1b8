"""Collection registry.

Discovers @collection resource classes, builds the collection tree from their
paths, and instantiates and registers their resources.

Modules:
    discovery: discover_collections() - find marked resource classes
    hierarchy: build_collection_tree() - path map with children wired
    instantiator: instantiate_resource() - build one resource
    registry: CollectionRegistry - query and registration surface
    type_resolution: dotted-name helpers

Usage:
    from catalog.application.collections import CollectionRegistry

    registry = CollectionRegistry.from_discovery(["catalog.presentation.resources"], logger)
    registry.register_all(dispatcher, dependency_provider, authorizer)
"""

from catalog.application.collections.discovery import (
    collection_details_for,
    discover_collections,
)
from catalog.application.collections.hierarchy import build_collection_tree
from catalog.application.collections.instantiator import instantiate_resource
from catalog.application.collections.registry import (
    CollectionRegistry,
    RegistrationReport,
)
from catalog.application.collections.type_resolution import resolve_type, type_name

__all__ = [
    "CollectionRegistry",
    "RegistrationReport",
    "build_collection_tree",
    "collection_details_for",
    "discover_collections",
    "instantiate_resource",
    "resolve_type",
    "type_name",
]
