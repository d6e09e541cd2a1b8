"""Collection registry factory.

The registry is built once per process. lru_cache does not guarantee a
single call under concurrent first access, so the build is guarded by an
explicit lock.
"""

import threading
from typing import TYPE_CHECKING

from catalog.core.config import settings
from catalog.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from catalog.application.collections import CollectionRegistry


# Module-level state for registry singleton
_registry: "CollectionRegistry | None" = None
_registry_lock = threading.Lock()


def get_collection_registry() -> "CollectionRegistry":
    """Get the collection registry, building it on first call.

    Discovery and tree building run exactly once, on whichever thread gets
    here first; every caller receives the same instance.

    Returns:
        The fully built CollectionRegistry.

    Raises:
        DuplicatePathError: If two collections declare the same path. The
            registry stays unbuilt and the next call retries.
    """
    global _registry

    registry = _registry
    if registry is not None:
        return registry

    with _registry_lock:
        if _registry is None:
            from catalog.application.collections import CollectionRegistry

            _registry = CollectionRegistry.from_discovery(
                settings.collection_packages, get_logger()
            )
        return _registry


def reset_collection_registry() -> None:
    """Drop the registry so the next call rebuilds it. Testing only."""
    global _registry

    with _registry_lock:
        _registry = None
