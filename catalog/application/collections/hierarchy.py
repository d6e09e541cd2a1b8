"""Collection tree construction.

Parent/child relationships come from the paths alone: the parent of
``/v1/tables`` is whichever collection is registered at ``/v1``.
"""

from collections.abc import Iterable

from catalog.domain.collections import (
    ROOT_COLLECTION_NAME,
    CollectionDetails,
    parent_path,
)
from catalog.domain.errors import DuplicatePathError
from catalog.domain.protocols.logger_protocol import LoggerProtocol


def build_collection_tree(
    collections: Iterable[CollectionDetails],
    logger: LoggerProtocol,
) -> dict[str, CollectionDetails]:
    """Key collections by path and wire each into its parent's children.

    A collection whose parent path is not registered stays an orphan: it is
    reachable by its own path but listed under no parent. The root collection
    is never listed as a child. Children keep the iteration order of
    ``collections``. Every entry is frozen before returning.

    Args:
        collections: Discovered entries with no children yet.
        logger: Structured logger.

    Returns:
        Mapping of collection path to entry.

    Raises:
        DuplicatePathError: If two entries share a path.
    """
    tree: dict[str, CollectionDetails] = {}
    for details in collections:
        existing = tree.get(details.href)
        if existing is not None:
            raise DuplicatePathError(
                details.href, existing.resource_type, details.resource_type
            )
        tree[details.href] = details
        logger.info(
            "collection_initialized",
            collection=details.name,
            href=details.href,
            resource_type=details.resource_type,
            repository_type=details.repository_type,
        )

    for details in tree.values():
        if details.name == ROOT_COLLECTION_NAME:
            continue

        parent = tree.get(parent_path(details.href))
        if parent is None or parent is details:
            logger.debug(
                "collection_orphaned",
                collection=details.name,
                href=details.href,
            )
            continue

        parent.add_child(details.descriptor)
        logger.info(
            "collection_child_added",
            collection=details.name,
            parent=parent.name,
        )

    for details in tree.values():
        details.freeze()

    return tree
