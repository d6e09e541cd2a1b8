"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Collection registry errors
    COLLECTION_DISCOVERY_FAILED = "collection_discovery_failed"
    COLLECTION_PATH_CONFLICT = "collection_path_conflict"
    COLLECTION_NOT_FOUND = "collection_not_found"
    RESOURCE_CONSTRUCTION_FAILED = "resource_construction_failed"

