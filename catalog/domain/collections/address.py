"""Hierarchical collection addresses.

A collection address is an absolute, slash-separated path such as
``/v1/tables``. The parent of an address is the address with its final
segment removed (``/v1/tables`` -> ``/v1``).
"""

from pathlib import PurePosixPath
from urllib.parse import urlsplit

# Name of the collection that anchors the tree. It never has a parent.
ROOT_COLLECTION_NAME = "root"


def validate_collection_path(path: object) -> str:
    """Check that ``path`` is a well-formed collection address.

    Args:
        path: Candidate address taken from a collection marker.

    Returns:
        The address, unchanged.

    Raises:
        ValueError: If the address is missing or malformed. The message
            names the problem.
    """
    if path is None or path == "":
        raise ValueError("missing collection path")
    if not isinstance(path, str):
        raise ValueError(f"path must be a string, got {type(path).__name__}")
    if any(character.isspace() for character in path):
        raise ValueError(f"path {path!r} contains whitespace")

    parts = urlsplit(path)
    if parts.scheme or parts.netloc or parts.query or parts.fragment:
        raise ValueError(f"path {path!r} must be a bare path, not a URL")
    if not path.startswith("/"):
        raise ValueError(f"path {path!r} must start with '/'")
    if path == "/":
        return path
    if path.endswith("/"):
        raise ValueError(f"path {path!r} must not end with '/'")

    for segment in path[1:].split("/"):
        if segment in {"", ".", ".."}:
            raise ValueError(f"path {path!r} has an empty or relative segment")
    return path


def parent_path(path: str) -> str:
    """Return the address one level above ``path``.

    Examples:
        >>> parent_path("/v1/tables")
        '/v1'
        >>> parent_path("/v1")
        '/'
    """
    return str(PurePosixPath(path).parent)
