"""Base classes for collection resources.

A resource owns an APIRouter prefixed with its collection path and adds
its endpoints to it in add_routes(). The dispatcher mounts the router
once the registry has built the resource.
"""

from typing import Any

from fastapi import APIRouter, HTTPException, status

from catalog.domain.collections import get_collection_marker
from catalog.domain.protocols.authorization_protocol import AuthorizationProtocol


class CollectionResource:
    """Resource serving one collection.

    Attributes:
        collection_name: Name from the class's @collection marker.
        collection_path: Path from the class's @collection marker.
        router: Routes of this collection.
    """

    def __init__(self) -> None:
        marker = get_collection_marker(type(self))
        if marker is None or marker.path is None:
            raise TypeError(f"{type(self).__qualname__} is not marked with @collection")

        self.collection_name = marker.name
        self.collection_path = marker.path
        self.router = APIRouter(prefix=marker.path, tags=[marker.name])
        self.add_routes()

    def add_routes(self) -> None:
        """Add this collection's endpoints to self.router."""
        raise NotImplementedError

    def item_path(self, item_id: Any) -> str:
        return f"{self.collection_path}/{item_id}"


class RepositoryResource(CollectionResource):
    """Resource backed by a repository handle and guarded by an authorizer."""

    def __init__(self, repository: Any, authorizer: AuthorizationProtocol) -> None:
        self.repository = repository
        self.authorizer = authorizer
        super().__init__()

    def require_permission(self, principal: str, action: str) -> None:
        """Ensure ``principal`` may perform ``action`` on this collection.

        Raises:
            HTTPException: 403 if the authorizer denies the request.
        """
        if not self.authorizer.check_permission(principal, self.collection_name, action):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {action} on {self.collection_name}",
            )
