"""Root collection: the entry point of the API.

Endpoints:
    GET /api/v1 - List the top-level collections
"""

from typing import Annotated

from fastapi import Depends, status

from catalog.application.collections import CollectionRegistry
from catalog.domain.collections import ROOT_COLLECTION_NAME, collection
from catalog.presentation.dependencies import RequestContextDep, get_registry
from catalog.presentation.resources.base import CollectionResource
from catalog.schemas.collection_schemas import CollectionListResponse


@collection(
    name=ROOT_COLLECTION_NAME,
    path="/v1",
    description="Entry point listing the collections of the catalog API",
)
class RootResource(CollectionResource):
    """Entry point listing the collections of the catalog API."""

    def add_routes(self) -> None:
        self.router.add_api_route(
            "",
            self.list_collections,
            methods=["GET"],
            response_model=CollectionListResponse,
            status_code=status.HTTP_200_OK,
            summary="List collections",
            description="List the collections served by this API with absolute URLs.",
        )

    async def list_collections(
        self,
        ctx: RequestContextDep,
        registry: Annotated[CollectionRegistry, Depends(get_registry)],
    ) -> CollectionListResponse:
        return CollectionListResponse.from_descriptors(
            registry.get_children_of(self.collection_path, ctx)
        )
