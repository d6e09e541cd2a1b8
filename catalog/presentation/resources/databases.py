"""Databases collection.

Endpoints:
    GET    /api/v1/databases       - List databases
    POST   /api/v1/databases       - Register a database
    GET    /api/v1/databases/{id}  - Get database details

Reads require the "read" action on "databases", registration requires
"write".
"""

from typing import Annotated
from uuid import UUID

from fastapi import HTTPException, Path, Query, status
from uuid_extensions import uuid7

from catalog.domain.collections import RequestContext, collection
from catalog.domain.entities.database import Database
from catalog.domain.protocols import DatabaseRepositoryProtocol
from catalog.infrastructure.persistence.repositories import DatabaseRepository
from catalog.presentation.dependencies import PrincipalDep, RequestContextDep
from catalog.presentation.resources.base import RepositoryResource
from catalog.schemas.database_schemas import (
    DatabaseCreateRequest,
    DatabaseListResponse,
    DatabaseResponse,
)


@collection(
    name="databases",
    path="/v1/databases",
    repository=DatabaseRepository,
    description="Databases registered in the catalog",
)
class DatabaseResource(RepositoryResource):
    """Databases registered in the catalog."""

    repository: DatabaseRepositoryProtocol

    def add_routes(self) -> None:
        self.router.add_api_route(
            "",
            self.list_databases,
            methods=["GET"],
            response_model=DatabaseListResponse,
            summary="List databases",
        )
        self.router.add_api_route(
            "",
            self.create_database,
            methods=["POST"],
            response_model=DatabaseResponse,
            status_code=status.HTTP_201_CREATED,
            summary="Register database",
            responses={
                403: {"description": "Permission denied"},
                409: {"description": "Database name already registered"},
            },
        )
        self.router.add_api_route(
            "/{database_id}",
            self.get_database,
            methods=["GET"],
            response_model=DatabaseResponse,
            summary="Get database",
            responses={404: {"description": "Database not found"}},
        )

    def _to_response(self, database: Database, ctx: RequestContext) -> DatabaseResponse:
        return DatabaseResponse.from_entity(
            database, ctx.absolute(self.item_path(database.id))
        )

    async def list_databases(
        self,
        ctx: RequestContextDep,
        principal: PrincipalDep,
        limit: Annotated[int, Query(ge=1, le=1000)] = 100,
        offset: Annotated[int, Query(ge=0)] = 0,
    ) -> DatabaseListResponse:
        self.require_permission(principal, "read")

        databases = await self.repository.list_all(limit=limit, offset=offset)
        return DatabaseListResponse(
            data=[self._to_response(d, ctx) for d in databases],
            total=len(databases),
        )

    async def get_database(
        self,
        ctx: RequestContextDep,
        principal: PrincipalDep,
        database_id: Annotated[UUID, Path(description="Database ID")],
    ) -> DatabaseResponse:
        self.require_permission(principal, "read")

        database = await self.repository.find_by_id(database_id)
        if database is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Database not found: {database_id}",
            )
        return self._to_response(database, ctx)

    async def create_database(
        self,
        ctx: RequestContextDep,
        principal: PrincipalDep,
        data: DatabaseCreateRequest,
    ) -> DatabaseResponse:
        self.require_permission(principal, "write")

        if await self.repository.find_by_name(data.name) is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Database already registered: {data.name}",
            )

        database = Database(
            id=uuid7(),
            name=data.name,
            service=data.service,
            description=data.description,
        )
        await self.repository.save(database)
        return self._to_response(database, ctx)
