"""Tables collection.

Endpoints:
    GET    /api/v1/tables       - List tables (optionally of one database)
    POST   /api/v1/tables       - Register a table
    GET    /api/v1/tables/{id}  - Get table details
"""

from typing import Annotated
from uuid import UUID

from fastapi import HTTPException, Path, Query, status
from uuid_extensions import uuid7

from catalog.domain.collections import RequestContext, collection
from catalog.domain.entities.table import Table
from catalog.domain.protocols import TableRepositoryProtocol
from catalog.infrastructure.persistence.repositories import TableRepository
from catalog.presentation.dependencies import PrincipalDep, RequestContextDep
from catalog.presentation.resources.base import RepositoryResource
from catalog.schemas.table_schemas import (
    TableCreateRequest,
    TableListResponse,
    TableResponse,
)


@collection(
    name="tables",
    path="/v1/tables",
    repository=TableRepository,
    description="Tables registered in the catalog",
)
class TableResource(RepositoryResource):
    """Tables registered in the catalog."""

    repository: TableRepositoryProtocol

    def add_routes(self) -> None:
        self.router.add_api_route(
            "",
            self.list_tables,
            methods=["GET"],
            response_model=TableListResponse,
            summary="List tables",
        )
        self.router.add_api_route(
            "",
            self.create_table,
            methods=["POST"],
            response_model=TableResponse,
            status_code=status.HTTP_201_CREATED,
            summary="Register table",
            responses={
                403: {"description": "Permission denied"},
                404: {"description": "Owning database not found"},
                409: {"description": "Table name already used in the database"},
            },
        )
        self.router.add_api_route(
            "/{table_id}",
            self.get_table,
            methods=["GET"],
            response_model=TableResponse,
            summary="Get table",
            responses={404: {"description": "Table not found"}},
        )

    def _to_response(self, table: Table, ctx: RequestContext) -> TableResponse:
        return TableResponse.from_entity(table, ctx.absolute(self.item_path(table.id)))

    async def list_tables(
        self,
        ctx: RequestContextDep,
        principal: PrincipalDep,
        database_id: Annotated[
            UUID | None, Query(description="Only tables of this database")
        ] = None,
        limit: Annotated[int, Query(ge=1, le=1000)] = 100,
        offset: Annotated[int, Query(ge=0)] = 0,
    ) -> TableListResponse:
        self.require_permission(principal, "read")

        tables = await self.repository.list_all(
            database_id=database_id, limit=limit, offset=offset
        )
        return TableListResponse(
            data=[self._to_response(t, ctx) for t in tables],
            total=len(tables),
        )

    async def get_table(
        self,
        ctx: RequestContextDep,
        principal: PrincipalDep,
        table_id: Annotated[UUID, Path(description="Table ID")],
    ) -> TableResponse:
        self.require_permission(principal, "read")

        table = await self.repository.find_by_id(table_id)
        if table is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Table not found: {table_id}",
            )
        return self._to_response(table, ctx)

    async def create_table(
        self,
        ctx: RequestContextDep,
        principal: PrincipalDep,
        data: TableCreateRequest,
    ) -> TableResponse:
        self.require_permission(principal, "write")

        if not await self.repository.database_exists(data.database_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Database not found: {data.database_id}",
            )
        if await self.repository.find_by_name(data.database_id, data.name) is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Table already registered in database: {data.name}",
            )

        table = Table(
            id=uuid7(),
            database_id=data.database_id,
            name=data.name,
            table_type=data.table_type,
            description=data.description,
        )
        await self.repository.save(table)
        return self._to_response(table, ctx)
