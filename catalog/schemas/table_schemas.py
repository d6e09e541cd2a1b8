"""Table request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from catalog.domain.entities.table import Table
from catalog.domain.enums import TableType


class TableCreateRequest(BaseModel):
    """Request body for registering a table."""

    database_id: UUID = Field(..., description="Owning database")
    name: str = Field(..., min_length=1, max_length=128, examples=["orders"])
    table_type: TableType = Field(default=TableType.REGULAR)
    description: str | None = Field(None, description="Optional description")


class TableResponse(BaseModel):
    """Table representation."""

    id: UUID
    database_id: UUID
    name: str
    table_type: TableType
    description: str | None
    href: str = Field(..., description="Absolute URL of this table")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, table: Table, href: str) -> "TableResponse":
        return cls(
            id=table.id,
            database_id=table.database_id,
            name=table.name,
            table_type=table.table_type,
            description=table.description,
            href=href,
            created_at=table.created_at,
            updated_at=table.updated_at,
        )


class TableListResponse(BaseModel):
    """Page of tables."""

    data: list[TableResponse]
    total: int = Field(..., description="Number of tables on this page")
