"""Database request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from catalog.domain.entities.database import Database


class DatabaseCreateRequest(BaseModel):
    """Request body for registering a database."""

    name: str = Field(..., min_length=1, max_length=128, examples=["sales"])
    service: str = Field(..., min_length=1, max_length=128, examples=["warehouse"])
    description: str | None = Field(None, description="Optional description")


class DatabaseResponse(BaseModel):
    """Database representation."""

    id: UUID
    name: str
    service: str
    description: str | None
    href: str = Field(..., description="Absolute URL of this database")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, database: Database, href: str) -> "DatabaseResponse":
        return cls(
            id=database.id,
            name=database.name,
            service=database.service,
            description=database.description,
            href=href,
            created_at=database.created_at,
            updated_at=database.updated_at,
        )


class DatabaseListResponse(BaseModel):
    """Page of databases."""

    data: list[DatabaseResponse]
    total: int = Field(..., description="Number of databases on this page")
