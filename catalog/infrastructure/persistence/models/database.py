"""Database model (catalog databases, not the connection)."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.infrastructure.persistence.base import BaseMutableModel


class DatabaseModel(BaseMutableModel):
    """Catalog database row.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        name: Unique database name
        service: Hosting database service name
        description: Optional description

    Indexes:
        - ix_databases_name: (name) UNIQUE
    """

    __tablename__ = "databases"

    name: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique database name",
    )

    service: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        comment="Database service hosting this database",
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
