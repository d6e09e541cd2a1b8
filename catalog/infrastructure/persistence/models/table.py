"""Table model."""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from catalog.infrastructure.persistence.base import BaseMutableModel


class TableModel(BaseMutableModel):
    """Catalog table row.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        database_id: Owning database (FK databases.id, cascade delete)
        name: Table name, unique within its database
        table_type: regular, view or external
        description: Optional description

    Indexes:
        - ix_tables_database_name: (database_id, name) UNIQUE
    """

    __tablename__ = "tables"

    database_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("databases.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
    )

    table_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="regular",
        comment="Table type: regular, view, external",
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    __table_args__ = (
        Index("ix_tables_database_name", "database_id", "name", unique=True),
    )
