"""Table repository implementation.

Maps between the Table domain entity and TableModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.entities.table import Table
from catalog.domain.enums import TableType
from catalog.infrastructure.persistence.models.database import DatabaseModel
from catalog.infrastructure.persistence.models.table import TableModel


class TableRepository:
    """SQLAlchemy implementation of TableRepositoryProtocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, table_id: UUID) -> Table | None:
        """Find table by ID.

        Args:
            table_id: Unique table identifier.

        Returns:
            Table entity if found, None otherwise.
        """
        stmt = select(TableModel).where(TableModel.id == table_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_entity(model)

    async def find_by_name(self, database_id: UUID, name: str) -> Table | None:
        """Find a table by name within one database."""
        stmt = select(TableModel).where(
            TableModel.database_id == database_id,
            TableModel.name == name,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_entity(model)

    async def list_all(
        self,
        *,
        database_id: UUID | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Table]:
        """List tables ordered by name.

        Args:
            database_id: Restrict to one database when given.
            limit: Maximum number of rows.
            offset: Rows to skip.

        Returns:
            Tables on the requested page.
        """
        stmt = select(TableModel)
        if database_id is not None:
            stmt = stmt.where(TableModel.database_id == database_id)
        stmt = stmt.order_by(TableModel.name).limit(limit).offset(offset)

        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def database_exists(self, database_id: UUID) -> bool:
        """Check whether the owning database exists."""
        stmt = select(DatabaseModel.id).where(DatabaseModel.id == database_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, table: Table) -> None:
        """Save a table (create or update).

        Args:
            table: Table entity to save.
        """
        stmt = select(TableModel).where(TableModel.id == table.id)
        result = await self._session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self._session.add(self._to_model(table))
        else:
            existing.name = table.name
            existing.table_type = table.table_type.value
            existing.description = table.description
            existing.updated_at = table.updated_at

        await self._session.flush()

    def _to_entity(self, model: TableModel) -> Table:
        return Table(
            id=model.id,
            database_id=model.database_id,
            name=model.name,
            table_type=TableType(model.table_type),
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Table) -> TableModel:
        return TableModel(
            id=entity.id,
            database_id=entity.database_id,
            name=entity.name,
            table_type=entity.table_type.value,
            description=entity.description,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
