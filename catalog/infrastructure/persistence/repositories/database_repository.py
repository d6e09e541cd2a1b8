"""Database repository implementation.

Maps between the Database domain entity and DatabaseModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.entities.database import Database
from catalog.infrastructure.persistence.models.database import DatabaseModel


class DatabaseRepository:
    """SQLAlchemy implementation of DatabaseRepositoryProtocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, database_id: UUID) -> Database | None:
        """Find database by ID.

        Args:
            database_id: Unique database identifier.

        Returns:
            Database entity if found, None otherwise.
        """
        stmt = select(DatabaseModel).where(DatabaseModel.id == database_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def find_by_name(self, name: str) -> Database | None:
        """Find database by name.

        Args:
            name: Database name.

        Returns:
            Database entity if found, None otherwise.
        """
        stmt = select(DatabaseModel).where(DatabaseModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def list_all(self, *, limit: int = 100, offset: int = 0) -> list[Database]:
        """List databases ordered by name.

        Args:
            limit: Maximum number of rows.
            offset: Rows to skip.

        Returns:
            Databases on the requested page.
        """
        stmt = (
            select(DatabaseModel)
            .order_by(DatabaseModel.name)
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def save(self, database: Database) -> None:
        """Save a database (create or update).

        Args:
            database: Database entity to save.
        """
        stmt = select(DatabaseModel).where(DatabaseModel.id == database.id)
        result = await self._session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self._session.add(self._to_model(database))
        else:
            existing.name = database.name
            existing.service = database.service
            existing.description = database.description
            existing.updated_at = database.updated_at

        await self._session.flush()

    def _to_entity(self, model: DatabaseModel) -> Database:
        return Database(
            id=model.id,
            name=model.name,
            service=model.service,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Database) -> DatabaseModel:
        return DatabaseModel(
            id=entity.id,
            name=entity.name,
            service=entity.service,
            description=entity.description,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
