"""DatabaseRepository protocol."""

from typing import Protocol
from uuid import UUID

from catalog.domain.entities.database import Database


class DatabaseRepositoryProtocol(Protocol):
    """Persistence port for Database entities."""

    async def find_by_id(self, database_id: UUID) -> Database | None:
        """Find database by ID."""
        ...

    async def find_by_name(self, name: str) -> Database | None:
        """Find database by its unique name."""
        ...

    async def list_all(self, *, limit: int = 100, offset: int = 0) -> list[Database]:
        """List databases ordered by name."""
        ...

    async def save(self, database: Database) -> None:
        """Create or update a database."""
        ...
