"""TableRepository protocol."""

from typing import Protocol
from uuid import UUID

from catalog.domain.entities.table import Table


class TableRepositoryProtocol(Protocol):
    """Persistence port for Table entities."""

    async def find_by_id(self, table_id: UUID) -> Table | None:
        """Find table by ID."""
        ...

    async def find_by_name(self, database_id: UUID, name: str) -> Table | None:
        """Find a table by name within one database."""
        ...

    async def list_all(
        self,
        *,
        database_id: UUID | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Table]:
        """List tables ordered by name, optionally within one database."""
        ...

    async def database_exists(self, database_id: UUID) -> bool:
        """Check whether the owning database exists."""
        ...

    async def save(self, table: Table) -> None:
        """Create or update a table."""
        ...
