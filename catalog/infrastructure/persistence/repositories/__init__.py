"""Repository implementations."""

from catalog.infrastructure.persistence.repositories.database_repository import (
    DatabaseRepository,
)
from catalog.infrastructure.persistence.repositories.table_repository import (
    TableRepository,
)

__all__ = ["DatabaseRepository", "TableRepository"]
