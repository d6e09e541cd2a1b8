"""Database domain entity.

A database is a named container of tables registered in the catalog.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Database:
    """Catalog database entity.

    Attributes:
        id: Unique database identifier.
        name: Unique database name (e.g., "sales").
        description: Optional free-text description.
        service: Name of the database service hosting it (e.g., "postgres-prod").
        created_at: When the database was registered.
        updated_at: When the database was last modified.

    Example:
        >>> database = Database(id=uuid7(), name="sales", service="warehouse")
        >>> database.name
        'sales'
    """

    id: UUID
    name: str
    service: str
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate database after initialization.

        Raises:
            ValueError: If required fields are invalid.
        """
        if not self.name:
            raise ValueError("Database name cannot be empty")

        if len(self.name) > 128:
            raise ValueError("Database name cannot exceed 128 characters")

        if not self.service:
            raise ValueError("Database service cannot be empty")
