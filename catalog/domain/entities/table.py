"""Table domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from catalog.domain.enums import TableType


@dataclass
class Table:
    """Catalog table entity.

    Attributes:
        id: Unique table identifier.
        database_id: Owning database.
        name: Table name, unique within its database.
        table_type: Regular, view or external table.
        description: Optional free-text description.
        created_at: When the table was registered.
        updated_at: When the table was last modified.
    """

    id: UUID
    database_id: UUID
    name: str
    table_type: TableType = TableType.REGULAR
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate table after initialization.

        Raises:
            ValueError: If required fields are invalid.
        """
        if not self.name:
            raise ValueError("Table name cannot be empty")

        if len(self.name) > 128:
            raise ValueError("Table name cannot exceed 128 characters")
