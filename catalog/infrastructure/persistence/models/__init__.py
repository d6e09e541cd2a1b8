"""Database models.

Importing this package registers every model on BaseModel.metadata.
"""

from catalog.infrastructure.persistence.models.database import DatabaseModel
from catalog.infrastructure.persistence.models.table import TableModel

__all__ = ["DatabaseModel", "TableModel"]
