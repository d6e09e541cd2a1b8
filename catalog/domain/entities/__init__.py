"""Catalog domain entities."""

from catalog.domain.entities.database import Database
from catalog.domain.entities.table import Table

__all__ = ["Database", "Table"]
