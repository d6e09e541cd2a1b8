"""Domain enums."""

from catalog.domain.enums.table_type import TableType

__all__ = ["TableType"]
