"""Table type classification."""

from enum import Enum


class TableType(str, Enum):
    """Kinds of tables tracked by the catalog.

    Attributes:
        REGULAR: Physical table.
        VIEW: View defined over other tables.
        EXTERNAL: Table backed by external storage.
    """

    REGULAR = "regular"
    VIEW = "view"
    EXTERNAL = "external"
