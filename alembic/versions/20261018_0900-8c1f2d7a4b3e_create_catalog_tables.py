"""create_catalog_tables

Revision ID: 8c1f2d7a4b3e
Revises:
Create Date: 2026-10-18 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8c1f2d7a4b3e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create databases and tables tables."""
    op.create_table(
        "databases",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "name",
            sa.String(length=128),
            nullable=False,
            comment="Unique database name",
        ),
        sa.Column(
            "service",
            sa.String(length=128),
            nullable=False,
            comment="Database service hosting this database",
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_databases_name", "databases", ["name"], unique=True)

    op.create_table(
        "tables",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("database_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=128), nullable=False),
        sa.Column(
            "table_type",
            sa.String(length=20),
            nullable=False,
            comment="Table type: regular, view, external",
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["database_id"], ["databases.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tables_database_id", "tables", ["database_id"])
    op.create_index(
        "ix_tables_database_name", "tables", ["database_id", "name"], unique=True
    )


def downgrade() -> None:
    """Drop databases and tables tables."""
    op.drop_index("ix_tables_database_name", table_name="tables")
    op.drop_index("ix_tables_database_id", table_name="tables")
    op.drop_table("tables")
    op.drop_index("ix_databases_name", table_name="databases")
    op.drop_table("databases")
