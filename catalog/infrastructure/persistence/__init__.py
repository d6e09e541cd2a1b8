"""Persistence: SQLAlchemy engine, models, repositories and on-demand handles."""

from catalog.infrastructure.persistence.base import BaseModel, BaseMutableModel
from catalog.infrastructure.persistence.database import Database
from catalog.infrastructure.persistence.on_demand import (
    OnDemandRepository,
    OnDemandRepositoryProvider,
)

__all__ = [
    "BaseModel",
    "BaseMutableModel",
    "Database",
    "OnDemandRepository",
    "OnDemandRepositoryProvider",
]
