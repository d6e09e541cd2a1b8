"""On-demand repository handles.

A handle stands in for a repository that needs a live session. Creating it
does no I/O; every awaited method call opens a session from the shared pool,
runs the repository method in that transaction and commits.

Usage:
    provider = OnDemandRepositoryProvider(database)
    tables = provider.on_demand(TableRepository)
    table = await tables.find_by_id(table_id)  # own session, committed
"""

import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from catalog.domain.protocols.logger_protocol import LoggerProtocol
from catalog.infrastructure.persistence.database import Database


class OnDemandRepository:
    """Proxy exposing a repository's async methods, one session per call.

    Attributes:
        repository_type: Repository class; instantiated as
            ``repository_type(session=session)``.
    """

    def __init__(self, database: Database, repository_type: type) -> None:
        self._database = database
        self.repository_type = repository_type

    def __getattr__(self, name: str) -> Callable[..., Awaitable[Any]]:
        if name.startswith("_"):
            raise AttributeError(name)

        method = getattr(self.repository_type, name)
        if not inspect.iscoroutinefunction(method):
            raise AttributeError(
                f"{self.repository_type.__name__}.{name} is not an async method"
            )

        @functools.wraps(method)
        async def call(*args: Any, **kwargs: Any) -> Any:
            async with self._database.get_session() as session:
                repository = self.repository_type(session=session)
                return await getattr(repository, name)(*args, **kwargs)

        return call

    def __repr__(self) -> str:
        return f"<OnDemandRepository({self.repository_type.__name__})>"


class OnDemandRepositoryProvider:
    """Dependency provider handing out OnDemandRepository handles."""

    def __init__(self, database: Database, logger: LoggerProtocol) -> None:
        self._database = database
        self._logger = logger

    def on_demand(self, repository_type: type) -> OnDemandRepository:
        """Return a handle bound to ``repository_type``.

        Raises:
            TypeError: If ``repository_type`` is not a class.
        """
        if not isinstance(repository_type, type):
            raise TypeError(f"Repository type must be a class, got {repository_type!r}")
        self._logger.debug(
            "repository_handle_created",
            repository_type=repository_type.__name__,
        )
        return OnDemandRepository(self._database, repository_type)
