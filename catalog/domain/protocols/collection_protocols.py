"""Ports used by the collection registry to hand off what it builds.

The registry never inspects what flows through these: resources go to the
dispatcher, repository handles go to resource constructors.
"""

from typing import Any, Protocol


class DispatcherProtocol(Protocol):
    """HTTP dispatch layer that serves registered resources."""

    def register(self, resource: Any) -> None:
        """Start serving ``resource``."""
        ...


class DependencyProviderProtocol(Protocol):
    """Factory for data-access handles.

    Handles are cheap proxies over a shared connection pool. Creating one
    performs no I/O.
    """

    def on_demand(self, repository_type: type) -> Any:
        """Return a handle bound to ``repository_type``."""
        ...
