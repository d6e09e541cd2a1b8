"""Dispatcher handing collection resources to FastAPI.

Each resource carries an APIRouter already prefixed with its collection
path. Registering a resource mounts that router on the API router.
"""

from typing import Any

from fastapi import APIRouter


class RouterDispatcher:
    """DispatcherProtocol implementation backed by an APIRouter.

    Example:
        >>> api_router = APIRouter(prefix="/api")
        >>> dispatcher = RouterDispatcher(api_router)
        >>> registry.register_all(dispatcher, provider, authorizer)
        >>> app.include_router(api_router)
    """

    def __init__(self, router: APIRouter) -> None:
        self._router = router
        self._registered: list[Any] = []

    @property
    def resources(self) -> tuple[Any, ...]:
        """Resources registered so far, in registration order."""
        return tuple(self._registered)

    def register(self, resource: Any) -> None:
        """Mount the routes of ``resource``.

        Raises:
            TypeError: If the resource exposes no APIRouter.
        """
        router = getattr(resource, "router", None)
        if not isinstance(router, APIRouter):
            raise TypeError(
                f"{type(resource).__qualname__} has no APIRouter 'router' attribute"
            )
        self._router.include_router(router)
        self._registered.append(resource)
