"""Authorization dependency factories."""

from functools import lru_cache
from typing import TYPE_CHECKING

from catalog.core.config import settings
from catalog.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from catalog.domain.protocols.authorization_protocol import AuthorizationProtocol


@lru_cache()
def get_authorizer() -> "AuthorizationProtocol":
    """Get the Casbin authorizer singleton (app-scoped).

    Model and policy files come from settings, falling back to the bundled
    RBAC model and policy.

    Returns:
        Authorizer implementing AuthorizationProtocol.
    """
    from catalog.infrastructure.authorization.casbin_authorizer import CasbinAuthorizer

    return CasbinAuthorizer.from_files(
        get_logger(),
        model_path=settings.casbin_model_path,
        policy_path=settings.casbin_policy_path,
    )
