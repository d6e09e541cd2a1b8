"""Authorization adapters."""

from catalog.infrastructure.authorization.casbin_authorizer import (
    DEFAULT_MODEL_PATH,
    DEFAULT_POLICY_PATH,
    CasbinAuthorizer,
)

__all__ = ["CasbinAuthorizer", "DEFAULT_MODEL_PATH", "DEFAULT_POLICY_PATH"]
