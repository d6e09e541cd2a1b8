"""Authorization protocol (port) for RBAC access control.

Usage:
    allowed = authorizer.check_permission("alice", "databases", "write")
"""

from typing import Protocol


class AuthorizationProtocol(Protocol):
    """Protocol for authorization systems.

    Implementations:
        - CasbinAuthorizer: Casbin enforcer over file policies

    Error Handling:
        Permission checks return bool (fail-closed design). Enforcement
        errors are logged, never raised.
    """

    def check_permission(self, subject: str, obj: str, action: str) -> bool:
        """Check whether ``subject`` may perform ``action`` on ``obj``.

        Args:
            subject: Principal name.
            obj: Resource name (databases, tables, ...).
            action: Action name (read, write).

        Returns:
            bool: True if allowed, False if denied.
        """
        ...
