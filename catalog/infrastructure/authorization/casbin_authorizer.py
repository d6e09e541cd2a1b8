"""Casbin implementation of AuthorizationProtocol.

RBAC over a model file and a CSV policy. Subjects are principal names;
roles are granted with ``g`` lines in the policy.

Reference policy (bundled):
    admin          any action on any resource
    data-steward   write databases and tables, plus reader
    reader         read anything
    anonymous      reader
"""

from pathlib import Path

import casbin

from catalog.domain.protocols.logger_protocol import LoggerProtocol

DEFAULT_MODEL_PATH = Path(__file__).with_name("model.conf")
DEFAULT_POLICY_PATH = Path(__file__).with_name("policy.csv")


class CasbinAuthorizer:
    """Casbin-based authorizer.

    Attributes:
        _enforcer: Casbin Enforcer instance.
        _logger: Structured logger.
    """

    def __init__(self, enforcer: casbin.Enforcer, logger: LoggerProtocol) -> None:
        self._enforcer = enforcer
        self._logger = logger

    @classmethod
    def from_files(
        cls,
        logger: LoggerProtocol,
        model_path: str | Path | None = None,
        policy_path: str | Path | None = None,
    ) -> "CasbinAuthorizer":
        """Create an authorizer from model and policy files.

        Args:
            logger: Structured logger.
            model_path: Casbin model file. Defaults to the bundled model.
            policy_path: Policy CSV. Defaults to the bundled policy.
        """
        model = str(model_path or DEFAULT_MODEL_PATH)
        policy = str(policy_path or DEFAULT_POLICY_PATH)
        enforcer = casbin.Enforcer(model, policy)
        logger.info("casbin_enforcer_initialized", model_path=model, policy_path=policy)
        return cls(enforcer, logger)

    def check_permission(self, subject: str, obj: str, action: str) -> bool:
        """Check if ``subject`` may perform ``action`` on ``obj``.

        Fails closed: enforcement errors are logged and deny access.

        Returns:
            bool: True if allowed, False if denied.
        """
        try:
            allowed = bool(self._enforcer.enforce(subject, obj, action))
        except Exception as e:
            self._logger.error(
                "authorization_check_error",
                error=e,
                subject=subject,
                resource=obj,
                action=action,
            )
            return False

        self._logger.info(
            "authorization_check",
            subject=subject,
            resource=obj,
            action=action,
            allowed=allowed,
        )
        return allowed
