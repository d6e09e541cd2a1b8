"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console adapter)
- Database (SQLAlchemy async engine and session factory)
- Repository handles (on-demand proxies over the database pool)
- Access token verification (JWT)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from catalog.core.config import settings

if TYPE_CHECKING:
    from catalog.domain.protocols.logger_protocol import LoggerProtocol
    from catalog.domain.protocols.token_verification_protocol import (
        TokenVerificationProtocol,
    )
    from catalog.infrastructure.persistence import (
        Database,
        OnDemandRepositoryProvider,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from catalog.infrastructure.logging.console_adapter import ConsoleAdapter

    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    return ConsoleAdapter(use_json=env != "development", level=settings.log_level)


@lru_cache()
def get_database() -> "Database":
    """Get database singleton (app-scoped).

    The engine owns the connection pool shared by every repository handle.

    Returns:
        Database instance.
    """
    from catalog.infrastructure.persistence.database import Database

    return Database(database_url=settings.database_url, echo=settings.db_echo)


@lru_cache()
def get_repository_provider() -> "OnDemandRepositoryProvider":
    """Get the dependency provider used to wire repository-backed resources.

    Returns:
        OnDemandRepositoryProvider bound to get_database().
    """
    from catalog.infrastructure.persistence.on_demand import OnDemandRepositoryProvider

    return OnDemandRepositoryProvider(get_database(), get_logger())


@lru_cache()
def get_token_service() -> "TokenVerificationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns:
        JWTService signing with settings.secret_key.
    """
    from catalog.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
    )
