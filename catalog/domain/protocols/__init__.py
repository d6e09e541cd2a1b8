"""Domain protocols (ports).

Infrastructure and presentation adapters satisfy these structurally.
"""

from catalog.domain.protocols.authorization_protocol import AuthorizationProtocol
from catalog.domain.protocols.collection_protocols import (
    DependencyProviderProtocol,
    DispatcherProtocol,
)
from catalog.domain.protocols.database_repository import DatabaseRepositoryProtocol
from catalog.domain.protocols.logger_protocol import LoggerProtocol
from catalog.domain.protocols.table_repository import TableRepositoryProtocol
from catalog.domain.protocols.token_verification_protocol import (
    TokenVerificationProtocol,
)

__all__ = [
    "AuthorizationProtocol",
    "DatabaseRepositoryProtocol",
    "DependencyProviderProtocol",
    "DispatcherProtocol",
    "LoggerProtocol",
    "TableRepositoryProtocol",
    "TokenVerificationProtocol",
]
