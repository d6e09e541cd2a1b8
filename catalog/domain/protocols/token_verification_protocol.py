"""Access token protocol (port).

The catalog does not log users in. Tokens are issued by an identity service
sharing the signing key, and the API only verifies them to learn who is
calling.
"""

from typing import Protocol

from catalog.core.result import Result


class TokenVerificationProtocol(Protocol):
    """Protocol for access token verification.

    Implementations:
        - JWTService: HMAC-signed JWTs (PyJWT)
    """

    def validate_access_token(self, token: str) -> Result[dict[str, object], str]:
        """Verify ``token`` and return its claims.

        Args:
            token: Encoded access token from the Authorization header.

        Returns:
            Success with the claims, or Failure with a reason when the
            signature, expiry or required claims do not check out.
        """
        ...
