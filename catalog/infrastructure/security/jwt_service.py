"""JWT access tokens (adapter).

Tokens are HS256-signed and carry the calling principal in ``sub``. The
principal is the Casbin subject the resources authorize against.
"""

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from catalog.core.result import Failure, Result, Success

INVALID_TOKEN = "Invalid or expired access token"


class JWTService:
    """Issue and verify principal access tokens.

    Usage:
        from catalog.core.container import get_token_service

        token = get_token_service().generate_access_token("data-steward")
        result = get_token_service().validate_access_token(token)
    """

    def __init__(self, secret_key: str, expiration_minutes: int = 30) -> None:
        """Initialize the service.

        Args:
            secret_key: HMAC signing key, at least 32 bytes.
            expiration_minutes: Lifetime of issued tokens.

        Raises:
            ValueError: If secret_key is shorter than 32 bytes.
        """
        if len(secret_key) < 32:
            raise ValueError("JWT secret key must be at least 32 bytes (256 bits)")

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"

    def generate_access_token(self, principal: str) -> str:
        """Issue a token naming ``principal``.

        Used by operators and tests; regular clients get their tokens from
        the identity service.
        """
        now = datetime.now(UTC)
        payload = {
            "sub": principal,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=self._expiration_minutes)).timestamp()),
            "jti": str(uuid7()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[dict[str, object], str]:
        """Verify signature and expiry, and require a non-empty ``sub``.

        Returns:
            Success with the claims, or Failure(INVALID_TOKEN).
        """
        try:
            payload: dict[str, object] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except InvalidTokenError:
            return Failure(error=INVALID_TOKEN)

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject.strip():
            return Failure(error=INVALID_TOKEN)
        return Success(value=payload)
