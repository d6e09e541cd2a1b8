"""Unit tests for JWTService.

Tests cover:
- Issued tokens verify and carry the principal
- Tokens signed with another key, expired, or without a subject fail
- Secret key length check
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from catalog.core.result import Failure, Success
from catalog.infrastructure.security import JWTService
from catalog.infrastructure.security.jwt_service import INVALID_TOKEN

SECRET = "s" * 32


@pytest.fixture
def service():
    return JWTService(secret_key=SECRET)


def _encode(payload, key=SECRET):
    return jwt.encode(payload, key, algorithm="HS256")


def _in(minutes):
    return int((datetime.now(UTC) + timedelta(minutes=minutes)).timestamp())


@pytest.mark.unit
class TestJWTService:
    """Test token issue and verification."""

    def test_issued_token_verifies(self, service):
        result = service.validate_access_token(
            service.generate_access_token("data-steward")
        )

        assert isinstance(result, Success)
        assert result.value["sub"] == "data-steward"
        assert "jti" in result.value

    def test_token_signed_with_other_key_fails(self, service):
        forged = _encode({"sub": "admin", "exp": _in(5)}, key="x" * 32)

        assert service.validate_access_token(forged) == Failure(error=INVALID_TOKEN)

    def test_unsigned_token_fails(self, service):
        unsigned = jwt.encode({"sub": "admin", "exp": _in(5)}, None, algorithm="none")

        assert service.validate_access_token(unsigned) == Failure(error=INVALID_TOKEN)

    def test_expired_token_fails(self, service):
        expired = _encode({"sub": "data-steward", "exp": _in(-5)})

        assert service.validate_access_token(expired) == Failure(error=INVALID_TOKEN)

    def test_token_without_expiry_fails(self, service):
        assert service.validate_access_token(
            _encode({"sub": "data-steward"})
        ) == Failure(error=INVALID_TOKEN)

    def test_token_without_subject_fails(self, service):
        assert service.validate_access_token(
            _encode({"exp": _in(5)})
        ) == Failure(error=INVALID_TOKEN)

    def test_blank_subject_fails(self, service):
        assert service.validate_access_token(
            _encode({"sub": "  ", "exp": _in(5)})
        ) == Failure(error=INVALID_TOKEN)

    def test_garbage_fails(self, service):
        assert service.validate_access_token("not.a.token") == Failure(error=INVALID_TOKEN)

    def test_short_secret_rejected(self):
        with pytest.raises(ValueError, match="at least 32 bytes"):
            JWTService(secret_key="short")
