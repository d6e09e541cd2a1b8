"""Credential verification adapters."""

from catalog.infrastructure.security.jwt_service import JWTService

__all__ = ["JWTService"]
