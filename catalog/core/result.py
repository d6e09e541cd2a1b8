"""Success/Failure results for operations that fail as part of normal use.

Credential checks return a Result instead of raising: a bad token is an
expected outcome of an HTTP request, and callers branch on it with match.

Usage:
    match token_service.validate_access_token(token):
        case Success(value=claims):
            principal = claims["sub"]
        case Failure(error=error):
            reject(error)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Success[T]:
    """Operation succeeded with ``value``."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure[E]:
    """Operation failed with ``error``."""

    error: E


type Result[T, E] = Success[T] | Failure[E]
