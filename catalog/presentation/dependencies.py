"""Request-scoped FastAPI dependencies.

Usage:
    from catalog.presentation.dependencies import RequestContextDep, PrincipalDep

    async def list_things(ctx: RequestContextDep, principal: PrincipalDep): ...
"""

from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from catalog.core.config import settings
from catalog.core.container import get_token_service
from catalog.core.result import Failure, Success
from catalog.domain.collections import RequestContext
from catalog.domain.protocols import TokenVerificationProtocol

if TYPE_CHECKING:
    from catalog.application.collections import CollectionRegistry


def get_request_context(request: Request) -> RequestContext:
    """Describe where the current request came from.

    The root path combines the ASGI root_path (set by a reverse proxy
    mounting the app under a sub-path) and the API prefix, so rendered
    hrefs point at the URLs clients actually call.

    Args:
        request: Incoming request.

    Returns:
        RequestContext for rendering absolute hrefs.
    """
    url = request.url
    return RequestContext(
        scheme=url.scheme,
        host=url.hostname or "localhost",
        port=url.port,
        root_path=request.scope.get("root_path", "").rstrip("/") + settings.api_prefix,
    )


# auto_error=False: a request without a bearer token is anonymous, not 401
bearer_scheme_optional = HTTPBearer(auto_error=False)


def get_principal(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme_optional)
    ],
    token_service: Annotated[TokenVerificationProtocol, Depends(get_token_service)],
) -> str:
    """Return the principal named by a verified bearer token.

    A request carrying no bearer token is the anonymous principal. A token
    that is present but fails verification is rejected rather than
    downgraded to anonymous, so clients learn their credential is bad.

    Args:
        credentials: Bearer token from the Authorization header, if any.
        token_service: Token verifier (injected).

    Returns:
        Principal name used as the authorization subject.

    Raises:
        HTTPException 401: If the token is invalid or expired.
    """
    if credentials is None:
        return settings.anonymous_principal

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=claims):
            return str(claims["sub"])
        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=error,
                headers={"WWW-Authenticate": "Bearer"},
            )


def get_registry(request: Request) -> "CollectionRegistry":
    """Return the registry the application was built from (see create_app)."""
    return request.app.state.collection_registry


RequestContextDep = Annotated[RequestContext, Depends(get_request_context)]
PrincipalDep = Annotated[str, Depends(get_principal)]
