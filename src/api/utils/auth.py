"""
Bearer Token Authentication

FastAPI dependencies resolving the caller's identity from the
`Authorization: Bearer <token>` header.
"""

import logging
from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.api.error import ClientError
from src.app.services.token_service import TokenError, TokenService
from src.depends import get_token_service
from src.domain.identity import ANONYMOUS, AuthenticatedIdentity, Identity
from src.libs.result import Error

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(message: str) -> ClientError:
    return ClientError(
        Error("UNAUTHORIZED", message), status_code=status.HTTP_401_UNAUTHORIZED
    )


async def require_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedIdentity:
    """
    Resolve an authenticated identity or reject the request.

    Raises:
        ClientError: 401 if the header is missing, not Bearer, or the token
        is malformed, tampered with or expired
    """
    if credentials is None:
        raise _unauthorized("Authorization token required")

    try:
        claims = tokens.verify(credentials.credentials)
    except TokenError as exc:
        logger.info(f"Rejected token: {type(exc).__name__}")
        raise _unauthorized("Invalid or expired token")

    identity = AuthenticatedIdentity(
        id=claims.user_id, username=claims.username, email=claims.email
    )
    request.state.identity = identity
    return identity


async def optional_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """Like require_identity, but any failure yields the anonymous identity"""
    identity: Identity = ANONYMOUS
    if credentials is not None:
        try:
            claims = tokens.verify(credentials.credentials)
            identity = AuthenticatedIdentity(
                id=claims.user_id, username=claims.username, email=claims.email
            )
        except TokenError as exc:
            logger.debug(f"Ignoring token: {type(exc).__name__}")

    request.state.identity = identity
    return identity
