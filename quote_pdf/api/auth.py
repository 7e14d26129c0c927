"""
Bearer token verification.

The API only checks that a caller presents a token the configured
verifier accepts. The shipped verifier compares against the static
tokens in API_TOKENS; other verifiers plug in through get_token_verifier.

Dependencies: fastapi, secrets
System role: Request authentication for quote endpoints
"""

import logging
import secrets
from typing import Protocol

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(
    scheme_name="Bearer Token",
    description="API token issued for the quote PDF service",
    auto_error=False,
)


class BearerTokenVerifier(Protocol):
    """Decides whether a bearer token is allowed to call the API."""

    async def verify(self, token: str) -> bool: ...


class StaticTokenVerifier:
    """Accepts a fixed set of tokens."""

    def __init__(self, tokens: list[str]) -> None:
        self._tokens = [token for token in tokens if token]

    async def verify(self, token: str) -> bool:
        return any(secrets.compare_digest(token, valid) for valid in self._tokens)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_token_verifier() -> BearerTokenVerifier:
    """Token verifier dependency (wired from the service cache)."""
    from quote_pdf.api.deps.dependencies import get_service_cache

    return get_service_cache().token_verifier


async def require_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    verifier: BearerTokenVerifier = Depends(get_token_verifier),
) -> str:
    """
    Reject requests without a valid bearer token.

    Returns:
        str: The accepted token

    Raises:
        HTTPException(401): Missing header or token not accepted
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Missing bearer token")
    if not await verifier.verify(credentials.credentials):
        logger.warning("%s:require_bearer_token - Authentication failed: invalid token", __name__)
        raise _unauthorized("Invalid or expired token")
    return credentials.credentials
